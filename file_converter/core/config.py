from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

from file_converter.services.conversion_service import CompletionSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "File Converter"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Azure OpenAI chat completions
    AZURE_OPENAI_ENDPOINT: str = ""
    AZURE_OPENAI_API_KEY: str = ""
    AZURE_OPENAI_DEPLOYMENT: str = "gpt-35"
    AZURE_OPENAI_API_VERSION: str = "2023-05-15"
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    REQUEST_TIMEOUT_SECONDS: float = 60.0

    # Uploads
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    LOG_LEVEL: str = "INFO"

    # CORS (comma-separated string)
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8000"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def completion_settings(self) -> CompletionSettings:
        return CompletionSettings(
            endpoint=self.AZURE_OPENAI_ENDPOINT,
            api_key=self.AZURE_OPENAI_API_KEY,
            deployment=self.AZURE_OPENAI_DEPLOYMENT,
            api_version=self.AZURE_OPENAI_API_VERSION,
            model=self.OPENAI_MODEL,
            timeout=self.REQUEST_TIMEOUT_SECONDS,
        )

settings = Settings()
