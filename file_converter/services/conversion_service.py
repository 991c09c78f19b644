import httpx
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from file_converter.schemas.conversion import normalize_extension

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Raised when the completion endpoint cannot produce a result."""


class UploadTooLargeError(ValueError):
    pass


@dataclass(frozen=True)
class CompletionSettings:
    endpoint: str
    api_key: str
    deployment: str = "gpt-35"
    api_version: str = "2023-05-15"
    model: str = "gpt-3.5-turbo"
    timeout: float = 60.0

    @property
    def url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/openai/deployments/{self.deployment}/chat/completions"


async def read_upload(file, max_bytes: Optional[int] = None) -> str:
    """Read an uploaded file in one go and decode it as text."""
    content = await file.read()
    if max_bytes is not None and len(content) > max_bytes:
        raise UploadTooLargeError(f"File too large ({len(content)} bytes)")
    if isinstance(content, str):
        return content
    return content.decode("utf-8", errors="replace")


def download_filename(original_name: str, target_format: str) -> str:
    # "Foo.java" -> "Foo.swift"; everything after the first dot is dropped
    base_name = original_name.split(".")[0]
    return f"{base_name}.{normalize_extension(target_format)}"


class ConversionService:
    FAILURE_MESSAGE = "Failed to convert file using Azure OpenAI"

    def __init__(
        self,
        config: CompletionSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

    def build_payload(self, file_content: str, instructions: str) -> Dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": instructions},
                {"role": "user", "content": file_content},
            ],
        }

    @staticmethod
    def extract_content(data: Any) -> str:
        """Return choices[0].message.content, or "" when it is missing."""
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list):
            logger.error("Completion response has no choices list: %r", data)
            raise ConversionError(ConversionService.FAILURE_MESSAGE)
        if not choices or not isinstance(choices[0], dict):
            return ""
        message = choices[0].get("message")
        if not isinstance(message, dict):
            return ""
        content = message.get("content")
        return content if isinstance(content, str) else ""

    async def convert(self, file_content: str, instructions: str) -> str:
        if not self.config.endpoint:
            logger.error("AZURE_OPENAI_ENDPOINT is not configured")
            raise ConversionError(self.FAILURE_MESSAGE)

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.config.url,
                    params={"api-version": self.config.api_version},
                    headers={"api-key": self.config.api_key},
                    json=self.build_payload(file_content, instructions),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Completion endpoint returned %s: %s",
                exc.response.status_code,
                exc.response.text[:500],
            )
            raise ConversionError(self.FAILURE_MESSAGE) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.exception("Error during Azure OpenAI API call")
            raise ConversionError(self.FAILURE_MESSAGE) from exc

        return self.extract_content(data)
