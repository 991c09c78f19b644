from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional
import enum


def normalize_extension(value: Optional[str]) -> str:
    """Canonical form for formats and extensions: no leading dot, lowercase."""
    if not value:
        return ""
    value = value.strip()
    if value.startswith("."):
        value = value[1:]
    return value.lower()


def file_extension(file_name: Optional[str]) -> str:
    if not file_name or "." not in file_name:
        return ""
    return normalize_extension(file_name.rsplit(".", 1)[-1])


class FileFormat(str, enum.Enum):
    JAVA = "java"
    SWIFT = "swift"

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @classmethod
    def parse(cls, value: str) -> "FileFormat":
        return cls(normalize_extension(value))


SUPPORTED_FORMATS = [f.value for f in FileFormat]


class ValidationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_format_error: str = ""
    file_required_error: str = ""
    same_format_error: str = ""
    instructions_required_error: str = ""

    @property
    def is_valid(self) -> bool:
        return not (
            self.file_format_error
            or self.file_required_error
            or self.same_format_error
            or self.instructions_required_error
        )


class ConversionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_format: FileFormat
    target_format: FileFormat
    file_name: str = Field(..., min_length=1)
    file_content: str = Field(..., min_length=1)
    instructions: str

    @field_validator("source_format", "target_format", mode="before")
    def parse_format(cls, v):
        if isinstance(v, str):
            return normalize_extension(v)
        return v

    @field_validator("instructions")
    def validate_instructions(cls, v):
        if not v.strip():
            raise ValueError("instructions must not be blank")
        return v

    @model_validator(mode="after")
    def validate_formats(self):
        if self.source_format == self.target_format:
            raise ValueError("source and target formats must differ")
        if file_extension(self.file_name) != self.source_format.value:
            raise ValueError(f"file extension must be {self.source_format.extension}")
        return self


class ConversionResult(BaseModel):
    text: str = ""
    file_name: str


class ConversionResponse(BaseModel):
    converted_content: str
    filename: str
    message: str


class Notification(BaseModel):
    message: str = ""
    is_open: bool = False
