from typing import Optional

from file_converter.schemas.conversion import (
    SUPPORTED_FORMATS,
    ValidationState,
    file_extension,
    normalize_extension,
)

FILE_REQUIRED_MESSAGE = "File is required"
FILE_EMPTY_MESSAGE = "File is empty"
SAME_FORMAT_MESSAGE = "Change the output format"
INSTRUCTIONS_REQUIRED_MESSAGE = "Instructions are required"
UNSUPPORTED_FORMAT_MESSAGE = "Select an input format: " + ", ".join(
    f".{fmt}" for fmt in SUPPORTED_FORMATS
)


def file_format_message(source_format: Optional[str]) -> str:
    source = normalize_extension(source_format)
    if source not in SUPPORTED_FORMATS:
        return UNSUPPORTED_FORMAT_MESSAGE
    return f"Selected file format must be .{source}"


class ValidationService:
    @staticmethod
    def validate_fields(
        source_format: Optional[str],
        target_format: Optional[str],
        file_name: Optional[str],
        instructions: Optional[str],
    ) -> ValidationState:
        """Run all four form checks and return a fresh ValidationState.

        Every check is evaluated on each call; none short-circuits another.
        A missing file is reported by both the file-format and the
        file-required slots. Formats outside the supported set count as
        unselected: an unknown source fails the file-format check and an
        unknown target fails the output-format check.
        """
        source = normalize_extension(source_format)
        target = normalize_extension(target_format)
        has_file = bool(file_name)

        file_format_error = ""
        if (
            not has_file
            or source not in SUPPORTED_FORMATS
            or file_extension(file_name) != source
        ):
            file_format_error = file_format_message(source)

        same_format_error = ""
        if source == target or target not in SUPPORTED_FORMATS:
            same_format_error = SAME_FORMAT_MESSAGE

        return ValidationState(
            file_format_error=file_format_error,
            file_required_error="" if has_file else FILE_REQUIRED_MESSAGE,
            same_format_error=same_format_error,
            instructions_required_error=(
                "" if instructions and instructions.strip() else INSTRUCTIONS_REQUIRED_MESSAGE
            ),
        )

    @staticmethod
    def validate_content(state: ValidationState, file_content: str) -> ValidationState:
        """Recheck a valid form once the file has been read."""
        if file_content:
            return state
        return state.model_copy(update={"file_required_error": FILE_EMPTY_MESSAGE})

    @staticmethod
    def is_convert_disabled(
        source_format: Optional[str],
        target_format: Optional[str],
        file_name: Optional[str],
        instructions: Optional[str],
    ) -> bool:
        return not ValidationService.validate_fields(
            source_format, target_format, file_name, instructions
        ).is_valid

validation_service = ValidationService()
