import asyncio
import enum
import logging
from typing import Awaitable, Callable, Optional, Tuple

from file_converter.schemas.conversion import (
    ConversionRequest,
    ConversionResult,
    Notification,
    ValidationState,
)
from file_converter.services.conversion_service import (
    ConversionError,
    ConversionService,
    UploadTooLargeError,
    download_filename,
)
from file_converter.services.validation_service import validation_service

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Conversion completed!"
FAILURE_MESSAGE = "Error converting file. Check console for details."


class WorkflowStatus(str, enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    CONVERTING = "converting"
    CONVERTED = "converted"
    FAILED = "failed"


class ConverterWorkflow:
    """State of one converter form: validation errors, result and notification.

    A submission runs validate -> read -> convert. Only the convert step
    suspends on the network; the read is awaited first and its text is
    handed to the call. Validation errors stay inline and never open the
    notification; upstream failures open exactly one.
    """

    def __init__(self, conversion_service: ConversionService):
        self.conversion_service = conversion_service
        self.status = WorkflowStatus.IDLE
        self.validation = ValidationState()
        self.result: Optional[ConversionResult] = None
        self.show_result = False
        self.notification = Notification()

    async def submit(
        self,
        source_format: str,
        target_format: str,
        file_name: Optional[str],
        read_content: Callable[[], Awaitable[str]],
        instructions: str,
    ) -> Optional[ConversionResult]:
        self.status = WorkflowStatus.VALIDATING
        self.validation = validation_service.validate_fields(
            source_format, target_format, file_name, instructions
        )
        if not self.validation.is_valid:
            # idle again, with the errors shown inline
            self.status = WorkflowStatus.INVALID
            return None

        self.status = WorkflowStatus.CONVERTING
        try:
            file_content = await read_content()
        except (asyncio.CancelledError, UploadTooLargeError):
            self.status = WorkflowStatus.IDLE
            raise

        self.validation = validation_service.validate_content(self.validation, file_content)
        if not self.validation.is_valid:
            self.status = WorkflowStatus.INVALID
            return None

        request = ConversionRequest(
            source_format=source_format,
            target_format=target_format,
            file_name=file_name,
            file_content=file_content,
            instructions=instructions,
        )
        try:
            text = await self.conversion_service.convert(
                request.file_content, request.instructions
            )
        except asyncio.CancelledError:
            self.status = WorkflowStatus.IDLE
            raise
        except ConversionError as exc:
            logger.error("Error converting file %s: %s", file_name, exc)
            self.show_result = False
            self.status = WorkflowStatus.FAILED
            self.notification = Notification(message=FAILURE_MESSAGE, is_open=True)
            return None

        self.result = ConversionResult(
            text=text,
            file_name=download_filename(request.file_name, request.target_format.value),
        )
        self.show_result = True
        self.status = WorkflowStatus.CONVERTED
        self.notification = Notification(message=SUCCESS_MESSAGE, is_open=True)
        logger.info("Converted %s -> %s", request.file_name, self.result.file_name)
        return self.result

    def dismiss_notification(self) -> None:
        self.notification = Notification()
        if self.status in (WorkflowStatus.CONVERTED, WorkflowStatus.FAILED):
            self.status = WorkflowStatus.IDLE

    def download(self) -> Tuple[str, bytes]:
        if self.result is None:
            raise ConversionError("Nothing to download")
        return self.result.file_name, self.result.text.encode("utf-8")
