from fastapi import APIRouter, Depends, UploadFile, File as FileParam, HTTPException, Form, Request, Response
from fastapi.responses import JSONResponse
from typing import Optional
from urllib.parse import quote
import logging

from file_converter.core.config import settings
from file_converter.core.dependencies import get_conversion_service
from file_converter.schemas.conversion import ConversionResponse, ValidationState
from file_converter.services.conversion_service import (
    ConversionService,
    UploadTooLargeError,
    download_filename,
    read_upload,
)
from file_converter.services.validation_service import validation_service
from file_converter.services.workflow_service import ConverterWorkflow, WorkflowStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert", tags=["Code Conversion"])


def _file_name(file: Optional[UploadFile]) -> Optional[str]:
    # browsers send an empty part when no file is chosen
    if file is None or not file.filename:
        return None
    return file.filename


@router.post("/validate", response_model=ValidationState)
async def validate_form(
    source_format: str = Form(""),
    target_format: str = Form(""),
    instructions: str = Form(""),
    file: Optional[UploadFile] = FileParam(None),
):
    return validation_service.validate_fields(
        source_format, target_format, _file_name(file), instructions
    )


@router.post("/", response_model=ConversionResponse)
async def convert_file(
    source_format: str = Form(""),
    target_format: str = Form(""),
    instructions: str = Form(""),
    file: Optional[UploadFile] = FileParam(None),
    conversion_service: ConversionService = Depends(get_conversion_service),
):
    workflow = ConverterWorkflow(conversion_service)

    async def read_content() -> str:
        return await read_upload(file, max_bytes=settings.MAX_UPLOAD_BYTES)

    try:
        result = await workflow.submit(
            source_format, target_format, _file_name(file), read_content, instructions
        )
    except UploadTooLargeError as exc:
        logger.warning("Rejected upload %s: %s", _file_name(file), exc)
        raise HTTPException(status_code=413, detail="File too large")

    if workflow.status == WorkflowStatus.INVALID:
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation failed", "errors": workflow.validation.model_dump()},
        )
    if result is None:
        raise HTTPException(status_code=502, detail=workflow.notification.message)

    return ConversionResponse(
        converted_content=result.text,
        filename=result.file_name,
        message=workflow.notification.message,
    )


@router.post("/download", response_class=Response)
async def download_converted(
    request: Request,
    file_name: str = Form(...),
    target_format: str = Form(...),
):
    # an empty result is still a result; only a missing field is rejected
    form = await request.form()
    content = form.get("content")
    if not isinstance(content, str):
        raise HTTPException(status_code=422, detail="content is required")

    filename = download_filename(file_name, target_format)
    quoted = quote(filename)
    if quoted != filename:
        content_disposition = f"attachment; filename*=utf-8''{quoted}"
    else:
        content_disposition = f'attachment; filename="{filename}"'

    return Response(
        content=content.encode("utf-8"),
        media_type="text/plain",
        headers={"Content-Disposition": content_disposition}
    )
