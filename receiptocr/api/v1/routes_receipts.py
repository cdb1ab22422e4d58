from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from receiptocr.api.dependencies import get_recognizer, get_remote_client
from receiptocr.application.hybrid import process_receipt
from receiptocr.application.suggest import extract_receipt_fields
from receiptocr.core.config import get_settings
from receiptocr.core.logging import get_logger
from receiptocr.domain.models import ExtractionResult, ReceiptSuggestion
from receiptocr.domain.recognition.selector import ReceiptTextRecognizer
from receiptocr.infrastructure.ocr.remote_vision_http import RemoteVisionClient
from receiptocr.observability.errors import to_http_error

router = APIRouter(prefix="/v1/receipts", tags=["receipts"])

ALLOWED_SUFFIXES = {".png", ".jpg", ".jpeg", ".webp", ".bmp", ".tif", ".tiff"}


async def _read_input(file: UploadFile | None, text: str | None) -> bytes | str:
    """Uploaded image bytes, or the submitted text when no file is given."""
    if file is None:
        if text is None or not text.strip():
            raise to_http_error("EMPTY_INPUT")
        return text

    suffix = Path(file.filename or "").suffix.lower()
    if suffix not in ALLOWED_SUFFIXES:
        raise to_http_error("UNSUPPORTED_FILE_TYPE")

    limit = get_settings().MAX_UPLOAD_BYTES
    try:
        content = await file.read(limit + 1)
    except Exception as e:
        raise to_http_error("UPLOAD_READ_FAILED", message=f"Failed to read uploaded file: {e}")
    finally:
        await file.close()

    if len(content) > limit:
        raise to_http_error("FILE_TOO_LARGE")
    if not content:
        raise to_http_error("EMPTY_INPUT")
    return content


@router.post("/extract", response_model=ExtractionResult, response_model_by_alias=True)
async def extract_fields(
    file: Optional[UploadFile] = File(None),
    text: Optional[str] = Form(None),
    recognizer: ReceiptTextRecognizer = Depends(get_recognizer),
):
    logger = get_logger(__name__)
    payload = await _read_input(file, text)
    logger.info("extract_request_received", extra={"input_kind": "text" if isinstance(payload, str) else "image"})
    return await extract_receipt_fields(payload, recognizer)


@router.post("/suggest", response_model=ReceiptSuggestion, response_model_by_alias=True)
async def suggest(
    file: Optional[UploadFile] = File(None),
    text: Optional[str] = Form(None),
    force_remote: bool = Form(False),
    recognizer: ReceiptTextRecognizer = Depends(get_recognizer),
    remote: Optional[RemoteVisionClient] = Depends(get_remote_client),
):
    logger = get_logger(__name__)
    payload = await _read_input(file, text)
    logger.info("suggest_request_received", extra={"input_kind": "text" if isinstance(payload, str) else "image"})
    return await process_receipt(payload, recognizer, remote, force_remote=force_remote)
