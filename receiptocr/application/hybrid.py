from __future__ import annotations

import asyncio

from receiptocr.core.logging import get_logger
from receiptocr.domain.errors import UnsupportedInputError
from receiptocr.domain.models import ReceiptSuggestion
from receiptocr.domain.recognition.selector import RawInput, ReceiptTextRecognizer, read_image_payload
from receiptocr.application.suggest import build_suggestion, suggest_from_receipt, suggest_from_text
from receiptocr.infrastructure.ocr.remote_vision_http import RemoteVisionClient

logger = get_logger(__name__)


async def _remote_suggestion(image: bytes, remote: RemoteVisionClient) -> ReceiptSuggestion:
    result, word_count = await remote.recognize(image)
    logger.info("remote_ocr_used", extra={"word_count": word_count})
    return build_suggestion(result.text, result.confidence, source="remote")


async def process_receipt(
    payload: RawInput,
    recognizer: ReceiptTextRecognizer,
    remote: RemoteVisionClient | None = None,
    *,
    confidence_threshold: float | None = None,
    force_remote: bool = False,
) -> ReceiptSuggestion:
    """Local recognition first; remote OCR when local confidence is low.

    A failed remote call keeps the local suggestion and records the error.
    """
    if isinstance(payload, str) or payload is None:
        return suggest_from_text(payload)

    try:
        image = await asyncio.to_thread(read_image_payload, payload)
    except (UnsupportedInputError, OSError, ValueError):
        logger.warning("unsupported_receipt_payload", exc_info=True, extra={"input_type": type(payload).__name__})
        return build_suggestion("", 0.0, source="tesseract", confidence_threshold=confidence_threshold)

    if force_remote and remote is not None:
        try:
            return await _remote_suggestion(image, remote)
        except Exception as exc:
            logger.warning("remote_ocr_failed", exc_info=True)
            local = await suggest_from_receipt(image, recognizer, confidence_threshold=confidence_threshold)
            return local.model_copy(update={"fallback_error": str(exc)})

    local = await suggest_from_receipt(image, recognizer, confidence_threshold=confidence_threshold)
    if not local.should_fallback or remote is None:
        return local

    try:
        return await _remote_suggestion(image, remote)
    except Exception as exc:
        logger.warning("remote_ocr_fallback_failed", exc_info=True)
        return local.model_copy(update={"fallback_error": str(exc)})
