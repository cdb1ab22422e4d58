"""FastAPI dependencies resolving the pipeline handles built at startup."""

from __future__ import annotations

from fastapi import Request

from receiptocr.domain.recognition.selector import ReceiptTextRecognizer
from receiptocr.infrastructure.ocr.remote_vision_http import RemoteVisionClient
from receiptocr.observability.errors import to_http_error


async def get_recognizer(request: Request) -> ReceiptTextRecognizer:
    recognizer = getattr(request.app.state, "recognizer", None)
    if recognizer is None:
        raise to_http_error("RECOGNIZER_UNAVAILABLE")
    return recognizer


async def get_remote_client(request: Request) -> RemoteVisionClient | None:
    return getattr(request.app.state, "remote_client", None)
