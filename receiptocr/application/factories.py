from __future__ import annotations

from functools import lru_cache

from receiptocr.core.config import get_settings
from receiptocr.domain.models import SegmentationMode
from receiptocr.domain.recognition.selector import ReceiptTextRecognizer
from receiptocr.infrastructure.ocr.remote_vision_http import RemoteVisionClient
from receiptocr.infrastructure.ocr.tesseract_engine import TesseractEngine
from receiptocr.infrastructure.raster.pillow_rotator import PillowRotator


@lru_cache(maxsize=1)
def build_ocr_engine() -> TesseractEngine:
    s = get_settings()
    return TesseractEngine(lang=s.OCR_LANG, timeout=s.OCR_TIMEOUT_SECONDS, tesseract_cmd=s.TESSERACT_CMD)


def build_rotator() -> PillowRotator | None:
    s = get_settings()
    if not s.ROTATION_ENABLED:
        return None
    return PillowRotator(contrast=s.CONTRAST_FACTOR)


def build_recognizer() -> ReceiptTextRecognizer:
    s = get_settings()
    return ReceiptTextRecognizer(
        build_ocr_engine(),
        build_rotator(),
        segmentation_modes=[SegmentationMode(m) for m in s.SEGMENTATION_MODES],
    )


def build_remote_client() -> RemoteVisionClient | None:
    s = get_settings()
    if not s.REMOTE_OCR_URL:
        return None
    return RemoteVisionClient(
        url=s.REMOTE_OCR_URL,
        timeout_seconds=s.REMOTE_OCR_TIMEOUT_SECONDS,
        verify_ssl=s.REMOTE_OCR_VERIFY_SSL,
    )
