from __future__ import annotations

from receiptocr.core.logging import get_logger
from receiptocr.domain.extraction.text import collapse_whitespace
from receiptocr.domain.models import RecognitionResult, SegmentationMode
from receiptocr.domain.ports.ocr_port import OCRPort

logger = get_logger(__name__)


class RecognitionAdapter:
    """Runs one OCR pass and contains its failures.

    Empty text means "no signal" to callers and always carries zero
    confidence; engine errors never escape.
    """

    def __init__(self, engine: OCRPort) -> None:
        self._engine = engine

    async def recognize(
        self, source: bytes, segmentation_mode: SegmentationMode | None = None
    ) -> RecognitionResult:
        try:
            raw = await self._engine.recognize(source, segmentation_mode)
        except Exception:
            logger.warning(
                "ocr_variant_failed",
                exc_info=True,
                extra={"segmentation_mode": int(segmentation_mode) if segmentation_mode else None},
            )
            return RecognitionResult(text="", confidence=0)
        text = collapse_whitespace(raw.text)
        if not text:
            return RecognitionResult(text="", confidence=0)
        confidence = min(max(float(raw.confidence or 0), 0.0), 100.0)
        return RecognitionResult(text=text, confidence=confidence)
