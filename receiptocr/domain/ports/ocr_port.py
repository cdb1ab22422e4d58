"""OCRPort protocol for the pixel-to-text capability."""

from __future__ import annotations

from typing import Protocol

from receiptocr.domain.models import RecognitionResult, SegmentationMode


class OCRPort(Protocol):
    """Abstraction over an OCR engine used by the recognition search.

    Implementations may raise ``RecognitionError``; callers go through
    ``RecognitionAdapter`` which contains it.
    """

    async def recognize(
        self, source: bytes, segmentation_mode: SegmentationMode | None = None
    ) -> RecognitionResult: ...
