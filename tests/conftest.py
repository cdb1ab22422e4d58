from __future__ import annotations

import io

import pytest
from PIL import Image

from receiptocr.domain.errors import RasterTransformError, RecognitionError
from receiptocr.domain.models import RecognitionResult, SegmentationMode

E2E_TEXT = (
    "Transfer amount PHP 9,000.00 Ref No. ABC123456 Date: Sep 21, 2025 10:20 AM BDO to BPI"
)


class FakeOCR:
    """OCRPort fake: text keyed by source bytes or (source, mode)."""

    def __init__(
        self,
        texts: dict | None = None,
        default: str = "",
        confidence: float = 80.0,
        fail_on: tuple[bytes, ...] = (),
    ) -> None:
        self.texts = texts or {}
        self.default = default
        self.confidence = confidence
        self.fail_on = fail_on
        self.calls: list[tuple[bytes, SegmentationMode | None]] = []

    async def recognize(self, source: bytes, segmentation_mode: SegmentationMode | None = None) -> RecognitionResult:
        self.calls.append((source, segmentation_mode))
        if source in self.fail_on:
            raise RecognitionError("engine crashed")
        text = self.texts.get((source, segmentation_mode), self.texts.get(source, self.default))
        return RecognitionResult(text=text, confidence=self.confidence)


class FakeRaster:
    """RasterTransform fake tagging the buffer with the applied angle."""

    def rotate(self, buffer: bytes, angle: int) -> bytes:
        return buffer + b"|rot%d" % angle


class BrokenRaster:
    def rotate(self, buffer: bytes, angle: int) -> bytes:
        raise RasterTransformError("corrupt image")


def make_png(size: tuple[int, int] = (40, 20), mark: tuple[int, int] | None = (0, 0)) -> bytes:
    image = Image.new("RGB", size, (255, 255, 255))
    if mark is not None:
        image.putpixel(mark, (0, 0, 0))
    out = io.BytesIO()
    image.save(out, "PNG")
    return out.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()
