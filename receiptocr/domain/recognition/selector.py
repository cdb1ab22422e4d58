"""Best-transcript search over orientation x segmentation-mode variants."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Union

from receiptocr.core.logging import get_logger
from receiptocr.domain.errors import UnsupportedInputError
from receiptocr.domain.models import RecognitionResult, ScoredCandidate, SegmentationMode, Variant
from receiptocr.domain.ports.ocr_port import OCRPort
from receiptocr.domain.ports.raster_port import RasterTransform
from receiptocr.domain.recognition.adapter import RecognitionAdapter
from receiptocr.domain.recognition.orientation import OrientationVariantGenerator
from receiptocr.domain.recognition.scoring import score_text

logger = get_logger(__name__)

ImagePayload = Union[bytes, bytearray, memoryview, IO[bytes], os.PathLike]
RawInput = Union[str, ImagePayload, None]

DEFAULT_MODES: tuple[SegmentationMode, ...] = (SegmentationMode.SINGLE_BLOCK, SegmentationMode.SPARSE_TEXT)
TEXT_INPUT_CONFIDENCE = 100.0


def read_image_payload(payload: ImagePayload) -> bytes:
    """Return the encoded image bytes of ``payload`` without mutating it.

    Seekable file objects are left at the position they were read from.

    Raises UnsupportedInputError for anything that is not a raster buffer,
    a readable binary file object or a filesystem path.
    """
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    if isinstance(payload, os.PathLike):
        try:
            return Path(payload).read_bytes()
        except OSError as exc:
            raise UnsupportedInputError(f"Cannot read image file: {exc}") from exc
    read = getattr(payload, "read", None)
    if callable(read):
        seekable = getattr(payload, "seekable", None)
        position = payload.tell() if callable(seekable) and seekable() else None
        data = read()
        if position is not None:
            payload.seek(position)
        if isinstance(data, (bytes, bytearray)):
            return bytes(data)
        raise UnsupportedInputError("File object must be opened in binary mode")
    raise UnsupportedInputError(f"Unsupported input type: {type(payload).__name__}")


class ReceiptTextRecognizer:
    """Picks the most receipt-like transcript among recognition variants.

    Variants run one at a time, angle in the outer loop and segmentation
    mode in the inner loop. Only a strictly higher score replaces the
    current best, so ties keep the earliest variant.
    """

    def __init__(
        self,
        engine: OCRPort,
        raster: RasterTransform | None = None,
        *,
        segmentation_modes: Sequence[SegmentationMode] = DEFAULT_MODES,
    ) -> None:
        self._adapter = RecognitionAdapter(engine)
        self._orientation = OrientationVariantGenerator(raster)
        self._modes = tuple(SegmentationMode(m) for m in segmentation_modes) or DEFAULT_MODES

    async def select(self, payload: ImagePayload) -> ScoredCandidate:
        source = await asyncio.to_thread(read_image_payload, payload)
        best = ScoredCandidate(variant=None, result=RecognitionResult(text="", confidence=0), score=float("-inf"))

        for angle in self._orientation.angles:
            rotated = await self._orientation.rotate(source, angle)
            for mode in self._modes:
                variant = Variant(source=rotated, angle=angle, mode=mode)
                result = await self._adapter.recognize(variant.source, variant.mode)
                score = score_text(result.text)
                logger.debug(
                    "variant_scored",
                    extra={"variant": variant.label, "score": round(score, 2), "confidence": result.confidence},
                )
                if score > best.score:
                    best = ScoredCandidate(variant=variant, result=result, score=score)

        logger.info(
            "best_variant_selected",
            extra={"variant": best.variant.label if best.variant else None, "score": round(best.score, 2)},
        )
        return best

    async def recognize_best_text(self, payload: RawInput) -> RecognitionResult:
        """Best transcript for an image; text input is returned trimmed at confidence 100."""
        if payload is None:
            return RecognitionResult(text="", confidence=0)
        if isinstance(payload, str):
            return RecognitionResult(text=payload.strip(), confidence=TEXT_INPUT_CONFIDENCE)
        candidate = await self.select(payload)
        return candidate.result
