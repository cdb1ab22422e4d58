"""Local OCR engine backed by Tesseract (pytesseract)."""

from __future__ import annotations

import asyncio
import io
from collections import defaultdict

import pytesseract
from PIL import Image
from pytesseract import Output

from receiptocr.core.logging import get_logger
from receiptocr.domain.errors import RecognitionError
from receiptocr.domain.models import RecognitionResult, SegmentationMode

logger = get_logger(__name__)


class TesseractEngine:
    """OCRPort implementation running Tesseract in a worker thread.

    Words are grouped into lines by (block, paragraph, line); the reported
    confidence is the mean of the non-negative word confidences.
    """

    def __init__(self, lang: str = "eng", timeout: float = 30.0, tesseract_cmd: str | None = None) -> None:
        self.lang = lang
        self.timeout = timeout
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        logger.info("tesseract_engine_initialized", extra={"lang": self.lang})

    async def recognize(
        self, source: bytes, segmentation_mode: SegmentationMode | None = None
    ) -> RecognitionResult:
        return await asyncio.to_thread(self._recognize_sync, source, segmentation_mode)

    def _recognize_sync(self, source: bytes, segmentation_mode: SegmentationMode | None) -> RecognitionResult:
        config = f"--psm {int(segmentation_mode)}" if segmentation_mode else ""
        try:
            with Image.open(io.BytesIO(source)) as image:
                image.load()
                data = pytesseract.image_to_data(
                    image,
                    lang=self.lang,
                    config=config,
                    output_type=Output.DICT,
                    timeout=self.timeout,
                )
        except Exception as exc:
            raise RecognitionError(f"Tesseract failed: {exc}") from exc
        return words_to_result(data)


def _word_confidence(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return -1.0


def words_to_result(data: dict[str, list]) -> RecognitionResult:
    """Fold pytesseract ``image_to_data`` output into line text and mean confidence."""
    lines: dict[tuple[int, int, int], list[str]] = defaultdict(list)
    confidences: list[float] = []

    for i, raw in enumerate(data.get("text", [])):
        word = str(raw or "").strip()
        if not word:
            continue
        key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
        lines[key].append(word)
        conf = _word_confidence(data["conf"][i])
        if conf >= 0:
            confidences.append(conf)

    text = "\n".join(" ".join(words) for words in lines.values())
    confidence = sum(confidences) / len(confidences) if confidences else 0.0
    return RecognitionResult(text=text, confidence=round(confidence, 2))
