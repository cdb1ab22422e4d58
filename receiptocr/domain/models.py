"""Domain models for receipt recognition and field extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Angle = Literal[0, 90, 180, 270]
ANGLES: tuple[Angle, ...] = (0, 90, 180, 270)


class SegmentationMode(IntEnum):
    """Tesseract page segmentation modes used by the variant search."""

    SINGLE_BLOCK = 6
    SPARSE_TEXT = 11


class _Contract(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class RecognitionResult(_Contract):
    """Text recognized from one source. Confidence (0-100) is advisory only."""

    text: str = ""
    confidence: float = 0.0


class ExtractionResult(_Contract):
    """Suggested payment fields; every field is independently nullable."""

    raw_text: str = ""
    suggested_amount: float | None = None
    suggested_ref: str | None = None
    suggested_date_time: str | None = None
    suggested_bank: str | None = None

    def has_transaction_fields(self) -> bool:
        return bool(self.suggested_amount or self.suggested_ref or self.suggested_date_time)


class ReceiptSuggestion(_Contract):
    """Bank and cash parses of one transcript plus review hints for the UI."""

    raw_text: str
    confidence: float
    source: Literal["text", "tesseract", "remote"]
    bank: ExtractionResult
    cash: ExtractionResult
    winner: ExtractionResult
    should_manual: bool
    should_fallback: bool
    fallback_error: str | None = None


@dataclass(frozen=True)
class Variant:
    """One recognition attempt: a source rotated by ``angle`` and read with ``mode``."""

    source: bytes
    angle: Angle
    mode: SegmentationMode

    @property
    def label(self) -> str:
        prefix = "orig" if self.angle == 0 else f"rot{self.angle}"
        return f"{prefix}-psm{int(self.mode)}"


@dataclass(frozen=True)
class ScoredCandidate:
    variant: Variant | None
    result: RecognitionResult
    score: float


@dataclass(frozen=True)
class DateSpan:
    """A normalized date and the offsets of the text it was read from."""

    iso_date: str
    match_start: int
    match_end: int


@dataclass(frozen=True)
class BankPattern:
    name: str
    patterns: tuple[re.Pattern[str], ...]

    def matches(self, segment: str) -> bool:
        return any(p.search(segment) for p in self.patterns)
