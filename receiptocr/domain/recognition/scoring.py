"""Heuristic scores over OCR transcripts and parsed suggestions."""

from __future__ import annotations

import re

from receiptocr.domain.models import ExtractionResult

EMPTY_TEXT_SCORE = -1e6

_DIGIT_RE = re.compile(r"\d")
_CURRENCY_RE = re.compile(r"(?:₱|\bPH(?:P|p)\b)")
_RECEIPT_KEYWORD_RE = re.compile(
    r"\b(amount|reference|ref|transaction|txn|date|time|transfer|account|receipt|invoice)\b",
    re.IGNORECASE,
)
_TRUST_KEYWORD_RE = re.compile(
    r"\b(amount|total|ref|reference|txn|transaction|official\s+receipt|invoice|date|time)\b",
    re.IGNORECASE,
)


def score_text(text: str) -> float:
    """Rank a transcript by how much it reads like a payment receipt.

    Money and keyword hits dominate so a short legible receipt beats a long
    garbled transcript.
    """
    if not text:
        return EMPTY_TEXT_SCORE
    length = len(text)
    digits = len(_DIGIT_RE.findall(text))
    currency = len(_CURRENCY_RE.findall(text))
    keywords = len(_RECEIPT_KEYWORD_RE.findall(text))
    density = digits / max(10, length)
    return length * 0.1 + digits * 1.5 + currency * 8 + keywords * 5 + density * 40


def trust_score(text: str) -> float:
    """Rough signal of whether a transcript is worth pre-filling a form from."""
    if not text:
        return 0
    digits = len(_DIGIT_RE.findall(text))
    currency = len(_CURRENCY_RE.findall(text))
    keywords = len(_TRUST_KEYWORD_RE.findall(text))
    return digits + currency * 5 + keywords * 4


def suggestion_score(result: ExtractionResult) -> int:
    return (
        (3 if result.suggested_amount else 0)
        + (3 if result.suggested_ref else 0)
        + (1 if result.suggested_date_time else 0)
        + (1 if result.suggested_bank else 0)
    )
