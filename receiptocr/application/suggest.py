"""Receipt suggestion use cases.

Outputs are suggestions for a human reviewer and are never committed as
payment data by this package.
"""

from __future__ import annotations

from receiptocr.core.config import get_settings
from receiptocr.core.logging import get_logger
from receiptocr.domain.extraction.parser import parse_bank_text, parse_cash_text
from receiptocr.domain.extraction.text import collapse_whitespace
from receiptocr.domain.models import ExtractionResult, ReceiptSuggestion
from receiptocr.domain.recognition.scoring import suggestion_score, trust_score
from receiptocr.domain.recognition.selector import RawInput, ReceiptTextRecognizer

logger = get_logger(__name__)


def _is_empty(payload: RawInput) -> bool:
    if payload is None:
        return True
    if isinstance(payload, str):
        return not payload.strip()
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return len(payload) == 0
    return False


async def extract_receipt_fields(
    payload: RawInput, recognizer: ReceiptTextRecognizer | None = None
) -> ExtractionResult:
    """Suggested payment fields for an image or already-recognized text.

    Never raises: absent, unsupported or unreadable input yields an
    all-null result.
    """
    if _is_empty(payload):
        return ExtractionResult()
    if isinstance(payload, str):
        return parse_bank_text(payload)
    if recognizer is None:
        logger.warning("extract_skipped_no_recognizer", extra={"input_type": type(payload).__name__})
        return ExtractionResult()
    try:
        recognized = await recognizer.recognize_best_text(payload)
    except Exception:
        logger.exception("extract_recognition_failed", extra={"input_type": type(payload).__name__})
        return ExtractionResult()
    return parse_bank_text(recognized.text)


def build_suggestion(
    raw_text: str,
    confidence: float,
    *,
    source: str,
    confidence_threshold: float | None = None,
    manual_score_threshold: float | None = None,
) -> ReceiptSuggestion:
    """Parse one transcript as both a bank transfer and a cash receipt and pick a winner."""
    settings = get_settings()
    if confidence_threshold is None:
        confidence_threshold = settings.CONFIDENCE_THRESHOLD
    if manual_score_threshold is None:
        manual_score_threshold = settings.MANUAL_SCORE_THRESHOLD

    raw = collapse_whitespace(raw_text)
    bank = parse_bank_text(raw)
    cash = parse_cash_text(raw)
    winner = bank if suggestion_score(bank) >= suggestion_score(cash) else cash
    has_any = bank.has_transaction_fields() or cash.has_transaction_fields()

    return ReceiptSuggestion(
        raw_text=raw,
        confidence=confidence,
        source=source,
        bank=bank,
        cash=cash,
        winner=winner,
        should_manual=trust_score(raw) < manual_score_threshold or not has_any,
        should_fallback=source != "text" and confidence < confidence_threshold,
    )


def suggest_from_text(text: str | None) -> ReceiptSuggestion:
    """Suggestion for text recognized elsewhere; treated as fully confident."""
    return build_suggestion(text or "", 100.0, source="text")


async def suggest_from_receipt(
    payload: RawInput,
    recognizer: ReceiptTextRecognizer,
    *,
    confidence_threshold: float | None = None,
) -> ReceiptSuggestion:
    if isinstance(payload, str) or payload is None:
        return suggest_from_text(payload)
    try:
        recognized = await recognizer.recognize_best_text(payload)
    except Exception:
        logger.exception("suggest_recognition_failed", extra={"input_type": type(payload).__name__})
        return build_suggestion("", 0.0, source="tesseract", confidence_threshold=confidence_threshold)
    return build_suggestion(
        recognized.text,
        recognized.confidence,
        source="tesseract",
        confidence_threshold=confidence_threshold,
    )
