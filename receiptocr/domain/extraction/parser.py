"""Assemble per-field extractors into ExtractionResult records."""

from __future__ import annotations

from receiptocr.domain.extraction.amounts import find_amount
from receiptocr.domain.extraction.banks import find_bank
from receiptocr.domain.extraction.dates import find_date_time
from receiptocr.domain.extraction.references import find_cash_reference, find_reference
from receiptocr.domain.extraction.text import collapse_whitespace
from receiptocr.domain.models import ExtractionResult


def parse_bank_text(text: str | None) -> ExtractionResult:
    """Extract amount, reference, date-time and issuing bank from a bank-transfer transcript."""
    txt = collapse_whitespace(text)
    if not txt:
        return ExtractionResult()
    return ExtractionResult(
        raw_text=txt,
        suggested_amount=find_amount(txt),
        suggested_ref=find_reference(txt),
        suggested_date_time=find_date_time(txt),
        suggested_bank=find_bank(txt),
    )


def parse_cash_text(text: str | None) -> ExtractionResult:
    """Extract fields from an official (cash) receipt; there is never a bank."""
    txt = collapse_whitespace(text)
    if not txt:
        return ExtractionResult()
    return ExtractionResult(
        raw_text=txt,
        suggested_amount=find_amount(txt),
        suggested_ref=find_cash_reference(txt),
        suggested_date_time=find_date_time(txt),
    )
