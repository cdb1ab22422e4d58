"""Field extraction heuristics for receipt transcripts.

Each extractor takes a whitespace-collapsed string and returns a nullable
value; none of them raise on empty or garbage input.
"""

from receiptocr.domain.extraction.amounts import find_amount
from receiptocr.domain.extraction.banks import BANK_PATTERNS, find_bank, infer_bank_by_context
from receiptocr.domain.extraction.dates import find_date, find_date_span, find_date_time, find_time
from receiptocr.domain.extraction.parser import parse_bank_text, parse_cash_text
from receiptocr.domain.extraction.references import find_cash_reference, find_reference

__all__ = [
    "BANK_PATTERNS",
    "find_amount",
    "find_bank",
    "find_cash_reference",
    "find_date",
    "find_date_span",
    "find_date_time",
    "find_reference",
    "find_time",
    "infer_bank_by_context",
    "parse_bank_text",
    "parse_cash_text",
]
