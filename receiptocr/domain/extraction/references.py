"""Reference number extraction for bank transfers and cash receipts."""

from __future__ import annotations

import re

_SEP = r"[-\s:.#]*"
_NUMERIC_RE = re.compile(r"\b\d{6,20}\b")


def _labeled(label: str, qualifiers: str, min_len: int = 6) -> re.Pattern[str]:
    # The qualifier ("No.", "ID", ...) is optional, but never captured as the code itself.
    return re.compile(
        rf"\b{label}\b{_SEP}(?:(?:{qualifiers})\b\.?)?{_SEP}"
        rf"(?!(?:{qualifiers})\b)([A-Z0-9][A-Z0-9-]{{{min_len - 1},}})\b",
        re.IGNORECASE,
    )


BANK_REF_PATTERNS: tuple[re.Pattern[str], ...] = (
    _labeled(r"ref(?:erence)?", r"no|number|id"),
    _labeled(r"conf(?:irmation)?", r"no|number|id"),
    _labeled(r"(?:txn|trans(?:action)?)", r"id|no|code"),
    _labeled(r"trace", r"no|number|id"),
)

CASH_REF_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "O.R." needs its dots unless written in capitals
    _labeled(r"(?:official\s+receipt|o\.\s*r\.?|(?-i:OR))", r"no|number", min_len=5),
    _labeled(r"receipt", r"no|number", min_len=5),
    # bare "OR" only in capitals, lowercase "or" is ordinary prose
    re.compile(r"\bOR(?![A-Za-z])[-\s:.#]*(?i:([A-Z0-9-]{4,}))\b"),
)


def _first_labeled(text: str, patterns: tuple[re.Pattern[str], ...]) -> str | None:
    for pattern in patterns:
        m = pattern.search(text)
        if m:
            return m.group(1).upper()
    m = _NUMERIC_RE.search(text)
    return m.group(0) if m else None


def find_reference(text: str) -> str | None:
    """First labeled reference/confirmation/transaction/trace code, else first 6-20 digit run."""
    if not text:
        return None
    return _first_labeled(text, BANK_REF_PATTERNS)


def find_cash_reference(text: str) -> str | None:
    """Official-receipt number, else first 6-20 digit run."""
    if not text:
        return None
    return _first_labeled(text, CASH_REF_PATTERNS)
