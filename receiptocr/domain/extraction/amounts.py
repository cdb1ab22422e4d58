"""Amount extraction.

Three tiers, tried in order; within a tier the largest candidate wins, since
OCR noise tends to split one amount into smaller fragments and fees are
smaller than the principal. Receipts with a fee breakdown can still yield the
wrong number here.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# "PHP" may touch the number, so no trailing word boundary after it.
_LABELED_RE = re.compile(
    r"\b(?:transfer\s+amount|amount|amt|sent)\b[^0-9₱p]{0,20}(?:₱|\bPH(?:P|p))?\s*(\d[\d,]*(?:\.\d{1,2})?)",
    re.IGNORECASE,
)
_CURRENCY_RE = re.compile(r"(?:₱\s*|\bPH(?:P|p)\s*)(\d[\d,]*(?:\.\d{1,2})?)", re.IGNORECASE)
# Grouped amounts or 4-6 digit plain numbers; long digit runs are ids, not money.
_FALLBACK_RE = re.compile(r"\b(?:\d{1,3}(?:,\d{3})+|\d{4,6})(?:\.\d{1,2})?\b")

FALLBACK_MINIMUM = 100


def _to_number(raw: str) -> float | None:
    try:
        return float(raw.replace(",", ""))
    except ValueError:
        return None


def _largest(raws: Iterable[str], minimum: float | None = None) -> float | None:
    values = [n for n in (_to_number(r) for r in raws) if n is not None]
    if minimum is not None:
        values = [n for n in values if n >= minimum]
    return max(values) if values else None


def find_amount(text: str) -> float | None:
    """Return the most plausible paid amount in ``text`` or None."""
    if not text:
        return None

    labeled = _largest(m.group(1) for m in _LABELED_RE.finditer(text))
    if labeled is not None:
        return labeled

    with_currency = _largest(m.group(1) for m in _CURRENCY_RE.finditer(text))
    if with_currency is not None:
        return with_currency

    return _largest((m.group(0) for m in _FALLBACK_RE.finditer(text)), minimum=FALLBACK_MINIMUM)
