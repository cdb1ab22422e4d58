"""
Date and time-of-day extraction from receipt transcripts.

Dates are normalized to ``YYYY-MM-DD``; times to 24-hour ``HH:MM``. The time
search is anchored on the date mention first so that a time printed next to
the transaction date wins over unrelated clock readings elsewhere on the page.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from receiptocr.domain.models import DateSpan

MONTHS: dict[str, int] = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_MONTH_NAME = (
    r"(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?|aug(?:ust)?"
    r"|sep(?:t|tember)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)

# "Sep-21-2025", "Sep 21, 2025"
_MONTH_DAY_YEAR_RE = re.compile(rf"\b{_MONTH_NAME}[-\s]+(\d{{1,2}})[-\s,]+(20\d{{2}})\b", re.IGNORECASE)
# "Sep 26 Date and 2025": OCR drops stray words between day and year
_MONTH_DAY_NOISE_YEAR_RE = re.compile(rf"\b{_MONTH_NAME}\s+(\d{{1,2}})[^0-9]{{0,20}}(20\d{{2}})\b", re.IGNORECASE)
_ISO_RE = re.compile(r"\b(20\d{2})[-/](\d{1,2})[-/](\d{1,2})\b")
_NUMERIC_RE = re.compile(r"\b(\d{1,2})[./-](\d{1,2})[./-](20\d{2})\b")
# "21 Sep 2025"
_DAY_MONTH_YEAR_RE = re.compile(rf"\b(\d{{1,2}})\s+{_MONTH_NAME}[a-z]*,?\s*(20\d{{2}})\b", re.IGNORECASE)

_TIME_12H_RE = re.compile(r"\b(\d{1,2}):([0-5]\d)(?::([0-5]\d))?\s*([AaPp]\s*\.?\s*[Mm])\b")
_TIME_24H_RE = re.compile(r"\b([01]?\d|2[0-3]):([0-5]\d)(?::[0-5]\d)?\b")

TIME_WINDOW_BEFORE = 80
TIME_WINDOW_AFTER = 160


def _iso(year: int, month: int, day: int) -> str:
    return f"{year}-{month:02d}-{day:02d}"


def _month_number(name: str) -> int:
    return MONTHS.get(name[:3].lower(), 0)


def _month_day_year(m: re.Match[str]) -> str | None:
    month, day, year = _month_number(m.group(1)), int(m.group(2)), int(m.group(3))
    return _iso(year, month, day) if month and day and year else None


def _iso_order(m: re.Match[str]) -> str | None:
    return _iso(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def _ambiguous_order(m: re.Match[str]) -> str | None:
    # MM/DD/YYYY unless the first number cannot be a month
    a, b, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
    month, day = (a, b) if a <= 12 else (b, a)
    return _iso(year, month, day)


def _day_month_year(m: re.Match[str]) -> str | None:
    day, month, year = int(m.group(1)), _month_number(m.group(2)), int(m.group(3))
    return _iso(year, month, day) if month and day and year else None


_DATE_FORMATS: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], str | None]], ...] = (
    (_MONTH_DAY_YEAR_RE, _month_day_year),
    (_MONTH_DAY_NOISE_YEAR_RE, _month_day_year),
    (_ISO_RE, _iso_order),
    (_NUMERIC_RE, _ambiguous_order),
    (_DAY_MONTH_YEAR_RE, _day_month_year),
)


def find_date_span(text: str) -> DateSpan | None:
    """Return the first date found, trying formats in a fixed priority order."""
    if not text:
        return None
    for pattern, normalize in _DATE_FORMATS:
        m = pattern.search(text)
        if not m:
            continue
        iso_date = normalize(m)
        if iso_date:
            return DateSpan(iso_date=iso_date, match_start=m.start(), match_end=m.end())
    return None


def find_date(text: str) -> str | None:
    span = find_date_span(text)
    return span.iso_date if span else None


def to_24h(hour: int, minute: int, meridiem: str | None = None) -> str:
    """Format ``hour:minute`` as 24-hour ``HH:MM``; 12 AM is 00, 12 PM stays 12."""
    if meridiem:
        marker = re.sub(r"[^A-Za-z]", "", meridiem).upper()
        if marker == "AM" and hour == 12:
            hour = 0
        elif marker == "PM" and hour < 12:
            hour += 12
    return f"{hour:02d}:{minute:02d}"


def _time_in(segment: str) -> str | None:
    m = _TIME_12H_RE.search(segment)
    if m:
        hour, minute = int(m.group(1)), int(m.group(2))
        if 1 <= hour <= 12:
            return to_24h(hour, minute, m.group(4))

    m = _TIME_24H_RE.search(segment)
    if m:
        return to_24h(int(m.group(1)), int(m.group(2)))
    return None


def find_time(text: str, anchor: int | None = None) -> str | None:
    """Find a time of day, preferring the window around ``anchor`` when given."""
    if not text:
        return None
    if anchor is not None:
        start = max(0, anchor - TIME_WINDOW_BEFORE)
        end = min(len(text), anchor + TIME_WINDOW_AFTER)
        found = _time_in(text[start:end])
        if found:
            return found
    return _time_in(text)


def find_date_time(text: str) -> str | None:
    """Return ``YYYY-MM-DDTHH:MM`` when both a date and a time are present."""
    span = find_date_span(text)
    if span is None:
        return None
    time_of_day = find_time(text, span.match_end)
    return f"{span.iso_date}T{time_of_day}" if time_of_day else None
