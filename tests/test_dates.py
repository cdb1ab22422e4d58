from __future__ import annotations

import pytest

from receiptocr.domain.extraction.dates import find_date, find_date_span, find_date_time, find_time, to_24h


@pytest.mark.parametrize(
    "text",
    ["Sep 21, 2025", "2025-09-21", "09/21/2025", "21 Sep 2025", "Sep-21-2025", "September 21 2025"],
)
def test_date_formats_normalize_to_iso(text: str) -> None:
    assert find_date(text) == "2025-09-21"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Sep 26 Date and 2025", "2025-09-26"),
        ("2025/9/5", "2025-09-05"),
        ("21/09/2025", "2025-09-21"),
        ("3.4.2025", "2025-03-04"),
        ("paid on 5 Jan, 2026", "2026-01-05"),
    ],
)
def test_noisy_and_ambiguous_dates(text: str, expected: str) -> None:
    assert find_date(text) == expected


def test_date_span_offsets() -> None:
    span = find_date_span("Paid on 2025-09-21 at 10:00")
    assert span is not None
    assert (span.match_start, span.match_end) == (8, 18)


@pytest.mark.parametrize("text", ["", "no date here", "Sep 2025"])
def test_no_date(text: str) -> None:
    assert find_date_span(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12:00 AM", "00:00"),
        ("12:00 PM", "12:00"),
        ("10:20 AM", "10:20"),
        ("11:08:47 PM", "23:08"),
        ("1:05 p. m.", "13:05"),
        ("22:05", "22:05"),
        ("at 7:30", "07:30"),
    ],
)
def test_time_conversion(text: str, expected: str) -> None:
    assert find_time(text) == expected


def test_to_24h_ignores_stray_punctuation_in_meridiem() -> None:
    assert to_24h(12, 15, "A.M.") == "00:15"
    assert to_24h(3, 0, "p m") == "15:00"
    assert to_24h(9, 5) == "09:05"


def test_time_near_date_preferred() -> None:
    text = "Printed 08:00 " + "x" * 200 + " Date: Sep 21, 2025 10:20 AM"
    assert find_date_time(text) == "2025-09-21T10:20"


def test_time_falls_back_to_whole_text() -> None:
    text = "Time 09:15 " + "y" * 300 + " Sep 21, 2025"
    assert find_date_time(text) == "2025-09-21T09:15"


def test_date_without_time_has_no_datetime() -> None:
    assert find_date_time("Sep 21, 2025 paid") is None
    assert find_time("no clock") is None
