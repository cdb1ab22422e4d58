from __future__ import annotations

import pytest

from receiptocr.domain.extraction.amounts import find_amount


def test_labeled_amount_beats_larger_bare_number() -> None:
    assert find_amount("Amount: PHP 500.00, ref code 99999999") == 500


def test_labeled_amount_takes_largest_labeled_match() -> None:
    assert find_amount("Amount 100.00 Sent 2,500.00") == 2500


def test_transfer_amount_label_with_grouping() -> None:
    assert find_amount("Transfer amount PHP 9,000.00 Ref No. ABC123456") == 9000


@pytest.mark.parametrize(
    "text, expected",
    [
        ("PHP9,000.00 paid", 9000),
        ("₱ 1,250.50 fee ₱ 15.00", 1250.5),
        ("Total Php 75", 75),
    ],
)
def test_currency_marked_amount(text: str, expected: float) -> None:
    assert find_amount(text) == expected


def test_fallback_prefers_grouped_numbers_and_skips_long_ids() -> None:
    assert find_amount("Total 1,234,567.89 id 006508022882") == pytest.approx(1234567.89)


def test_fallback_plain_four_to_six_digits() -> None:
    assert find_amount("Paid 50 for item 9000") == 9000


def test_fallback_ignores_values_below_minimum() -> None:
    assert find_amount("code 99 only") is None


@pytest.mark.parametrize("text", ["", "no numbers here", "!!! ??? ..."])
def test_no_amount(text: str) -> None:
    assert find_amount(text) is None
