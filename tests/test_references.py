from __future__ import annotations

import pytest

from receiptocr.domain.extraction.references import find_cash_reference, find_reference


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Ref No. ABC123456 Date", "ABC123456"),
        ("Reference Number: 0012345678", "0012345678"),
        ("Confirmation #: xy98765z", "XY98765Z"),
        ("Txn ID 7788990011", "7788990011"),
        ("Transaction No. TR-55667788", "TR-55667788"),
        ("Trace No. 445566", "445566"),
    ],
)
def test_labeled_reference(text: str, expected: str) -> None:
    assert find_reference(text) == expected


def test_short_labeled_token_falls_back_to_digit_run() -> None:
    assert find_reference("ref code 99999999") == "99999999"


def test_first_bare_digit_run() -> None:
    assert find_reference("paid 123 on 20250921 thanks 7654321") == "20250921"


def test_label_qualifier_is_not_taken_as_reference() -> None:
    assert find_reference("Reference Number: 12") is None


@pytest.mark.parametrize("text", ["", "hello world", "ref 123"])
def test_no_reference(text: str) -> None:
    assert find_reference(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Official Receipt No. 004512 Amount 500", "004512"),
        ("O.R. # A-1234 paid", "A-1234"),
        ("Receipt # 88231 Total 500", "88231"),
        ("OR# b-7781 cashier", "B-7781"),
    ],
)
def test_cash_reference(text: str, expected: str) -> None:
    assert find_cash_reference(text) == expected


def test_cash_reference_digit_fallback() -> None:
    assert find_cash_reference("Cashier 2 slip 12345678") == "12345678"


@pytest.mark.parametrize("text", ["Pay by cash or gcash at the counter", "cash or card accepted here"])
def test_lowercase_or_is_not_a_receipt_label(text: str) -> None:
    assert find_cash_reference(text) is None


def test_capital_or_with_qualifier() -> None:
    assert find_cash_reference("OR No. 55123 Total 500") == "55123"
