from __future__ import annotations

from decimal import Decimal

import pytest

from src.tuition_tracker.tuition_tracker.payments.amounts import parse_amount, percentage, sanitize_amount, to_decimal


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.34.56", "12.3456"),
        ("1 250,50 DH", "125050"),
        ("3750", "3750"),
        ("-200", "200"),
        ("1.2.3.4", "1.234"),
        ("abc", ""),
        ("", ""),
    ],
)
def test_sanitize_amount(raw, expected):
    assert sanitize_amount(raw) == expected


def test_parse_amount_treats_garbage_as_zero():
    assert parse_amount(None) == 0
    assert parse_amount("") == 0
    assert parse_amount(".") == 0
    assert parse_amount("n/a") == 0
    assert parse_amount(float("nan")) == 0


def test_parse_amount_reads_numbers_and_sanitized_strings():
    assert parse_amount(3750) == 3750.0
    assert parse_amount("12.34.56") == pytest.approx(12.3456)
    assert parse_amount("1500 DH") == 1500.0


def test_percentage_rounds_half_up():
    assert percentage(1, 8) == 13  # 12.5
    assert percentage(1, 200) == 1  # 0.5
    assert percentage(1, 3) == 33


def test_percentage_is_zero_without_a_total():
    assert percentage(500, 0) == 0
    assert percentage(500, -10) == 0


def test_parse_amount_drops_overflowing_strings():
    assert parse_amount("1" * 400) == 0
    assert parse_amount("1e400") == 1400.0


def test_to_decimal_keeps_the_written_value():
    assert to_decimal(0.07) == Decimal("0.07")
    assert to_decimal("12.5 DH") == Decimal("12.5")
    assert to_decimal("abc") == 0
