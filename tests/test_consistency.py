import pytest

from contract_check.consistency import (
    PaymentConsistency,
    parse_installment_count,
    payment_consistency,
    total_amount_valid,
)


def test_total_matches_installments() -> None:
    assert total_amount_valid(300.00, 100.00, 3)


def test_total_full_unit_mismatch_is_invalid() -> None:
    assert not total_amount_valid(301.00, 100.00, 3)


def test_total_sub_unit_drift_is_absorbed() -> None:
    assert total_amount_valid(300.004, 100.00, 3)
    assert total_amount_valid(0.3, 0.1, 3)


def test_total_rounds_half_away_from_zero() -> None:
    assert not total_amount_valid(300.5, 100.00, 3)
    assert total_amount_valid(-2.5, -1.5, 2)


def test_total_without_count_is_invalid() -> None:
    assert not total_amount_valid(300.00, 100.00, None)


def test_total_with_overflowing_schedule_is_invalid() -> None:
    assert not total_amount_valid(1e308, 1e308, 3)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("3", 3), (" 12x", 12), ("3.7", 3), ("-2", -2), ("", None), ("abc", None), (None, None)],
)
def test_parse_installment_count(raw: str | None, expected: int | None) -> None:
    assert parse_installment_count(raw) == expected


def test_payment_consistency() -> None:
    assert payment_consistency(100.0, 50.0) is PaymentConsistency.INCONSISTENT
    assert payment_consistency(0.0, 50.0) is PaymentConsistency.CONSISTENT
    assert payment_consistency(50.0, 50.0) is PaymentConsistency.CONSISTENT
    assert PaymentConsistency.INCONSISTENT == "inconsistent"


def test_huge_installment_count_fails_total_rule() -> None:
    assert not total_amount_valid(300.00, 100.00, int("9" * 400))
    assert parse_installment_count("1" * 5000) is None
