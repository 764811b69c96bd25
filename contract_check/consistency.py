from enum import Enum
import math
import re
from decimal import ROUND_HALF_UP, Decimal

from contract_check.currency import MONEY_CONTEXT, to_decimal


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class PaymentConsistency(str, Enum):
    CONSISTENT = "consistent"
    INCONSISTENT = "inconsistent"


def _round_units(value: float) -> Decimal:
    return to_decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP, context=MONEY_CONTEXT)


def parse_installment_count(raw: object) -> int | None:
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Past the interpreter's int string length limit.
        return None


def total_amount_valid(total: float, installment_amount: float, installment_count: int | None) -> bool:
    """Whether the stated total matches the installment schedule to the nearest unit."""
    if installment_count is None:
        return False

    try:
        scheduled = installment_amount * installment_count
    except OverflowError:
        return False
    if not (math.isfinite(total) and math.isfinite(scheduled)):
        return False
    return _round_units(total) == _round_units(scheduled)


def payment_consistency(movement: float, payment: float) -> PaymentConsistency:
    if movement > payment:
        return PaymentConsistency.INCONSISTENT
    return PaymentConsistency.CONSISTENT
