"""BRL currency rendering in the pt-BR convention (``R$ 1.234,50``)."""

import math
from decimal import ROUND_HALF_UP, Context, Decimal


CURRENCY_SYMBOL = "R$"
CENTS = Decimal("0.01")

# Wide enough to quantize any finite float without InvalidOperation.
MONEY_CONTEXT = Context(prec=400)


def to_decimal(amount: float) -> Decimal:
    # repr gives the shortest round-tripping digits, so 2.675 rounds as 2.68.
    return Decimal(repr(float(amount)))


def format_brl(amount: float) -> str:
    """Render ``amount`` as Brazilian Real.

    Two fraction digits rounded half away from zero, ``.`` for thousands and
    ``,`` for decimals. Negatives read ``-R$ 5,00``; amounts that round to zero
    carry no sign. NaN renders as ``R$ NaN`` and infinities as ``R$ ∞``.
    """
    if math.isnan(amount):
        return f"{CURRENCY_SYMBOL} NaN"
    if math.isinf(amount):
        sign = "-" if amount < 0 else ""
        return f"{sign}{CURRENCY_SYMBOL} ∞"

    cents = to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP, context=MONEY_CONTEXT)
    sign = "-" if cents < 0 else ""
    body = f"{abs(cents):,.2f}".translate(str.maketrans({",": ".", ".": ","}))
    return f"{sign}{CURRENCY_SYMBOL} {body}"
