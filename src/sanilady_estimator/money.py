"""
Money helpers for quote amounts.

Amounts leave the estimator as GBP prices.Money values. Counts come from
customers and are unbounded, so arithmetic and formatting run in a decimal
context sized to the operands instead of the default 28 digits.
"""

from decimal import Decimal, ROUND_HALF_UP, getcontext, localcontext
from typing import Any

from prices import Money

from .models import CURRENCY

CURRENCY_SYMBOLS = {
    'GBP': '£',
    'EUR': '€',
    'USD': '$',
}

TWO_PLACES = Decimal('0.01')

# Room for rate digits, the fractional frequency multiplier and pence
PRECISION_HEADROOM = 12


def _digits(value: Any) -> int:
    if isinstance(value, Decimal):
        if not value.is_finite():
            return 0
        _, digits, exponent = value.as_tuple()
        return len(digits) + max(exponent, 0)
    if isinstance(value, int):
        # bit_length avoids str(), which refuses very long ints
        return int(abs(value).bit_length() * 0.30103) + 1
    return 0


def working_precision(*values: Any) -> int:
    """Decimal precision that keeps sums and products of these values exact."""
    widest = max((_digits(value) for value in values), default=0)
    return max(getcontext().prec, widest + PRECISION_HEADROOM)


def to_money(amount: Any) -> Money:
    if isinstance(amount, Money):
        return amount
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return Money(amount, CURRENCY)


def format_gbp(amount: Any) -> str:
    """Format Money or a plain amount as pounds with two decimals, e.g. £187.50."""
    money = to_money(amount)
    symbol = CURRENCY_SYMBOLS.get(money.currency, money.currency)

    with localcontext() as ctx:
        ctx.prec = working_precision(money.amount)
        rounded = money.amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)

    return f"{symbol}{rounded}"
