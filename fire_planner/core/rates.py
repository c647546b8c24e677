"""Rate and currency helpers shared by the KPI and projection code."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

MONTHS_PER_YEAR = 12

DEFAULT_CURRENCY_PREFIX = "R$"

# pt-BR separates the currency symbol from the digits with a no-break space
CURRENCY_SPACE = "\u00a0"


def percent_to_decimal(rate: float) -> float:
    """5.5 -> 0.055"""
    return rate / 100


def annualize(monthly_amount: float) -> float:
    return monthly_amount * MONTHS_PER_YEAR


def round_half_away(value: float, digits: int = 0) -> float:
    """Round on the exact decimal value of ``value``, ties away from zero.

    ``round()`` would use banker's rounding (2.25 -> 2.2); display figures
    expect 2.25 -> 2.3. Non-finite values come back unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # the quantized result must fit in the context precision
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def nominal_return(real_rate: float, inflation_rate: float) -> float:
    """Implied nominal return from a real return and inflation (Fisher equation).

    (1 + n) = (1 + r) * (1 + i), all as percentages.
    """
    r = percent_to_decimal(real_rate)
    i = percent_to_decimal(inflation_rate)
    nominal = (1 + r) * (1 + i) - 1
    return nominal * 100


def format_currency(value: float, prefix: str = DEFAULT_CURRENCY_PREFIX) -> str:
    """Format a number as Brazilian reais with no fractional digits.

    1500000 -> "R$\xa01.500.000", -1234.5 -> "-R$\xa01.235"; the symbol is
    followed by a no-break space.
    """
    rounded = round_half_away(value)
    if rounded == 0:
        rounded = 0.0  # no "-R$ 0"
    digits = f"{abs(rounded):,.0f}".replace(",", ".")
    sign = "-" if rounded < 0 else ""
    return f"{sign}{prefix}{CURRENCY_SPACE}{digits}"
