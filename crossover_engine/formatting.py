"""
Fixed-point rendering of computed part values.

Rounds the exact binary value of a float half-up, so 8.125 renders as
'8.13' rather than the banker's '8.12' that str.format() gives.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from crossover_engine.errors import NumericDegeneracy


def to_fixed(value: float, digits: int = 2) -> str:
    value = float(value)
    if not math.isfinite(value):
        raise NumericDegeneracy(f"Computed value is not finite: {value}")

    exact = Decimal(value)
    with localcontext() as ctx:
        # Enough significant digits for the integer part plus the fraction
        ctx.prec = max(28, exact.adjusted() + digits + 2)
        return str(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))
