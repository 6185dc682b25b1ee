"""
Fixed-point money.

Amounts and balances are Decimal values at the scale of a
NUMERIC(19, 4) column: at most 4 decimal places and 15 integer
digits. Arithmetic on them runs in a context that raises on any
rounding instead of silently dropping digits.
"""

import decimal
from decimal import Decimal

MAX_DIGITS = 19
DECIMAL_PLACES = 4

QUANTUM = Decimal("0.0001")
# Smallest magnitude with more than MAX_DIGITS - DECIMAL_PLACES integer digits
AMOUNT_LIMIT = Decimal("1E+15")


def exact_context():
    """Local decimal context where rounding, overflow and NaN results raise."""
    return decimal.localcontext(decimal.Context(
        traps=[decimal.Inexact, decimal.Overflow, decimal.InvalidOperation],
    ))


def fits_scale(amount: Decimal) -> bool:
    """True if the amount is finite and representable as NUMERIC(19, 4)."""
    if not amount.is_finite():
        return False
    # copy_abs and comparisons are exact regardless of context precision
    if amount.copy_abs() >= AMOUNT_LIMIT:
        return False
    return amount == amount.quantize(QUANTUM)
