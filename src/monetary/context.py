"""
context.py — Decimal contexts used by monetary

Money never computes in the thread's default decimal context, which keeps
28 significant digits and rounds silently beyond that.

ARITHMETIC traps Inexact: add, subtract and multiply are exact or raise.
ROUNDING is for quantize(), where dropping digits is the intent.
division_context() sizes divide() on the dividend, keeping DIVISION_DIGITS
digits beyond it.
"""

from __future__ import annotations
from decimal import Context, Decimal, DivisionByZero, Inexact, InvalidOperation, Overflow

# Significant digits any single amount may carry
PRECISION = 1_000

# Extra significant digits kept by divide() beyond the dividend's own
DIVISION_DIGITS = 28

ARITHMETIC = Context(
    prec=PRECISION,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)

ROUNDING = Context(
    prec=PRECISION,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def division_context(dividend: Decimal) -> Context:
    digits = len(dividend.as_tuple().digits) + DIVISION_DIGITS
    return Context(
        prec=min(digits, PRECISION),
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )
