"""
errors.py — Exception hierarchy for monetary

Every error raised on purpose by this package derives from MoneyError and
from the builtin a caller would catch anyway (TypeError for currency mixing,
ValueError for bad arguments, LookupError for unknown codes). Code that only
knows about the builtins keeps working.
"""

from __future__ import annotations


class MoneyError(Exception):
    """Base class for all monetary errors."""


class CurrencyMismatchError(MoneyError, TypeError):
    """Binary operation between Money values of different currencies."""

    def __init__(self, left: str, right: str, operation: str = "operate on"):
        self.left = left
        self.right = right
        super().__init__(
            f"Currencies don't match: cannot {operation} {left} and {right}. "
            f"Convert explicitly first."
        )


class InvalidPartitionError(MoneyError, ValueError):
    """split() or allocate() called with unusable arguments."""


class UnknownCurrencyError(MoneyError, LookupError):
    """Lookup of a currency code that is not registered."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Unknown currency code: {code!r}")


class PrecisionError(MoneyError, ArithmeticError):
    """Amount needs more significant digits than monetary carries."""


class InvalidCurrencyError(MoneyError, ValueError):
    """Registration data that cannot describe a currency."""


class DecodeError(MoneyError, ValueError):
    """Malformed wire input for a Money record."""
