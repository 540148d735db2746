"""
monetary — Money as a Domain Primitive

An immutable amount bound to a currency: exact decimal arithmetic, no silent
mixing of currencies, and loss-free splitting.

================================================================================
QUICK START
================================================================================

Basic usage:

    from monetary import Money

    # Create money from minor units (never loses precision)
    bill = Money.of_minor(100, "EUR")          # 1.00 EUR

    # Split equally (sum ALWAYS equals original)
    bill.split(3)                              # [0.34, 0.33, 0.33]

    # Split by ratios (sum ALWAYS equals original)
    bill.allocate([50, 25, 25])                # [0.50, 0.25, 0.25]

    # Currencies never mix
    bill + Money.of_minor(100, "GBP")          # CurrencyMismatchError

Formatting and wire format:

    from monetary import display, from_json, to_json

    display(Money.of_minor(100, "GBP"))        # '£1.00'
    from_json('{"amount":"125.22","currency":"usd"}')

Custom currencies:

    from monetary import register

    register("MOCK", "M$", "{amount} {symbol}", ".", ",", 5)
    Money.of_minor(1, "MOCK").amount           # Decimal('0.00001')

================================================================================
"""

import logging

# Errors
from .errors import (
    MoneyError,
    CurrencyMismatchError,
    InvalidPartitionError,
    UnknownCurrencyError,
    InvalidCurrencyError,
    PrecisionError,
    DecodeError,
)

# Currency registry
from .currency import (
    Currency,
    CurrencyRegistry,
    default_registry,
    lookup,
    register,
)

# Core Money type
from .core import (
    Money,
    RoundingMode,
)

# Output
from .formatting import display, format_amount
from .serialization import encode, decode, to_json, from_json

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Errors
    "MoneyError",
    "CurrencyMismatchError",
    "InvalidPartitionError",
    "UnknownCurrencyError",
    "InvalidCurrencyError",
    "PrecisionError",
    "DecodeError",
    # Currency
    "Currency",
    "CurrencyRegistry",
    "default_registry",
    "lookup",
    "register",
    # Core
    "Money",
    "RoundingMode",
    # Output
    "display",
    "format_amount",
    "encode",
    "decode",
    "to_json",
    "from_json",
]
