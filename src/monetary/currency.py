"""
currency.py — Currency definitions and the currency registry

================================================================================
DESIGN
================================================================================

1. CURRENCY IS A VALUE
   Frozen dataclass. A Money captures the Currency it was built with, so
   re-registering a code later never changes existing amounts.

2. EXPLICIT REGISTRY
   CurrencyRegistry is an ordinary object. Tests and applications can own
   their own instance; default_registry is the process-wide one used when
   no registry is passed.

3. COPY-ON-WRITE
   Writers take a lock, copy the table, modify the copy and swap it in.
   Readers never lock: they see either the old table or the new one,
   never a half-written entry.

4. UNKNOWN CODES FAIL
   lookup() raises UnknownCurrencyError. There is no fallback currency.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional
import logging
import threading

from .errors import InvalidCurrencyError, UnknownCurrencyError
from .iso4217 import CURRENCIES

logger = logging.getLogger(__name__)

AMOUNT_PLACEHOLDER = "{amount}"
SYMBOL_PLACEHOLDER = "{symbol}"


# ==============================================================================
# CURRENCY
# ==============================================================================

@dataclass(frozen=True)
class Currency:
    """
    A currency as the registry knows it.

    fraction is the number of decimals of the minor unit (EUR=2, JPY=0,
    KWD=3). The separators are display hints only; arithmetic ignores them.
    """
    code: str
    grapheme: str
    template: str
    decimal_separator: str
    thousands_separator: str
    fraction: int

    @property
    def multiplier(self) -> int:
        """Conversion factor major -> minor unit."""
        return 10 ** self.fraction

    @property
    def unit(self) -> Decimal:
        """Smallest representable amount (0.01 for EUR, 1 for JPY)."""
        return Decimal(1).scaleb(-self.fraction)

    def same_as(self, other: Currency) -> bool:
        return self.code == other.code

    def __str__(self) -> str:
        return self.code


def normalize_code(code: object) -> str:
    """Canonical registry key for a user-supplied code."""
    if not isinstance(code, str):
        raise UnknownCurrencyError(code)
    return code.strip().upper()


def _validate(
    code: str,
    grapheme: str,
    template: str,
    separators: tuple[str, str],
    fraction: int,
) -> None:
    if not code:
        raise InvalidCurrencyError("Currency code cannot be empty")
    for field, value in (
        ("grapheme", grapheme),
        ("template", template),
        ("decimal_separator", separators[0]),
        ("thousands_separator", separators[1]),
    ):
        if not isinstance(value, str):
            raise InvalidCurrencyError(
                f"{code}: {field} must be str, got {type(value).__name__}"
            )
    if isinstance(fraction, bool) or not isinstance(fraction, int) or fraction < 0:
        raise InvalidCurrencyError(
            f"{code}: fraction must be a non-negative int, got {fraction!r}"
        )
    for placeholder in (AMOUNT_PLACEHOLDER, SYMBOL_PLACEHOLDER):
        count = template.count(placeholder)
        if count != 1:
            raise InvalidCurrencyError(
                f"{code}: template {template!r} must contain {placeholder} "
                f"exactly once (found {count})"
            )


# ==============================================================================
# REGISTRY
# ==============================================================================

class CurrencyRegistry:
    """
    Table of known currencies, keyed by uppercase code.

    USAGE:
        registry = CurrencyRegistry.seeded()
        registry.register("MOCK", "M$", "{amount} {symbol}", ".", ",", 5)
        registry.lookup("mock").fraction   # 5

    Safe for concurrent lookup() and register() calls.
    """

    def __init__(self, currencies: Optional[Iterable[Currency]] = None):
        self._write_lock = threading.Lock()
        self._table: dict[str, Currency] = {}
        for currency in currencies or ():
            self._table[currency.code] = currency

    @classmethod
    def seeded(cls) -> CurrencyRegistry:
        """Registry pre-loaded with the built-in ISO 4217 table."""
        registry = cls()
        for row in CURRENCIES:
            registry.register(*row)
        return registry

    def lookup(self, code: str) -> Currency:
        """
        Resolve a code, case-insensitively.

        Raises:
            UnknownCurrencyError: if the code was never registered
        """
        key = normalize_code(code)
        currency = self._table.get(key)
        if currency is None:
            raise UnknownCurrencyError(code)
        return currency

    def register(
        self,
        code: str,
        grapheme: str,
        template: str,
        decimal_separator: str,
        thousands_separator: str,
        fraction: int,
    ) -> None:
        """
        Insert or overwrite a currency.

        Money values already built from a previous definition keep it.

        Raises:
            InvalidCurrencyError: empty code, non-str text fields, bad
                fraction or bad template
        """
        if not isinstance(code, str):
            raise InvalidCurrencyError(f"Currency code must be str, got {type(code).__name__}")
        key = code.strip().upper()
        _validate(key, grapheme, template, (decimal_separator, thousands_separator), fraction)

        currency = Currency(
            code=key,
            grapheme=grapheme,
            template=template,
            decimal_separator=decimal_separator,
            thousands_separator=thousands_separator,
            fraction=fraction,
        )

        with self._write_lock:
            table = dict(self._table)
            previous = table.get(key)
            table[key] = currency
            self._table = table

        if previous is not None and previous != currency:
            logger.warning("Currency %s redefined: %r -> %r", key, previous, currency)
        else:
            logger.debug("Currency %s registered (fraction=%d)", key, fraction)

    def codes(self) -> list[str]:
        """Registered codes, sorted."""
        return sorted(self._table)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"CurrencyRegistry({len(self._table)} currencies)"


default_registry = CurrencyRegistry.seeded()


def lookup(code: str) -> Currency:
    """lookup() on the default registry."""
    return default_registry.lookup(code)


def register(
    code: str,
    grapheme: str,
    template: str,
    decimal_separator: str,
    thousands_separator: str,
    fraction: int,
) -> None:
    """register() on the default registry."""
    default_registry.register(
        code, grapheme, template, decimal_separator, thousands_separator, fraction
    )


def resolve(currency: Currency | str, registry: Optional[CurrencyRegistry] = None) -> Currency:
    """Accept either a Currency or a code; codes go through the registry."""
    if isinstance(currency, Currency):
        return currency
    if registry is None:
        registry = default_registry
    return registry.lookup(currency)
