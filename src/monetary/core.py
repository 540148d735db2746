"""
core.py — Money domain primitive

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   decimal.Decimal amount scaled to the currency's fraction digits.
   Never floating point.

2. TYPE SAFETY
   Operations between different currencies raise CurrencyMismatchError
   (a TypeError). Operations with float/int operands raise TypeError.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.
   No side effects, safe to share between threads.

4. PER-CURRENCY PRECISION
   Each currency has its own fraction (EUR=2, JPY=0, KWD=3), resolved from
   the registry once, when the Money is built.

5. EXPLICIT ROUNDING
   divide() never rounds to the currency. Rounding happens in of_decimal()
   and round(), half away from zero unless told otherwise. split() and
   allocate() refuse amounts that were not rounded first.
   add, subtract and multiply are exact: beyond PRECISION significant
   digits they raise PrecisionError instead of rounding.

6. VERIFIABLE INVARIANTS
   split(n) and allocate(ratios) guarantee sum(parts) == original.
   Leftover minor units go to the first parties, one at a time.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import (
    Decimal,
    DecimalException,
    InvalidOperation,
    ROUND_DOWN,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum
from typing import Any, Callable, Optional, Sequence
import logging

from .context import ARITHMETIC, PRECISION, ROUNDING, division_context
from .currency import Currency, CurrencyRegistry, resolve
from .errors import (
    CurrencyMismatchError,
    DecodeError,
    InvalidPartitionError,
    PrecisionError,
)
from . import formatting

logger = logging.getLogger(__name__)


# ==============================================================================
# ROUNDING STRATEGIES
# ==============================================================================

class RoundingMode(Enum):
    """
    Rounding strategies, mapped onto the decimal module's constants.

    - HALF_UP: commercial rounding, ties away from zero (0.5 -> 1, -0.5 -> -1)
    - HALF_EVEN: banker's rounding, minimizes statistical bias
    - HALF_DOWN: ties toward zero (0.5 -> 0)
    - DOWN: always toward zero (truncation)
    - UP: always away from zero

    HALF_UP is the default everywhere in this package.
    """
    HALF_UP = ROUND_HALF_UP
    HALF_EVEN = ROUND_HALF_EVEN
    HALF_DOWN = ROUND_HALF_DOWN
    DOWN = ROUND_DOWN
    UP = ROUND_UP


def _scaled(units: int, fraction: int) -> Decimal:
    """Exact Decimal for `units` minor units (no context rounding)."""
    sign, digits, _ = Decimal(units).as_tuple()
    return Decimal((sign, digits, -fraction))


def _exact(operation: Callable[..., Decimal], *operands: Decimal) -> Decimal:
    """Run a decimal operation, turning lost digits into PrecisionError."""
    try:
        return operation(*operands)
    except DecimalException as e:
        raise PrecisionError(
            f"Amount exceeds {PRECISION} significant digits ({type(e).__name__})"
        ) from e


def _quantize(value: Decimal, scale: int, rounding: RoundingMode) -> Decimal:
    exponent = Decimal((0, (1,), -scale))
    return _exact(
        lambda v: v.quantize(exponent, rounding=rounding.value, context=ROUNDING), value
    )


def _to_units(amount: Decimal, fraction: int) -> int:
    """Integer count of minor units, rounding extra digits half away from zero."""
    fixed = _quantize(amount, fraction, RoundingMode.HALF_UP)
    sign, digits, _ = fixed.as_tuple()
    units = int("".join(map(str, digits)))
    return -units if sign else units


def _div_round_half_up(numerator: int, denominator: int) -> int:
    """numerator / denominator, ties away from zero. denominator > 0."""
    quotient, remainder = divmod(abs(numerator), denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return -quotient if numerator < 0 else quotient


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class Money:
    """
    Domain Primitive for monetary amounts.

    INVARIANTS:
    1. _amount is always Decimal (no floating point)
    2. _currency is the Currency resolved at construction
    3. Operations between different currencies raise CurrencyMismatchError
    4. split(n) and allocate(ratios) guarantee sum(parts) == self

    USAGE:
        budget = Money.of_minor(100, "EUR")
        budget.split(3)              # [0.34, 0.33, 0.33]
        budget.allocate([30, 30, 30])  # [0.34, 0.33, 0.33]

    SERIALIZATION:
        to_dict() / from_dict(), format {"amount": str, "currency": str}.
        NEVER serialize as float.
    """
    _amount: Decimal
    _currency: Currency

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of_minor(
        cls,
        minor_units: int,
        currency: Currency | str,
        *,
        registry: Optional[CurrencyRegistry] = None,
    ) -> Money:
        """
        Build from an integer count of minor units (cents, pence, ...).

            Money.of_minor(125, "EUR").amount   # Decimal('1.25')
        """
        if not _is_int(minor_units):
            raise TypeError(
                f"minor_units must be int, not {type(minor_units).__name__}. "
                f"Use of_decimal() for fractional amounts."
            )
        resolved = resolve(currency, registry)
        return cls(_scaled(minor_units, resolved.fraction), resolved)

    @classmethod
    def of(
        cls,
        major_units: int,
        currency: Currency | str,
        *,
        registry: Optional[CurrencyRegistry] = None,
    ) -> Money:
        """Build from whole major units (euro, dollars, ...)."""
        if not _is_int(major_units):
            raise TypeError(f"major_units must be int, not {type(major_units).__name__}")
        resolved = resolve(currency, registry)
        return cls(_scaled(major_units * resolved.multiplier, resolved.fraction), resolved)

    @classmethod
    def of_decimal(
        cls,
        amount: Decimal | int | str,
        currency: Currency | str,
        *,
        rounding: RoundingMode = RoundingMode.HALF_UP,
        registry: Optional[CurrencyRegistry] = None,
    ) -> Money:
        """
        Build from a decimal amount, rounded to the currency's fraction.

        The rounding happens HERE, once. Ties go away from zero by default:
        of_decimal("0.5", "JPY") is 1 yen, of_decimal("-0.5", "JPY") is -1.

        Raises:
            TypeError: for float input (use from_float())
            DecodeError: for a string that is not a finite decimal
        """
        value = _coerce_decimal(amount)
        resolved = resolve(currency, registry)
        return cls(_quantize(value, resolved.fraction, rounding), resolved)

    @classmethod
    def from_float(
        cls,
        value: float,
        currency: Currency | str,
        rounding: RoundingMode = RoundingMode.HALF_UP,
        *,
        registry: Optional[CurrencyRegistry] = None,
    ) -> Money:
        """
        Build from a float, via its shortest repr (99.995 -> '99.995').

        Exists for legacy systems and user input. Prefer of_minor() or
        of_decimal() in new code.
        """
        if not isinstance(value, float):
            raise TypeError(f"from_float() expects float, not {type(value).__name__}")
        return cls.of_decimal(str(value), currency, rounding=rounding, registry=registry)

    @classmethod
    def zero(
        cls,
        currency: Currency | str,
        *,
        registry: Optional[CurrencyRegistry] = None,
    ) -> Money:
        """Zero in a given currency. Handy start value for sum()."""
        return cls.of_minor(0, currency, registry=registry)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def code(self) -> str:
        return self._currency.code

    @property
    def minor_units(self) -> int:
        """Value in minor units. Extra digits (after divide()) are rounded."""
        return _to_units(self._amount, self._currency.fraction)

    def same_currency(self, other: Money) -> bool:
        return self._currency.same_as(other._currency)

    def _check_same_currency(self, other: Any, operation: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: cannot {operation} Money and {type(other).__name__}. "
                f"Use Money.of_minor() or Money.of_decimal() to convert."
            )
        if not self.same_currency(other):
            raise CurrencyMismatchError(self.code, other.code, operation)

    def _with(self, amount: Decimal) -> Money:
        return Money(amount, self._currency)

    # -------------------------------------------------------------------------
    # Arithmetic (currency-checked)
    # -------------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._check_same_currency(other, "add")
        return self._with(_exact(ARITHMETIC.add, self._amount, other._amount))

    def subtract(self, other: Money) -> Money:
        self._check_same_currency(other, "subtract")
        return self._with(_exact(ARITHMETIC.subtract, self._amount, other._amount))

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        return self.subtract(other)

    def __radd__(self, other: Any) -> Money:
        # Lets sum(parts) work without a start value
        if _is_int(other) and other == 0:
            return self
        return self.add(other)

    def multiply(self, factor: int) -> Money:
        """
        Multiply by an integer (quantity). Exact, never rounded.

            unit_price.multiply(5)
        """
        if not _is_int(factor):
            raise TypeError(
                f"Money can only be multiplied by int (quantity), "
                f"not {type(factor).__name__}."
            )
        return self._with(_exact(ARITHMETIC.multiply, self._amount, Decimal(factor)))

    def __mul__(self, factor: int) -> Money:
        return self.multiply(factor)

    def __rmul__(self, factor: int) -> Money:
        return self.multiply(factor)

    def divide(self, divisor: int) -> Money:
        """
        Divide by an integer. The result is NOT rounded to the currency.

        Division is lossy; the caller decides when and how to round:

            Money.of_minor(10, "EUR").divide(3).round(2)

        The quotient keeps 28 significant digits beyond the dividend's own.

        Raises:
            ZeroDivisionError: divisor == 0
        """
        if not _is_int(divisor):
            raise TypeError(f"Money can only be divided by int, not {type(divisor).__name__}.")
        if divisor == 0:
            raise ZeroDivisionError(f"cannot divide {self.code} amount by zero")
        context = division_context(self._amount)
        return self._with(_exact(context.divide, self._amount, Decimal(divisor)))

    def round(self, scale: int, rounding: RoundingMode = RoundingMode.HALF_UP) -> Money:
        """Round to `scale` decimals, ties away from zero by default."""
        if not _is_int(scale):
            raise TypeError(f"scale must be int, not {type(scale).__name__}")
        return self._with(_quantize(self._amount, scale, rounding))

    def absolute(self) -> Money:
        return self._with(_exact(ARITHMETIC.abs, self._amount))

    def negative(self) -> Money:
        """
        Negative counterpart of this amount.

        Already-negative values are returned unchanged: negative() of -5 is
        -5, not 5. Use the unary minus for mathematical negation.
        """
        if self.is_negative():
            return self._with(self._amount)
        return self._with(_exact(ARITHMETIC.minus, self._amount))

    def __neg__(self) -> Money:
        return self._with(_exact(ARITHMETIC.minus, self._amount))

    def __abs__(self) -> Money:
        return self.absolute()

    # -------------------------------------------------------------------------
    # Sign
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self._amount.is_zero()

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equals(self, other: Money) -> bool:
        """Strict equality: raises CurrencyMismatchError across currencies."""
        self._check_same_currency(other, "compare")
        return self._amount == other._amount

    def greater_than(self, other: Money) -> bool:
        self._check_same_currency(other, "compare")
        return self._amount > other._amount

    def greater_than_or_equal(self, other: Money) -> bool:
        self._check_same_currency(other, "compare")
        return self._amount >= other._amount

    def less_than(self, other: Money) -> bool:
        self._check_same_currency(other, "compare")
        return self._amount < other._amount

    def less_than_or_equal(self, other: Money) -> bool:
        self._check_same_currency(other, "compare")
        return self._amount <= other._amount

    __gt__ = greater_than
    __ge__ = greater_than_or_equal
    __lt__ = less_than
    __le__ = less_than_or_equal

    def __eq__(self, other: object) -> bool:
        # == never raises, so Money stays usable in sets and dict keys.
        # 100 EUR != 100 USD.
        if isinstance(other, Money):
            return self.same_currency(other) and self._amount == other._amount
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._amount, self._currency.code))

    # -------------------------------------------------------------------------
    # Partitioning
    # -------------------------------------------------------------------------

    def _partition_units(self, operation: str) -> int:
        fraction = self._currency.fraction
        units = _to_units(self._amount, fraction)
        if _scaled(units, fraction) != self._amount:
            logger.debug("%s rejected: %s has more than %d decimals", operation, self._amount, fraction)
            raise InvalidPartitionError(
                f"cannot {operation} {self._amount} {self.code}: round() to "
                f"{fraction} decimals first"
            )
        return units

    def split(self, n: int) -> list[Money]:
        """
        Split into n parts with an EXACT sum.

        Integer quotient and remainder in minor units. The first |remainder|
        parts get one extra minor unit, the others the plain quotient:

            Money.of_minor(100, "EUR").split(3)   # [0.34, 0.33, 0.33]
            Money.of_minor(-5, "EUR").split(3)    # [-0.02, -0.02, -0.01]

        Raises:
            InvalidPartitionError: n not an int or n <= 0, or an amount with
                more decimals than the currency (round() it first)
        """
        if not _is_int(n) or n <= 0:
            logger.debug("split rejected: n=%r", n)
            raise InvalidPartitionError(f"split count must be an int > 0, got {n!r}")

        fraction = self._currency.fraction
        units = self._partition_units("split")

        # Truncate toward zero so the remainder carries the amount's sign
        quotient = abs(units) // n
        if units < 0:
            quotient = -quotient
        remainder = units - quotient * n
        step = 1 if remainder > 0 else -1

        parts = []
        for _ in range(n):
            if remainder != 0:
                parts.append(self._with(_scaled(quotient + step, fraction)))
                remainder -= step
            else:
                parts.append(self._with(_scaled(quotient, fraction)))
        return parts

    def allocate(self, ratios: Sequence[int]) -> list[Money]:
        """
        Split proportionally to integer ratios, with an EXACT sum.

        ALGORITHM:
        1. part_i = amount * ratio_i / sum(ratios), rounded to the currency
           fraction with ties away from zero
        2. leftover = amount - sum(parts), positive, negative or zero
        3. One minor unit of leftover per party, from the first, until done

            Money.of_minor(100, "EUR").allocate([30, 30, 30])  # [0.34, 0.33, 0.33]

        Ratio order decides who absorbs rounding. Callers wanting fairness
        across repeated allocations must rotate the parties themselves.

        Raises:
            InvalidPartitionError: empty ratios, a ratio that is not a
                positive int, or an amount with more decimals than the
                currency (round() it first)
        """
        ratios = list(ratios)
        if not ratios:
            logger.debug("allocate rejected: no ratios")
            raise InvalidPartitionError("no ratios specified")
        for ratio in ratios:
            if not _is_int(ratio) or ratio < 1:
                logger.debug("allocate rejected: ratio=%r", ratio)
                raise InvalidPartitionError(f"ratios must be positive ints, got {ratio!r}")

        fraction = self._currency.fraction
        units = self._partition_units("allocate")
        total_ratio = sum(ratios)

        shares = [_div_round_half_up(units * ratio, total_ratio) for ratio in ratios]

        leftover = units - sum(shares)
        step = 1 if leftover > 0 else -1
        i = 0
        while leftover != 0:
            shares[i] += step
            leftover -= step
            i += 1

        return [self._with(_scaled(share, fraction)) for share in shares]

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def display(self, *, grouped: bool = False) -> str:
        """Render with the currency template, e.g. '£1.00'."""
        return formatting.display(self, grouped=grouped)

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Money('{self._amount}', '{self._currency.code}')"

    def __format__(self, spec: str) -> str:
        if not spec:
            return self.display()
        return format(self._amount, spec)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, str]:
        """
        Wire record: {"amount": "1.25", "currency": "EUR"}.

        NOTE: amount is a string, never a float.
        """
        from .serialization import encode
        return encode(self)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        registry: Optional[CurrencyRegistry] = None,
    ) -> Money:
        """Inverse of to_dict(). The amount is re-rounded to the currency."""
        from .serialization import decode
        return decode(data, registry=registry)


def _coerce_decimal(amount: Any) -> Decimal:
    if isinstance(amount, float):
        raise TypeError("float amounts are not accepted; use Money.from_float() explicitly")
    if isinstance(amount, Decimal):
        value = amount
    elif _is_int(amount):
        value = Decimal(amount)
    elif isinstance(amount, str):
        try:
            value = Decimal(amount.strip())
        except InvalidOperation:
            raise DecodeError(f"Not a decimal amount: {amount!r}") from None
    else:
        raise TypeError(f"Unsupported amount type: {type(amount).__name__}")

    if not value.is_finite():
        raise DecodeError(f"Amount must be finite, got {amount!r}")
    return value

