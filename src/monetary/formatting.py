"""
formatting.py — Human-readable rendering of Money

Templates carry two placeholders, {amount} and {symbol}. Both are replaced
in a single pass, so digits or symbols produced by the substitution are
never substituted again.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
import re
from typing import TYPE_CHECKING

from .context import ROUNDING
from .currency import AMOUNT_PLACEHOLDER, SYMBOL_PLACEHOLDER

if TYPE_CHECKING:
    from .core import Money

_PLACEHOLDER = re.compile(
    "|".join(re.escape(p) for p in (AMOUNT_PLACEHOLDER, SYMBOL_PLACEHOLDER))
)


def _round_for_display(amount: Decimal, fraction: int) -> Decimal:
    return amount.quantize(Decimal((0, (1,), -fraction)), rounding=ROUND_HALF_UP, context=ROUNDING)


def format_amount(
    amount: Decimal,
    fraction: int,
    decimal_separator: str = ".",
    thousands_separator: str = "",
) -> str:
    """
    Render a non-negative amount with exactly `fraction` decimals.

    Amounts carrying more digits (e.g. after divide()) are rounded half away
    from zero for display only.
    """
    fixed = _round_for_display(amount, fraction)
    text = f"{fixed:f}"
    integer, _, decimals = text.partition(".")

    if thousands_separator:
        groups = []
        while len(integer) > 3:
            groups.insert(0, integer[-3:])
            integer = integer[:-3]
        groups.insert(0, integer)
        integer = thousands_separator.join(groups)

    if fraction == 0:
        return integer
    return f"{integer}{decimal_separator}{decimals}"


def display(money: Money, *, grouped: bool = False) -> str:
    """
    Render money with its currency template.

        display(Money.of_minor(100, "GBP"))                      # '£1.00'
        display(Money.of_minor(123456789, "EUR"), grouped=True)  # '€1,234,567.89'

    By default the amount uses '.' and no grouping. grouped=True applies the
    currency's own separators. The sign follows the displayed value, so an
    amount that rounds to zero carries no minus.
    """
    currency = money.currency
    rounded = _round_for_display(money.amount, currency.fraction)
    if grouped:
        amount_text = format_amount(
            rounded.copy_abs(),
            currency.fraction,
            currency.decimal_separator,
            currency.thousands_separator,
        )
    else:
        amount_text = format_amount(rounded.copy_abs(), currency.fraction)

    replacements = {
        AMOUNT_PLACEHOLDER: amount_text,
        SYMBOL_PLACEHOLDER: currency.grapheme,
    }
    text = _PLACEHOLDER.sub(lambda match: replacements[match.group(0)], currency.template)

    if rounded < 0:
        text = "-" + text
    return text
