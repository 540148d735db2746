"""
serialization.py — Wire format for Money

Canonical record:

    {"amount": "125.22", "currency": "USD"}

The amount travels as a decimal string, never as a JSON number, so no
parser on the way can turn it into a float. Decoding is not a passthrough:
the code is resolved through the registry and the amount re-rounded to the
currency's fraction digits.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Optional
import json
import logging

from .core import Money
from .currency import CurrencyRegistry
from .errors import DecodeError, PrecisionError

logger = logging.getLogger(__name__)

AMOUNT_FIELD = "amount"
CURRENCY_FIELD = "currency"


def encode(money: Money) -> dict[str, str]:
    """Money -> {"amount": str, "currency": str}"""
    return {
        AMOUNT_FIELD: str(money.amount),
        CURRENCY_FIELD: money.code,
    }


def decode(record: Any, *, registry: Optional[CurrencyRegistry] = None) -> Money:
    """
    {"amount": str, "currency": str} -> Money

    The currency code is case-insensitive ("usd" -> USD).

    Raises:
        DecodeError: not a mapping, missing fields, amount not a decimal or
            too large to carry exactly
        UnknownCurrencyError: currency code not registered
    """
    if not isinstance(record, Mapping):
        raise DecodeError(f"Money record must be an object, got {type(record).__name__}")

    missing = [f for f in (AMOUNT_FIELD, CURRENCY_FIELD) if f not in record]
    if missing:
        raise DecodeError(f"Money record is missing field(s): {', '.join(missing)}")

    amount = record[AMOUNT_FIELD]
    code = record[CURRENCY_FIELD]

    if isinstance(amount, bool) or not isinstance(amount, (str, int)):
        raise DecodeError(
            f"'{AMOUNT_FIELD}' must be a decimal string, got {type(amount).__name__}"
        )
    if not isinstance(code, str):
        raise DecodeError(f"'{CURRENCY_FIELD}' must be a string, got {type(code).__name__}")

    try:
        return Money.of_decimal(amount, code, registry=registry)
    except DecodeError:
        logger.debug("Rejected money record: %r", record)
        raise
    except PrecisionError as e:
        logger.debug("Rejected money record: %r", record)
        raise DecodeError(f"'{AMOUNT_FIELD}' is out of range: {e}") from e


def to_json(money: Money, **kwargs: Any) -> str:
    """Money -> JSON text. kwargs go to json.dumps()."""
    return json.dumps(encode(money), **kwargs)


def from_json(text: str | bytes, *, registry: Optional[CurrencyRegistry] = None) -> Money:
    """
    JSON text -> Money.

        from_json('{"amount":"125.22","currency":"usd"}')   # 125.22 USD

    Raises:
        DecodeError: malformed JSON or record
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Malformed money JSON: {e}") from e
    return decode(data, registry=registry)
