"""
test_currency.py — Tests for Currency and CurrencyRegistry

Tests cover:
- Lookup of seeded codes, case-insensitivity, unknown codes
- Registration and validation
- Snapshot semantics for already-built Money
- Concurrent lookup during registration
"""

from decimal import Decimal
import logging
import threading

import pytest

from monetary import (
    Currency,
    CurrencyRegistry,
    InvalidCurrencyError,
    Money,
    UnknownCurrencyError,
    default_registry,
    lookup,
    register,
)
from monetary.iso4217 import CURRENCIES


@pytest.fixture
def registry():
    return CurrencyRegistry.seeded()


# ==============================================================================
# Lookup
# ==============================================================================

class TestLookup:

    def test_seeded_registry_has_every_row(self, registry):
        assert len(registry) == len(CURRENCIES)
        assert registry.codes() == sorted(row[0] for row in CURRENCIES)

    def test_lookup_known_code(self, registry):
        eur = registry.lookup("EUR")
        assert eur.code == "EUR"
        assert eur.fraction == 2
        assert eur.grapheme == "€"

    def test_lookup_is_case_insensitive(self, registry):
        assert registry.lookup("usd") is registry.lookup("USD")
        assert registry.lookup(" gbp ").code == "GBP"

    def test_lookup_unknown_code_raises(self, registry):
        with pytest.raises(UnknownCurrencyError) as exc_info:
            registry.lookup("ZZZ")
        assert exc_info.value.code == "ZZZ"

    def test_unknown_code_is_a_lookup_error(self, registry):
        with pytest.raises(LookupError):
            registry.lookup("ZZZ")

    def test_lookup_non_string_raises(self, registry):
        with pytest.raises(UnknownCurrencyError):
            registry.lookup(978)

    def test_contains(self, registry):
        assert "jpy" in registry
        assert "ZZZ" not in registry
        assert None not in registry

    def test_empty_registry(self):
        empty = CurrencyRegistry()
        assert len(empty) == 0
        with pytest.raises(UnknownCurrencyError):
            empty.lookup("EUR")

    def test_module_level_lookup_uses_default_registry(self):
        assert lookup("EUR") is default_registry.lookup("EUR")


class TestCurrency:

    def test_unit_and_multiplier(self, registry):
        kwd = registry.lookup("KWD")
        assert kwd.unit == Decimal("0.001")
        assert kwd.multiplier == 1000

        jpy = registry.lookup("JPY")
        assert jpy.unit == Decimal("1")
        assert jpy.multiplier == 1

    def test_same_as_compares_codes(self, registry):
        eur = registry.lookup("EUR")
        other = Currency("EUR", "E", "{amount}{symbol}", ",", ".", 2)
        assert eur.same_as(other)
        assert not eur.same_as(registry.lookup("USD"))

    def test_currency_is_frozen(self, registry):
        with pytest.raises(AttributeError):
            registry.lookup("EUR").fraction = 3


# ==============================================================================
# Registration
# ==============================================================================

class TestRegister:

    def test_register_new_code(self, registry):
        registry.register("MOCK", "M$", "{amount} {symbol}", ".", ",", 5)

        m = Money.of_minor(1, "MOCK", registry=registry)
        assert m.code == "MOCK"
        assert m.currency.fraction == 5
        assert m.amount == Decimal("0.00001")

    def test_register_normalizes_code(self, registry):
        registry.register("tok", "T", "{symbol}{amount}", ".", ",", 0)
        assert registry.lookup("TOK").code == "TOK"

    def test_register_overwrites(self, registry):
        registry.register("EUR", "EUR", "{amount} {symbol}", ",", ".", 2)
        assert registry.lookup("EUR").grapheme == "EUR"

    def test_overwrite_is_logged(self, registry, caplog):
        with caplog.at_level(logging.WARNING, logger="monetary.currency"):
            registry.register("EUR", "EUR", "{amount} {symbol}", ",", ".", 2)
        assert "EUR" in caplog.text

    def test_existing_money_keeps_its_definition(self, registry):
        before = Money.of_minor(100, "GBP", registry=registry)
        registry.register("GBP", "GBP ", "{symbol}{amount}", ".", ",", 3)

        assert before.currency.fraction == 2
        assert before.display() == "£1.00"

        after = Money.of_minor(100, "GBP", registry=registry)
        assert after.currency.fraction == 3
        assert after.amount == Decimal("0.100")

    def test_register_does_not_touch_default_registry(self, registry):
        registry.register("ONLYHERE", "O", "{symbol}{amount}", ".", ",", 2)
        assert "ONLYHERE" not in default_registry

    @pytest.mark.parametrize(
        "code, template, fraction",
        [
            ("", "{symbol}{amount}", 2),
            ("BAD", "{symbol}{amount}", -1),
            ("BAD", "{symbol}{amount}", 2.0),
            ("BAD", "{symbol}{amount}", True),
            ("BAD", "$1", 2),
            ("BAD", "{amount}", 2),
            ("BAD", "{symbol}{amount}{amount}", 2),
        ],
    )
    def test_register_rejects_bad_definitions(self, registry, code, template, fraction):
        with pytest.raises(InvalidCurrencyError):
            registry.register(code, "B", template, ".", ",", fraction)

    @pytest.mark.parametrize(
        "grapheme, template, separators",
        [
            ("B", None, (".", ",")),
            ("B", b"{symbol}{amount}", (".", ",")),
            (None, "{symbol}{amount}", (".", ",")),
            (36, "{symbol}{amount}", (".", ",")),
            ("B", "{symbol}{amount}", (None, ",")),
            ("B", "{symbol}{amount}", (".", 0)),
        ],
    )
    def test_register_rejects_non_string_fields(self, registry, grapheme, template, separators):
        with pytest.raises(InvalidCurrencyError):
            registry.register("BAD", grapheme, template, *separators, 2)
        assert "BAD" not in registry

    def test_register_rejects_non_string_code(self, registry):
        with pytest.raises(InvalidCurrencyError):
            registry.register(None, "B", "{symbol}{amount}", ".", ",", 2)

    def test_module_level_register(self):
        register("TESTONLY", "T", "{symbol}{amount}", ".", ",", 1)
        assert Money.of_minor(15, "testonly").amount == Decimal("1.5")


# ==============================================================================
# Concurrency
# ==============================================================================

class TestConcurrency:

    def test_lookups_during_registration_never_fail(self, registry):
        seeded = [row[0] for row in CURRENCIES]
        errors = []
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                for code in seeded:
                    try:
                        registry.lookup(code)
                    except Exception as e:  # collected and asserted below
                        errors.append(e)

        def writer(offset):
            for i in range(200):
                registry.register(f"W{offset}X{i}", "W", "{symbol}{amount}", ".", ",", i % 5)

        readers = [threading.Thread(target=reader) for _ in range(4)]
        writers = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for t in readers + writers:
            t.start()
        for t in writers:
            t.join()
        stop.set()
        for t in readers:
            t.join()

        assert errors == []
        assert len(registry) == len(seeded) + 4 * 200
