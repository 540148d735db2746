"""
test_formatting.py — Tests for display() and format_amount()
"""

from decimal import Decimal

import pytest

from monetary import CurrencyRegistry, Money, display, format_amount


@pytest.fixture
def registry():
    return CurrencyRegistry.seeded()


class TestDisplay:

    @pytest.mark.parametrize(
        "minor, code, expected",
        [
            (100, "GBP", "£1.00"),
            (1, "USD", "$0.01"),
            (100, "AED", "1.00 .د.إ"),
            (1500, "KWD", "1.500 .د.ك"),
            (1000, "JPY", "¥1000"),
            (-100, "EUR", "-€1.00"),
            (0, "EUR", "€0.00"),
        ],
    )
    def test_display(self, minor, code, expected):
        assert display(Money.of_minor(minor, code)) == expected

    def test_money_methods_delegate(self):
        m = Money.of_minor(100, "GBP")
        assert m.display() == "£1.00"
        assert str(m) == "£1.00"
        assert f"{m}" == "£1.00"

    def test_format_spec_formats_amount(self):
        assert f"{Money.of_minor(125, 'EUR'):.3f}" == "1.250"

    def test_repr(self):
        assert repr(Money.of_minor(125, "EUR")) == "Money('1.25', 'EUR')"

    def test_grouped_uses_currency_separators(self):
        assert display(Money.of_minor(123456789, "EUR"), grouped=True) == "€1,234,567.89"
        assert display(Money.of_minor(123456789, "BRL"), grouped=True) == "R$1.234.567,89"
        assert display(Money.of_minor(-1234567, "JPY"), grouped=True) == "-¥1,234,567"

    def test_default_is_not_grouped(self):
        assert display(Money.of_minor(123456789, "EUR")) == "€1234567.89"

    def test_symbol_containing_digits_is_not_substituted_twice(self, registry):
        # The old "1"/"$" token scheme would corrupt both of these
        registry.register("ONE", "1$", "{symbol} {amount}", ".", ",", 2)
        m = Money.of_minor(11111, "ONE", registry=registry)
        assert display(m) == "1$ 111.11"

    def test_symbol_containing_placeholder_text(self, registry):
        registry.register("ODD", "{amount}", "{amount}{symbol}", ".", ",", 0)
        m = Money.of_minor(7, "ODD", registry=registry)
        assert display(m) == "7{amount}"

    def test_unrounded_amount_is_padded_for_display_only(self):
        m = Money.of_minor(100, "EUR").divide(3)
        assert display(m) == "€0.33"
        assert m.amount != Decimal("0.33")

    def test_amount_rounding_to_zero_has_no_minus(self):
        m = Money.of_minor(-1, "EUR").divide(10)
        assert m.is_negative()
        assert display(m) == "€0.00"

    def test_sign_follows_rounded_amount(self):
        assert display(Money.of_minor(-5, "EUR").divide(10)) == "-€0.01"
        assert display(Money.of_minor(-4, "JPY").divide(10)) == "¥0"


class TestFormatAmount:

    def test_fixed_digits(self):
        assert format_amount(Decimal("1.5"), 2) == "1.50"
        assert format_amount(Decimal("1"), 3) == "1.000"
        assert format_amount(Decimal("12.6"), 0) == "13"

    def test_grouping(self):
        assert format_amount(Decimal("1234567.891"), 3, ",", ".") == "1.234.567,891"
        assert format_amount(Decimal("999"), 2, ".", ",") == "999.00"
        assert format_amount(Decimal("1000"), 0, ".", " ") == "1 000"
