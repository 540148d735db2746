#!/usr/bin/env python3
"""
split_bill.py — Splitting money without losing a cent

================================================================================
THE BUG
================================================================================

    >>> 100.0 / 3 * 3
    100.0
    >>> round(1.00 / 3, 2) * 3
    0.99

Rounding each share on its own loses (or invents) minor units. Someone
ends up paying a cent nobody owes, or a cent disappears from the books.

================================================================================
THE FIX
================================================================================

    from monetary import Money

    bill = Money.of_minor(100, "EUR")
    bill.split(3)                 # [0.34, 0.33, 0.33]
    bill.allocate([50, 30, 20])   # [0.50, 0.30, 0.20]

The parts always add up to the original. Leftover cents go to the first
parties, one each, so the result is reproducible and auditable.

================================================================================
"""

from monetary import (
    CurrencyMismatchError,
    Money,
    display,
    from_json,
    register,
    to_json,
)


def demonstrate_bug():
    """Show the naive float approach."""
    print("=" * 60)
    print("THE BUG")
    print("=" * 60)
    print()
    share = round(1.00 / 3, 2)
    print(">>> round(1.00 / 3, 2) * 3")
    print(f"{share * 3}")
    print()


def demonstrate_split():
    """Equal parts."""
    print("=" * 60)
    print("SPLIT")
    print("=" * 60)
    print()

    bill = Money.of_minor(100, "EUR")
    parts = bill.split(3)
    for i, part in enumerate(parts, 1):
        print(f"  Party {i}: {part}")
    print(f"  Sum:     {sum(parts)}")
    print(f"  Equal?   {sum(parts) == bill}")
    print()


def demonstrate_allocate():
    """Proportional parts."""
    print("=" * 60)
    print("ALLOCATE")
    print("=" * 60)
    print()

    rent = Money.of(1999, "GBP")
    ratios = [45, 35, 20]
    parts = rent.allocate(ratios)
    for ratio, part in zip(ratios, parts):
        print(f"  {ratio:3d}%: {display(part, grouped=True)}")
    print(f"  Sum:  {display(sum(parts), grouped=True)}")
    print()


def demonstrate_type_safety():
    """Currencies never mix."""
    print("=" * 60)
    print("TYPE SAFETY")
    print("=" * 60)
    print()

    eur = Money.of(100, "EUR")
    usd = Money.of(100, "USD")

    print(">>> eur + usd")
    try:
        eur + usd
    except CurrencyMismatchError as e:
        print(f"CurrencyMismatchError: {e}")
    print()

    print(">>> eur + 50.0")
    try:
        eur + 50.0
    except TypeError as e:
        print(f"TypeError: {e}")
    print()


def demonstrate_wire_format():
    """JSON in and out."""
    print("=" * 60)
    print("WIRE FORMAT")
    print("=" * 60)
    print()

    register("MOCK", "M$", "{amount} {symbol}", ".", ",", 5)
    original = Money.of_minor(123456, "MOCK")
    text = to_json(original)
    print(f"Encoded:  {text}")

    restored = from_json(text)
    print(f"Restored: {restored}")
    print(f"Equal:    {restored == original}")
    print()


def main():
    demonstrate_bug()
    demonstrate_split()
    demonstrate_allocate()
    demonstrate_type_safety()
    demonstrate_wire_format()


if __name__ == "__main__":
    main()
