"""
iso4217.py — Built-in currency table

Static seed data loaded into CurrencyRegistry.seeded(). One row per ISO 4217
code:

    (code, grapheme, template, decimal_separator, thousands_separator, fraction)

Templates use the {amount} and {symbol} placeholders understood by
monetary.formatting.
"""

from __future__ import annotations

# Common template shapes
_PREFIX = "{symbol}{amount}"
_PREFIX_SPACED = "{symbol} {amount}"
_SUFFIX = "{amount}{symbol}"
_SUFFIX_SPACED = "{amount} {symbol}"


CURRENCIES: tuple[tuple[str, str, str, str, str, int], ...] = (
    ("AED", ".د.إ", _SUFFIX_SPACED, ".", ",", 2),
    ("AFN", "؋", _SUFFIX_SPACED, ".", ",", 2),
    ("ALL", "L", _PREFIX, ".", ",", 2),
    ("AMD", "դր.", _SUFFIX_SPACED, ".", ",", 2),
    ("ANG", "ƒ", _PREFIX, ".", ",", 2),
    ("ARS", "$", _PREFIX, ".", ",", 2),
    ("AUD", "$", _PREFIX, ".", ",", 2),
    ("AWG", "ƒ", _PREFIX, ".", ",", 2),
    ("AZN", "₼", _PREFIX, ".", ",", 2),
    ("BAM", "KM", _PREFIX, ".", ",", 2),
    ("BBD", "$", _PREFIX, ".", ",", 2),
    ("BDT", "৳", _PREFIX, ".", ",", 2),
    ("BGN", "лв", _PREFIX, ".", ",", 2),
    ("BHD", ".د.ب", _SUFFIX_SPACED, ".", ",", 3),
    ("BMD", "$", _PREFIX, ".", ",", 2),
    ("BND", "$", _PREFIX, ".", ",", 2),
    ("BOB", "Bs.", _PREFIX, ".", ",", 2),
    ("BRL", "R$", _PREFIX, ",", ".", 2),
    ("BSD", "$", _PREFIX, ".", ",", 2),
    ("BWP", "P", _PREFIX, ".", ",", 2),
    ("BYN", "p.", _SUFFIX_SPACED, ",", " ", 2),
    ("BZD", "BZ$", _PREFIX, ".", ",", 2),
    ("CAD", "$", _PREFIX, ".", ",", 2),
    ("CHF", "CHF", _SUFFIX_SPACED, ".", ",", 2),
    ("CLF", "UF", _PREFIX, ",", ".", 4),
    ("CLP", "$", _PREFIX, ",", ".", 0),
    ("CNY", "元", _SUFFIX_SPACED, ".", ",", 2),
    ("COP", "$", _PREFIX, ",", ".", 2),
    ("CRC", "₡", _PREFIX, ".", ",", 2),
    ("CUP", "$MN", _PREFIX, ".", ",", 2),
    ("CZK", "Kč", _SUFFIX_SPACED, ",", ".", 2),
    ("DKK", "kr", _SUFFIX_SPACED, ",", ".", 2),
    ("DOP", "RD$", _PREFIX, ".", ",", 2),
    ("DZD", ".د.ج", _SUFFIX_SPACED, ".", ",", 2),
    ("EGP", "£", _PREFIX, ".", ",", 2),
    ("ETB", "Br", _PREFIX, ".", ",", 2),
    ("EUR", "€", _PREFIX, ".", ",", 2),
    ("FJD", "$", _PREFIX, ".", ",", 2),
    ("FKP", "£", _PREFIX, ".", ",", 2),
    ("GBP", "£", _PREFIX, ".", ",", 2),
    ("GEL", "ლ", _SUFFIX_SPACED, ".", ",", 2),
    ("GHS", "¢", _PREFIX, ".", ",", 2),
    ("GIP", "£", _PREFIX, ".", ",", 2),
    ("GTQ", "Q", _PREFIX, ".", ",", 2),
    ("GYD", "$", _PREFIX, ".", ",", 2),
    ("HKD", "$", _PREFIX, ".", ",", 2),
    ("HNL", "L", _PREFIX, ".", ",", 2),
    ("HRK", "kn", _PREFIX, ".", ",", 2),
    ("HUF", "Ft", _PREFIX, ".", ",", 2),
    ("IDR", "Rp", _PREFIX, ".", ",", 2),
    ("ILS", "₪", _PREFIX, ".", ",", 2),
    ("INR", "₹", _PREFIX, ".", ",", 2),
    ("IQD", ".د.ع", _SUFFIX_SPACED, ".", ",", 3),
    ("IRR", "﷼", _SUFFIX, ".", ",", 2),
    ("ISK", "kr", _PREFIX, ".", ",", 0),
    ("JMD", "J$", _PREFIX, ".", ",", 2),
    ("JOD", ".د.إ", _SUFFIX_SPACED, ".", ",", 3),
    ("JPY", "¥", _PREFIX, ".", ",", 0),
    ("KES", "KSh", _PREFIX, ".", ",", 2),
    ("KGS", "сом", _PREFIX, ".", ",", 2),
    ("KHR", "៛", _PREFIX, ".", ",", 2),
    ("KPW", "₩", _PREFIX, ".", ",", 0),
    ("KRW", "₩", _PREFIX, ".", ",", 0),
    ("KWD", ".د.ك", _SUFFIX_SPACED, ".", ",", 3),
    ("KYD", "$", _PREFIX, ".", ",", 2),
    ("KZT", "₸", _PREFIX, ".", ",", 2),
    ("LAK", "₭", _PREFIX, ".", ",", 2),
    ("LBP", "£", _PREFIX, ".", ",", 2),
    ("LKR", "₨", _PREFIX, ".", ",", 2),
    ("LRD", "$", _PREFIX, ".", ",", 2),
    ("LYD", ".د.ل", _SUFFIX, ".", ",", 3),
    ("MAD", ".د.م", _SUFFIX_SPACED, ".", ",", 2),
    ("MKD", "ден", _PREFIX, ".", ",", 2),
    ("MNT", "₮", _PREFIX, ".", ",", 2),
    ("MUR", "₨", _PREFIX, ".", ",", 2),
    ("MXN", "$", _PREFIX, ".", ",", 2),
    ("MYR", "RM", _PREFIX, ".", ",", 2),
    ("MZN", "MT", _PREFIX, ".", ",", 2),
    ("NAD", "$", _PREFIX, ".", ",", 2),
    ("NGN", "₦", _PREFIX, ".", ",", 2),
    ("NIO", "C$", _PREFIX, ".", ",", 2),
    ("NOK", "kr", _SUFFIX_SPACED, ".", ",", 2),
    ("NPR", "₨", _PREFIX, ".", ",", 2),
    ("NZD", "$", _PREFIX, ".", ",", 2),
    ("OMR", "﷼", _SUFFIX_SPACED, ".", ",", 3),
    ("PAB", "B/.", _PREFIX, ".", ",", 2),
    ("PEN", "S/", _PREFIX, ".", ",", 2),
    ("PHP", "₱", _PREFIX, ".", ",", 2),
    ("PKR", "₨", _PREFIX, ".", ",", 2),
    ("PLN", "zł", _SUFFIX_SPACED, ",", " ", 2),
    ("PYG", "Gs", _SUFFIX, ".", ",", 0),
    ("QAR", "﷼", _SUFFIX_SPACED, ".", ",", 2),
    ("RON", "lei", _PREFIX, ",", ".", 2),
    ("RSD", "Дин.", _PREFIX, ".", ",", 2),
    ("RUB", "₽", _SUFFIX_SPACED, ",", ".", 2),
    ("SAR", "﷼", _SUFFIX_SPACED, ".", ",", 2),
    ("SBD", "$", _PREFIX, ".", ",", 2),
    ("SCR", "₨", _PREFIX, ".", ",", 2),
    ("SEK", "kr", _SUFFIX_SPACED, ",", " ", 2),
    ("SGD", "$", _PREFIX, ".", ",", 2),
    ("SHP", "£", _PREFIX, ".", ",", 2),
    ("SOS", "S", _PREFIX, ".", ",", 2),
    ("SRD", "$", _PREFIX, ".", ",", 2),
    ("SVC", "$", _PREFIX, ".", ",", 2),
    ("SYP", "£", _PREFIX, ".", ",", 2),
    ("THB", "฿", _PREFIX, ".", ",", 2),
    ("TND", ".د.ت", _SUFFIX_SPACED, ".", ",", 3),
    ("TRY", "₺", _PREFIX, ",", ".", 2),
    ("TTD", "TT$", _PREFIX, ".", ",", 2),
    ("TWD", "NT$", _PREFIX, ".", ",", 2),
    ("UAH", "₴", _PREFIX, ".", ",", 2),
    ("USD", "$", _PREFIX, ".", ",", 2),
    ("UYU", "$U", _PREFIX, ".", ",", 2),
    ("UZS", "so’m", _PREFIX, ".", ",", 2),
    ("VND", "₫", _SUFFIX_SPACED, ".", ",", 0),
    ("XAF", "Fr", _SUFFIX_SPACED, ".", ",", 0),
    ("XCD", "$", _PREFIX, ".", ",", 2),
    ("XOF", "CFA", _SUFFIX_SPACED, ".", ",", 0),
    ("XPF", "₣", _SUFFIX_SPACED, ".", ",", 0),
    ("YER", "﷼", _SUFFIX_SPACED, ".", ",", 2),
    ("ZAR", "R", _PREFIX_SPACED, ".", ",", 2),
    ("ZWD", "Z$", _PREFIX, ".", ",", 2),
)
