"""Money display formatting

Presentation only. Formatted strings are never parsed back into amounts.
"""

from decimal import Decimal, ROUND_HALF_UP

CURRENCY_SYMBOLS = {
    "GHS": "GH₵",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "NGN": "₦",
}

_CENT = Decimal("0.01")


def currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOLS.get(currency, currency)


def format_money(amount: Decimal, currency: str = "GHS") -> str:
    """Render an amount as e.g. 'GH₵ 1,210.00'"""
    rounded = Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"{currency_symbol(currency)} {rounded:,.2f}"
