"""Tax Composition Engine

Derives invoice totals from line items, a VAT rate and three independent
toggles (VAT, levies, COVID-19 levy). Everything is computed on raw
Decimals straight from the subtotal; rounding belongs to display
formatting only.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Union

from src.domain.line_item import LineItem

DEFAULT_VAT_RATE = Decimal("15")

# NHIL 2.5% + GETFund 2.5%, one toggle
LEVIES_RATE = Decimal("0.05")
COVID_LEVY_RATE = Decimal("0.01")

_HUNDRED = Decimal("100")


class InvalidLineItemError(ValueError):
    """Raised when a line item carries a negative quantity or price"""

    def __init__(self, item: LineItem, field: str):
        self.item = item
        self.field = field
        super().__init__(
            f"Line item '{item.description}' has a negative {field}: {getattr(item, field)}"
        )


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: Decimal
    vat_amount: Decimal
    levies_amount: Decimal
    covid_amount: Decimal
    total: Decimal


def check_line_item(item: LineItem) -> None:
    if item.quantity < 0:
        raise InvalidLineItemError(item, "quantity")
    if item.price < 0:
        raise InvalidLineItemError(item, "price")


def compute_subtotal(items: Iterable[LineItem]) -> Decimal:
    subtotal = Decimal("0")
    for item in items:
        check_line_item(item)
        subtotal += item.line_total
    return subtotal


def compute_totals(
    items: Iterable[LineItem],
    vat_rate: Union[Decimal, int, str] = DEFAULT_VAT_RATE,
    vat_enabled: bool = False,
    levies_enabled: bool = False,
    covid_levy_enabled: bool = False,
) -> InvoiceTotals:
    """
    Compute subtotal, each levy and the grand total

    Args:
        items: Line items (order does not affect the result)
        vat_rate: VAT percentage (e.g. 15 for 15%)
        vat_enabled: Apply VAT
        levies_enabled: Apply the bundled 5% NHIL/GETFund levies
        covid_levy_enabled: Apply the 1% COVID-19 recovery levy

    Returns:
        InvoiceTotals with unrounded Decimal amounts

    Raises:
        InvalidLineItemError: if any item has a negative quantity or price
    """
    subtotal = compute_subtotal(items)
    rate = Decimal(str(vat_rate))

    vat_amount = subtotal * (rate / _HUNDRED) if vat_enabled else Decimal("0")
    levies_amount = subtotal * LEVIES_RATE if levies_enabled else Decimal("0")
    covid_amount = subtotal * COVID_LEVY_RATE if covid_levy_enabled else Decimal("0")

    return InvoiceTotals(
        subtotal=subtotal,
        vat_amount=vat_amount,
        levies_amount=levies_amount,
        covid_amount=covid_amount,
        total=subtotal + vat_amount + levies_amount + covid_amount,
    )


def effective_rate(
    vat_rate: Union[Decimal, int, str] = DEFAULT_VAT_RATE,
    vat_enabled: bool = False,
    levies_enabled: bool = False,
    covid_levy_enabled: bool = False,
) -> Decimal:
    """Combined percentage added on top of the subtotal"""
    rate = Decimal("0")
    if vat_enabled:
        rate += Decimal(str(vat_rate))
    if levies_enabled:
        rate += LEVIES_RATE * _HUNDRED
    if covid_levy_enabled:
        rate += COVID_LEVY_RATE * _HUNDRED
    return rate
