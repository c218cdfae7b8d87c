"""Unit tests for the tax composition engine"""

import itertools
import pytest
from decimal import Decimal

from src.domain.line_item import LineItem
from src.domain.tax import (
    InvalidLineItemError,
    compute_subtotal,
    compute_totals,
    effective_rate,
)


def items_totalling_1000():
    return [
        LineItem(description="Logo design", quantity=2, price=Decimal("250")),
        LineItem(description="Business cards", quantity=5, price=Decimal("100")),
    ]


class TestSubtotal:

    def test_subtotal_is_sum_of_quantity_times_price(self):
        assert compute_subtotal(items_totalling_1000()) == Decimal("1000")

    def test_empty_items_give_zero(self):
        assert compute_subtotal([]) == Decimal("0")

    def test_item_order_does_not_matter(self):
        items = items_totalling_1000()
        assert compute_subtotal(items) == compute_subtotal(list(reversed(items)))

    def test_negative_price_is_rejected(self):
        with pytest.raises(InvalidLineItemError) as exc_info:
            compute_subtotal([LineItem(description="Refund", quantity=1, price=Decimal("-5"))])
        assert exc_info.value.field == "price"

    def test_negative_quantity_is_rejected(self):
        with pytest.raises(InvalidLineItemError) as exc_info:
            compute_subtotal([LineItem(description="Oops", quantity=-1, price=Decimal("5"))])
        assert exc_info.value.field == "quantity"


class TestComputeTotals:

    @pytest.mark.parametrize(
        "vat_enabled,levies_enabled,covid_levy_enabled",
        list(itertools.product([False, True], repeat=3)),
    )
    def test_every_flag_combination_on_1000(self, vat_enabled, levies_enabled, covid_levy_enabled):
        """Each enabled flag adds its own share of the subtotal, independently"""
        totals = compute_totals(
            items_totalling_1000(),
            vat_rate=15,
            vat_enabled=vat_enabled,
            levies_enabled=levies_enabled,
            covid_levy_enabled=covid_levy_enabled,
        )

        expected = Decimal("1000")
        expected += Decimal("150") if vat_enabled else 0
        expected += Decimal("50") if levies_enabled else 0
        expected += Decimal("10") if covid_levy_enabled else 0

        assert totals.subtotal == Decimal("1000")
        assert totals.total == expected

    def test_all_flags_off_total_equals_subtotal(self):
        totals = compute_totals(items_totalling_1000())

        assert totals.vat_amount == 0
        assert totals.levies_amount == 0
        assert totals.covid_amount == 0
        assert totals.total == totals.subtotal

    def test_all_flags_on_gives_1210(self):
        totals = compute_totals(
            items_totalling_1000(),
            vat_rate=Decimal("15"),
            vat_enabled=True,
            levies_enabled=True,
            covid_levy_enabled=True,
        )

        assert totals.vat_amount == Decimal("150")
        assert totals.levies_amount == Decimal("50")
        assert totals.covid_amount == Decimal("10")
        assert totals.total == Decimal("1210")

    def test_levies_are_not_compounded_on_vat(self):
        """Levies apply to the subtotal, never to subtotal + VAT"""
        totals = compute_totals(
            [LineItem(description="Consulting", quantity=1, price=Decimal("200"))],
            vat_enabled=True,
            levies_enabled=True,
        )

        assert totals.levies_amount == Decimal("10")

    def test_total_is_sum_of_parts(self):
        totals = compute_totals(
            [LineItem(description="Printing", quantity=3, price=Decimal("33.33"))],
            vat_rate=Decimal("12.5"),
            vat_enabled=True,
            levies_enabled=True,
            covid_levy_enabled=True,
        )

        assert totals.total == (
            totals.subtotal + totals.vat_amount + totals.levies_amount + totals.covid_amount
        )

    def test_amounts_are_not_rounded(self):
        totals = compute_totals(
            [LineItem(description="Fraction", quantity=1, price=Decimal("0.33"))],
            covid_levy_enabled=True,
        )

        assert totals.covid_amount == Decimal("0.0033")

    def test_custom_vat_rate(self):
        totals = compute_totals(items_totalling_1000(), vat_rate="12.5", vat_enabled=True)

        assert totals.vat_amount == Decimal("125")
        assert totals.total == Decimal("1125")

    def test_vat_rate_ignored_when_vat_disabled(self):
        totals = compute_totals(items_totalling_1000(), vat_rate=99, vat_enabled=False)

        assert totals.total == Decimal("1000")


class TestEffectiveRate:

    def test_all_flags_on(self):
        rate = effective_rate(
            vat_rate=15, vat_enabled=True, levies_enabled=True, covid_levy_enabled=True
        )
        assert rate == Decimal("21")

    def test_no_flags(self):
        assert effective_rate(vat_rate=15) == Decimal("0")

    def test_levies_only(self):
        assert effective_rate(levies_enabled=True) == Decimal("5")


class TestRecomputation:

    def test_recomputation_is_identical(self):
        kwargs = dict(vat_rate=Decimal("15"), vat_enabled=True, levies_enabled=True, covid_levy_enabled=True)
        items = [LineItem(description="Odd price", quantity=7, price=Decimal("13.37"))]

        first = compute_totals(items, **kwargs)
        second = compute_totals(items, **kwargs)

        assert first == second
        assert str(first.total) == str(second.total)
