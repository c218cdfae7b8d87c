"""Unit tests for money display formatting"""

from decimal import Decimal

from src.domain.money import currency_symbol, format_money


class TestFormatMoney:

    def test_cedi_with_grouping_and_two_decimals(self):
        assert format_money(Decimal("1210"), "GHS") == "GH₵ 1,210.00"

    def test_rounds_half_up_for_display(self):
        assert format_money(Decimal("0.005"), "GHS") == "GH₵ 0.01"
        assert format_money(Decimal("10.004"), "GHS") == "GH₵ 10.00"

    def test_defaults_to_cedi(self):
        assert format_money(Decimal("5")) == "GH₵ 5.00"

    def test_known_currency_symbol(self):
        assert format_money(Decimal("1500.5"), "USD") == "$ 1,500.50"

    def test_unknown_currency_falls_back_to_code(self):
        assert currency_symbol("XOF") == "XOF"
        assert format_money(Decimal("1"), "XOF") == "XOF 1.00"
