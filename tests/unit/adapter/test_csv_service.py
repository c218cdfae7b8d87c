"""Unit tests for CSV serialization"""

from decimal import Decimal

from src.adapter.services.csv_service import StdlibCsvService


class TestStdlibCsvService:

    def test_no_rows_gives_empty_document(self):
        assert StdlibCsvService().rows_to_csv([]) == ""

    def test_headers_from_first_row_and_strings_quoted(self):
        content = StdlibCsvService().rows_to_csv([
            {"InvoiceNumber": "INV-2026-001", "Total": Decimal("1210.000000"), "Status": "Paid"},
        ])

        lines = content.splitlines()
        assert lines[0] == "InvoiceNumber,Total,Status"
        assert lines[1] == '"INV-2026-001",1210,"Paid"'

    def test_fractional_amounts_unquoted(self):
        content = StdlibCsvService().rows_to_csv([{"Amount": Decimal("12.50")}])

        assert content.splitlines()[1] == "12.5"

    def test_embedded_quotes_and_commas_are_escaped(self):
        content = StdlibCsvService().rows_to_csv([{"ClientName": 'Kofi "KP" Prints, Ltd'}])

        assert content.splitlines()[1] == '"Kofi ""KP"" Prints, Ltd"'

    def test_nested_objects_are_json_encoded(self):
        content = StdlibCsvService().rows_to_csv([{"Client": {"name": "Ama"}}])

        assert content.splitlines()[1] == '"{""name"": ""Ama""}"'

    def test_missing_keys_in_later_rows_are_blank(self):
        content = StdlibCsvService().rows_to_csv([
            {"A": "x", "B": "y"},
            {"A": "z"},
        ])

        assert content.splitlines()[2] == '"z",""'
