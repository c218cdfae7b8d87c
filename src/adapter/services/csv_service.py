"""CSV Export Service Implementation

Headers come from the first record's keys. Text values are always quoted,
nested objects are JSON-encoded, and numbers are written unquoted.
"""

import csv
import io
import json
from decimal import Decimal
from typing import Any, Dict, List

from src.app.services.csv_service import CsvService


class StdlibCsvService(CsvService):

    def rows_to_csv(self, rows: List[Dict[str, Any]]) -> str:
        if not rows:
            return ""

        headers = list(rows[0].keys())
        buffer = io.StringIO()

        csv.writer(buffer, lineterminator="\n").writerow(headers)
        writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
        for row in rows:
            writer.writerow([self._cell(row.get(header)) for header in headers])

        return buffer.getvalue()

    @staticmethod
    def _cell(value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, Decimal):
            return int(value) if value == value.to_integral_value() else float(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        if isinstance(value, (dict, list)):
            return json.dumps(value, default=str)
        return str(value)
