"""CSV Export Service Interface"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class CsvService(ABC):

    @abstractmethod
    def rows_to_csv(self, rows: List[Dict[str, Any]]) -> str:
        """
        Serialize records to CSV text

        The header row is taken from the keys of the first record.

        Args:
            rows: Flat records (nested objects are JSON-encoded)

        Returns:
            CSV document as a string (empty string when there are no rows)
        """
        pass
