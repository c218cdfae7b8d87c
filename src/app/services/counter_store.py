"""Local Counter Store Interface

A small durable key-value store local to one client instance. Values are
strings; a missing key reads as None.
"""

from abc import ABC, abstractmethod
from typing import Optional


class CounterStore(ABC):

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass
