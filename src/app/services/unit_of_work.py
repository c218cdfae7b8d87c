"""Unit of Work Interface

commit() is the point at which the store has confirmed a write. Nothing is
considered changed before it returns.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
