"""Unit of Work Interface

Groups repository writes so a document header and its line items are
committed together or not at all.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
