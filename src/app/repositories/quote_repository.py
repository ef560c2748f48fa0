"""Quote Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.quote import Quote
from src.domain.quote_item import QuoteItem


class QuoteRepository(ABC):
    """
    Repository interface for Quote and QuoteItem persistence
    """

    @abstractmethod
    async def create(self, quote: Quote) -> Quote:
        """
        Create a new quote

        Raises sqlalchemy.exc.IntegrityError when quote_number is taken.
        """
        pass

    @abstractmethod
    async def get_by_id(self, quote_id: int) -> Optional[Quote]:
        pass

    @abstractmethod
    async def get_latest_number(self) -> Optional[str]:
        """Quote number of the most recently created quote, or None"""
        pass

    @abstractmethod
    async def add_item(self, item: QuoteItem) -> QuoteItem:
        pass

    @abstractmethod
    async def get_items(self, quote_id: int) -> List[QuoteItem]:
        pass
