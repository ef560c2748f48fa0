"""Sales Order Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.sales_order import SalesOrder
from src.domain.sales_order_item import SalesOrderItem


class SalesOrderRepository(ABC):
    """
    Repository interface for SalesOrder and SalesOrderItem persistence
    """

    @abstractmethod
    async def create(self, order: SalesOrder) -> SalesOrder:
        """
        Create a new sales order

        Raises sqlalchemy.exc.IntegrityError when order_number is taken.
        """
        pass

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Optional[SalesOrder]:
        pass

    @abstractmethod
    async def get_latest_number(self) -> Optional[str]:
        """Order number of the most recently created sales order, or None"""
        pass

    @abstractmethod
    async def add_item(self, item: SalesOrderItem) -> SalesOrderItem:
        pass

    @abstractmethod
    async def get_items(self, order_id: int) -> List[SalesOrderItem]:
        pass
