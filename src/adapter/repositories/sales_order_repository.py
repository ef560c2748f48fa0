"""SQLAlchemy Sales Order Repository Implementation"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.sales_order_repository import SalesOrderRepository
from src.domain.sales_order import SalesOrder
from src.domain.sales_order_item import SalesOrderItem


class SqlAlchemySalesOrderRepository(SalesOrderRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, order: SalesOrder) -> SalesOrder:
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def get_by_id(self, order_id: int) -> Optional[SalesOrder]:
        statement = select(SalesOrder).where(SalesOrder.id == order_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_latest_number(self) -> Optional[str]:
        statement = select(SalesOrder.order_number).order_by(SalesOrder.id.desc()).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def add_item(self, item: SalesOrderItem) -> SalesOrderItem:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def get_items(self, order_id: int) -> List[SalesOrderItem]:
        statement = (
            select(SalesOrderItem)
            .where(SalesOrderItem.order_id == order_id)
            .order_by(SalesOrderItem.sort_order, SalesOrderItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
