"""SQLAlchemy Quote Repository Implementation"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.quote_repository import QuoteRepository
from src.domain.quote import Quote
from src.domain.quote_item import QuoteItem


class SqlAlchemyQuoteRepository(QuoteRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, quote: Quote) -> Quote:
        self.session.add(quote)
        await self.session.flush()
        await self.session.refresh(quote)
        return quote

    async def get_by_id(self, quote_id: int) -> Optional[Quote]:
        statement = select(Quote).where(Quote.id == quote_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_latest_number(self) -> Optional[str]:
        statement = select(Quote.quote_number).order_by(Quote.id.desc()).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def add_item(self, item: QuoteItem) -> QuoteItem:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def get_items(self, quote_id: int) -> List[QuoteItem]:
        statement = (
            select(QuoteItem)
            .where(QuoteItem.quote_id == quote_id)
            .order_by(QuoteItem.sort_order, QuoteItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
