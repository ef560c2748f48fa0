"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from datetime import date
from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        status: Optional[InvoiceStatus] = None,
        customer_id: Optional[int] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[Invoice]:
        statement = select(Invoice)

        if status:
            statement = statement.where(Invoice.status == status)
        if customer_id:
            statement = statement.where(Invoice.customer_id == customer_id)
        if date_from:
            statement = statement.where(Invoice.invoice_date >= date_from)
        if date_to:
            statement = statement.where(Invoice.invoice_date <= date_to)

        statement = statement.order_by(Invoice.invoice_date.desc(), Invoice.invoice_number.desc())

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_latest_number(self) -> Optional[str]:
        """
        Return the invoice number of the most recently created invoice

        The row with the highest id wins, so a manually imported number
        with a larger sequence does not hijack the series.
        """
        statement = select(Invoice.invoice_number).order_by(Invoice.id.desc()).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
