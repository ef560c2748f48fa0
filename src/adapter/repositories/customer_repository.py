"""SQLAlchemy Customer Repository Implementation

Implements customer persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from datetime import datetime
from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer, CustomerStatus


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    SQLAlchemy implementation of CustomerRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        statement = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        status: Optional[CustomerStatus] = None,
        search: Optional[str] = None,
    ) -> List[Customer]:
        """
        List customers ordered by company name

        Args:
            status: Optional filter by status
            search: Optional substring matched with LIKE against company_name or email

        Returns:
            List of customers
        """
        statement = select(Customer)

        if status:
            statement = statement.where(Customer.status == status)

        if search:
            pattern = f"%{search}%"
            statement = statement.where(
                or_(
                    Customer.company_name.like(pattern),
                    Customer.email.like(pattern),
                )
            )

        statement = statement.order_by(Customer.company_name.asc())

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, customer: Customer) -> Customer:
        customer.updated_at = datetime.utcnow()
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer
