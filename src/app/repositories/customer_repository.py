"""Customer Repository Interface

Defines the contract for customer persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.customer import Customer, CustomerStatus


class CustomerRepository(ABC):
    """
    Repository interface for Customer persistence
    """

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """
        Create a new customer

        Args:
            customer: Customer entity to persist

        Returns:
            Created Customer with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Retrieve customer by ID

        Args:
            customer_id: Customer ID

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        status: Optional[CustomerStatus] = None,
        search: Optional[str] = None,
    ) -> List[Customer]:
        """
        List customers ordered by company name

        Args:
            status: Optional filter by status
            search: Optional substring matched against company_name or email

        Returns:
            List of customers
        """
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """
        Update an existing customer

        Args:
            customer: Customer entity with updated values

        Returns:
            Updated Customer
        """
        pass
