"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, List
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Raises sqlalchemy.exc.IntegrityError when invoice_number is taken.

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        status: Optional[InvoiceStatus] = None,
        customer_id: Optional[int] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[Invoice]:
        """
        List invoices, newest invoice_date first

        Args:
            status: Optional filter by status
            customer_id: Optional filter by customer
            date_from: Only invoices dated on or after this day
            date_to: Only invoices dated on or before this day

        Returns:
            List of invoices ordered by invoice_date then invoice_number, descending
        """
        pass

    @abstractmethod
    async def get_latest_number(self) -> Optional[str]:
        """
        Return the invoice number of the most recently created invoice

        Returns:
            Latest invoice number, None when no invoice exists
        """
        pass
