"""Invoice Line Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_line import InvoiceLine


class InvoiceLineRepository(ABC):
    """
    Repository interface for the priced lines of an invoice
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceLine]:
        """Lines of one invoice ordered by sort_order"""
        pass

    @abstractmethod
    async def create_many(self, lines: List[InvoiceLine]) -> List[InvoiceLine]:
        """
        Insert all lines of an invoice in a single flush

        Returns the lines with their generated ids, in the given order.
        """
        pass
