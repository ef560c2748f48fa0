"""Document rendering interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


class PdfService(ABC):
    """Renders sales and accounting documents to PDF"""

    @abstractmethod
    def generate_proforma_invoice(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Customer,
        company_name: str,
        company_address: str,
    ) -> bytes:
        """
        Render a draft invoice as a proforma

        The issuing company header comes from configuration, the Bill To
        block from the customer. Totals are printed as stored on the
        invoice and never recomputed here.
        """
        pass
