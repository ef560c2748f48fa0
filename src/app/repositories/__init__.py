from .customer_repository import CustomerRepository
from .quote_repository import QuoteRepository
from .sales_order_repository import SalesOrderRepository
from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository

__all__ = [
    "CustomerRepository",
    "QuoteRepository",
    "SalesOrderRepository",
    "InvoiceRepository",
    "InvoiceLineRepository",
]
