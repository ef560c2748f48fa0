from .base import BaseModel
from .calculations import (
    DocumentTotals,
    round_currency,
    calculate_line_total,
    calculate_document_totals,
    generate_document_number,
)
from .customer import Customer, CustomerStatus
from .quote import Quote, QuoteStatus
from .quote_item import QuoteItem
from .sales_order import SalesOrder, SalesOrderStatus
from .sales_order_item import SalesOrderItem
from .invoice import Invoice, InvoiceStatus
from .invoice_line import InvoiceLine

__all__ = [
    "BaseModel",
    "DocumentTotals",
    "round_currency",
    "calculate_line_total",
    "calculate_document_totals",
    "generate_document_number",
    "Customer",
    "CustomerStatus",
    "Quote",
    "QuoteStatus",
    "QuoteItem",
    "SalesOrder",
    "SalesOrderStatus",
    "SalesOrderItem",
    "Invoice",
    "InvoiceStatus",
    "InvoiceLine",
]
