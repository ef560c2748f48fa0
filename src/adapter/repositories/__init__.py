from .customer_repository import SqlAlchemyCustomerRepository
from .quote_repository import SqlAlchemyQuoteRepository
from .sales_order_repository import SqlAlchemySalesOrderRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_line_repository import SqlAlchemyInvoiceLineRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyQuoteRepository",
    "SqlAlchemySalesOrderRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceLineRepository",
]
