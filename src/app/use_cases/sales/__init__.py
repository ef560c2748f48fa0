"""Sales domain use cases"""
from .create_quote import CreateQuote
from .get_quote import GetQuote
from .create_sales_order import CreateSalesOrder
from .get_sales_order import GetSalesOrder
from .get_next_document_number import GetNextDocumentNumber
from .document_numbering import insert_with_document_number
from .dtos import (
    LineItemInputDTO,
    LineItemDTO,
    CreateQuoteCommandDTO,
    QuoteResponseDTO,
    CreateSalesOrderCommandDTO,
    SalesOrderResponseDTO,
    NextDocumentNumberResponseDTO,
)

__all__ = [
    "CreateQuote",
    "GetQuote",
    "CreateSalesOrder",
    "GetSalesOrder",
    "GetNextDocumentNumber",
    "insert_with_document_number",
    "LineItemInputDTO",
    "LineItemDTO",
    "CreateQuoteCommandDTO",
    "QuoteResponseDTO",
    "CreateSalesOrderCommandDTO",
    "SalesOrderResponseDTO",
    "NextDocumentNumberResponseDTO",
]
