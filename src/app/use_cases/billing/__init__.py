"""Billing domain use cases"""
from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .generate_proforma import GenerateProforma
from .dtos import (
    CreateInvoiceCommandDTO,
    InvoiceResponseDTO,
    ListInvoicesFilterDTO,
    ListInvoicesResponseDTO,
    ProformaInvoiceResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "GetInvoice",
    "ListInvoices",
    "GenerateProforma",
    "CreateInvoiceCommandDTO",
    "InvoiceResponseDTO",
    "ListInvoicesFilterDTO",
    "ListInvoicesResponseDTO",
    "ProformaInvoiceResponseDTO",
]
