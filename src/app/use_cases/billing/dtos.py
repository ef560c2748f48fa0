"""Data Transfer Objects for Billing Use Cases

Pydantic models for invoice command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field
from src.app.use_cases.sales.dtos import LineItemInputDTO, LineItemDTO
from src.domain.invoice import InvoiceStatus


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    customer_id: int = Field(
        ...,
        gt=0,
        description="Customer being billed"
    )

    sales_order_id: Optional[int] = Field(
        default=None,
        gt=0,
        description="Sales order being billed, if any"
    )

    invoice_date: Optional[date] = Field(
        default=None,
        description="Invoice date (defaults to today)"
    )

    due_date: Optional[date] = Field(
        default=None,
        description="Payment due date (defaults to invoice_date + payment terms)"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        description="Document tax rate percentage"
    )

    discount_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Flat document level discount"
    )

    currency: Optional[str] = Field(
        default=None,
        min_length=3,
        max_length=3,
        description="Currency code (ISO 4217)"
    )

    terms: Optional[str] = Field(default=None, description="Payment terms")

    notes: Optional[str] = Field(default=None, description="Internal notes")

    items: List[LineItemInputDTO] = Field(
        default_factory=list,
        description="Invoice line items"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "invoice_date": "2024-02-05",
                "tax_rate": "8.5",
                "items": [
                    {"description": "Consulting Services", "quantity": "10", "unit_price": "150.00"}
                ]
            }
        }


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice creation

    Returned by CreateInvoice use case.
    """

    invoice_id: int
    invoice_number: str
    customer_id: int
    sales_order_id: Optional[int] = None
    status: str
    invoice_date: date
    due_date: date
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    total: Decimal
    amount_paid: Decimal
    amount_due: Decimal
    currency: str
    items: List[LineItemDTO] = Field(default_factory=list)
    created_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "invoice_number": "INV-000001",
                "customer_id": 1,
                "status": "draft",
                "invoice_date": "2024-02-05",
                "due_date": "2024-03-06",
                "subtotal": "1500.00",
                "tax_rate": "8.5",
                "tax_amount": "127.50",
                "discount_amount": "0.00",
                "total": "1627.50",
                "amount_paid": "0.00",
                "amount_due": "1627.50",
                "currency": "USD",
                "items": [],
                "created_at": "2024-02-05T10:00:00Z"
            }
        }


class ListInvoicesFilterDTO(BaseModel):
    """Filters accepted by ListInvoices"""

    status: Optional[InvoiceStatus] = Field(
        default=None,
        description="Only invoices with this status"
    )

    customer_id: Optional[int] = Field(
        default=None,
        gt=0,
        description="Only invoices billed to this customer"
    )

    date_from: Optional[date] = Field(
        default=None,
        description="Earliest invoice_date, inclusive"
    )

    date_to: Optional[date] = Field(
        default=None,
        description="Latest invoice_date, inclusive"
    )


class ListInvoicesResponseDTO(BaseModel):
    """Invoices matching the filters, newest first"""

    invoices: List[InvoiceResponseDTO] = Field(default_factory=list)
    total: int


class ProformaInvoiceResponseDTO(BaseModel):
    """
    Response DTO for proforma invoice generation

    Carries invoice details plus the rendered PDF as base64.
    """

    invoice_id: int
    invoice_number: str
    customer_id: int
    company_name: str
    status: str
    invoice_date: date
    due_date: date
    subtotal: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    total: Decimal
    currency: str
    line_items: List[LineItemDTO] = Field(default_factory=list)
    pdf_base64: str = Field(..., description="PDF document, base64 encoded")
    generated_at: datetime
