"""Data Transfer Objects for Sales Use Cases

Pydantic models for quote and sales order commands and responses, plus
the line item shapes shared with invoicing.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field


class LineItemInputDTO(BaseModel):
    """
    Line item as submitted by the caller

    line_total is never accepted from the caller; it is computed.
    """

    description: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Product or service description"
    )

    quantity: Decimal = Field(
        default=Decimal("1"),
        gt=0,
        description="Number of units (must be > 0)"
    )

    unit_price: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Price per unit"
    )

    discount_percent: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        description="Line discount percentage (0-100)"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        description="Line tax rate percentage (0-100)"
    )

    sort_order: Optional[int] = Field(
        default=None,
        description="Display order; defaults to the submitted position"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "description": "Consulting services",
                "quantity": "5",
                "unit_price": "100.00",
                "discount_percent": "10",
                "tax_rate": "8.5"
            }
        }


class LineItemDTO(BaseModel):
    """Persisted line item"""

    id: int
    description: str
    quantity: Decimal
    unit_price: Decimal
    discount_percent: Decimal
    tax_rate: Decimal
    line_total: Decimal
    sort_order: int


class CreateQuoteCommandDTO(BaseModel):
    """
    Command DTO for creating a quote

    Used as input to CreateQuote use case.
    """

    customer_id: int = Field(
        ...,
        gt=0,
        description="Customer receiving the quote"
    )

    issue_date: Optional[date] = Field(
        default=None,
        description="Issue date (defaults to today)"
    )

    expiry_date: Optional[date] = Field(
        default=None,
        description="Expiry date"
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

    terms: Optional[str] = Field(default=None, description="Terms and conditions")

    notes: Optional[str] = Field(default=None, description="Internal notes")

    items: List[LineItemInputDTO] = Field(
        default_factory=list,
        description="Quote line items"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "tax_rate": "8.5",
                "discount_amount": "0",
                "items": [
                    {"description": "Widget", "quantity": "2", "unit_price": "50.00"},
                    {"description": "Setup", "quantity": "1", "unit_price": "100.00", "discount_percent": "10"}
                ]
            }
        }


class QuoteResponseDTO(BaseModel):
    """
    Response DTO for quote operations

    Returned by CreateQuote and GetQuote.
    """

    quote_id: int
    quote_number: str
    customer_id: int
    issue_date: date
    expiry_date: Optional[date] = None
    status: str
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    total: Decimal
    terms: Optional[str] = None
    notes: Optional[str] = None
    items: List[LineItemDTO] = Field(default_factory=list)
    created_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "quote_id": 1,
                "quote_number": "QT-000001",
                "customer_id": 1,
                "issue_date": "2024-02-05",
                "expiry_date": None,
                "status": "draft",
                "subtotal": "190.00",
                "tax_rate": "8.5",
                "tax_amount": "16.15",
                "discount_amount": "0.00",
                "total": "206.15",
                "items": [],
                "created_at": "2024-02-05T10:00:00Z"
            }
        }


class CreateSalesOrderCommandDTO(BaseModel):
    """
    Command DTO for creating a sales order

    Used as input to CreateSalesOrder use case.
    """

    customer_id: int = Field(..., gt=0, description="Ordering customer")

    quote_id: Optional[int] = Field(
        default=None,
        gt=0,
        description="Originating quote, if any"
    )

    order_date: Optional[date] = Field(
        default=None,
        description="Order date (defaults to today)"
    )

    delivery_date: Optional[date] = Field(
        default=None,
        description="Expected delivery date"
    )

    tax_rate: Decimal = Field(default=Decimal("0"), ge=0, le=100)

    discount_amount: Decimal = Field(default=Decimal("0"), ge=0)

    shipping_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Shipping cost added after tax"
    )

    notes: Optional[str] = None

    items: List[LineItemInputDTO] = Field(default_factory=list)


class SalesOrderResponseDTO(BaseModel):
    """
    Response DTO for sales order operations

    Returned by CreateSalesOrder and GetSalesOrder.
    """

    order_id: int
    order_number: str
    customer_id: int
    quote_id: Optional[int] = None
    order_date: date
    delivery_date: Optional[date] = None
    status: str
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    shipping_amount: Decimal
    total: Decimal
    notes: Optional[str] = None
    items: List[LineItemDTO] = Field(default_factory=list)
    created_at: datetime


class NextDocumentNumberResponseDTO(BaseModel):
    """Preview of the next number in a document series"""

    series: str = Field(..., description="Document series (quotes, sales_orders, invoices)")
    last_number: Optional[str] = Field(default=None, description="Most recent number in the series")
    next_number: str = Field(..., description="Number the next document would receive")
