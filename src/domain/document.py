"""Shared columns for sales and accounting documents

Quotes, sales orders and invoices carry the same totals block and the
same line item shape. These bases are not tables themselves.
"""

from decimal import Decimal
from sqlmodel import Field
from src.domain.base import BaseModel


class DocumentTotalsBase(BaseModel):
    """Totals block computed by calculate_document_totals"""

    subtotal: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Sum of line subtotals net of line discounts"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        max_digits=7,
        decimal_places=4,
        description="Document tax rate percentage"
    )

    tax_amount: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Tax on the discounted subtotal"
    )

    discount_amount: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Flat document level discount"
    )

    total: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Final total"
    )


class LineItemBase(BaseModel):
    """One row of a quote, sales order or invoice"""

    description: str = Field(
        max_length=255,
        description="Product or service description"
    )

    quantity: Decimal = Field(
        default=Decimal("1"),
        max_digits=18,
        decimal_places=4,
        description="Number of units"
    )

    unit_price: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Price per unit"
    )

    discount_percent: Decimal = Field(
        default=Decimal("0"),
        max_digits=7,
        decimal_places=4,
        description="Line discount percentage (0-100)"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        max_digits=7,
        decimal_places=4,
        description="Line tax rate percentage (0-100)"
    )

    line_total: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Rounded line total after discount and tax"
    )

    sort_order: int = Field(
        default=0,
        description="Display order within the document"
    )
