"""Invoice Line Domain Entity

Tracks individual line items within an invoice.
"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, ForeignKey
from src.domain.document import LineItemBase


class InvoiceLine(LineItemBase, table=True):
    """
    Invoice Line - Individual line item within an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice
    - line_total = calculate_line_total(quantity, unit_price, discount_percent, tax_rate)
    - Immutable once invoice is sent
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index('ix_invoice_lines_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique invoice line identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )
