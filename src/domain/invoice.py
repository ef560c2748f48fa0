"""Invoice Domain Entity

Bills sent to customers and their payment status.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, ForeignKey, String, Date, Text
from src.domain.document import DocumentTotalsBase


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    SENT = "sent"
    PARTIAL = "partial"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class Invoice(DocumentTotalsBase, table=True):
    """
    Invoice - Bill issued to a customer

    Domain Rules:
    - invoice_number must be unique (INV-NNNNNN)
    - Status transitions: draft -> sent -> partial/paid (or overdue, cancelled)
    - amount_paid starts at 0 and amount_due starts at total
    - Totals are computed from invoice_lines at creation time
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_status', 'status'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-000001)"
    )

    customer_id: int = Field(
        sa_column=Column(Integer, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False),
        description="Foreign key to Customer"
    )

    sales_order_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("sales_orders.id", ondelete="SET NULL"), nullable=True),
        description="Sales order being billed, if any"
    )

    invoice_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the invoice was issued"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date payment is due"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (draft, sent, partial, paid, overdue, cancelled)"
    )

    amount_paid: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Amount already received"
    )

    amount_due: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Remaining balance (total - amount_paid)"
    )

    currency: str = Field(
        default="USD",
        sa_column=Column(String(3), nullable=False),
        description="Currency code (ISO 4217)"
    )

    terms: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Payment terms"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Internal notes"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
