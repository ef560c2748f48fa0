"""Sales Order Domain Entity

Confirmed customer orders, optionally created from an accepted quote.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, ForeignKey, String, Date, Text
from src.domain.document import DocumentTotalsBase


class SalesOrderStatus(str, Enum):
    """Sales order fulfillment status"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class SalesOrder(DocumentTotalsBase, table=True):
    """
    Sales Order - Confirmed order from a customer

    Domain Rules:
    - order_number must be unique (SO-NNNNNN)
    - total = subtotal - discount_amount + tax_amount + shipping_amount
    - quote_id links back to the originating quote, if any
    """

    __tablename__ = "sales_orders"
    __table_args__ = (
        Index('ix_sales_orders_customer_id', 'customer_id'),
        Index('ix_sales_orders_status', 'status'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique sales order identifier (auto-increment)"
    )

    order_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique order number (e.g., SO-000001)"
    )

    customer_id: int = Field(
        sa_column=Column(Integer, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False),
        description="Foreign key to Customer"
    )

    quote_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("quotes.id", ondelete="SET NULL"), nullable=True),
        description="Originating quote"
    )

    order_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the order was placed"
    )

    delivery_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Expected delivery date"
    )

    status: SalesOrderStatus = Field(
        default=SalesOrderStatus.PENDING,
        description="Order status"
    )

    shipping_amount: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Shipping cost"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Internal notes"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Order creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
