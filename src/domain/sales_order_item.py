"""Sales Order Item Domain Entity"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, ForeignKey
from src.domain.document import LineItemBase


class SalesOrderItem(LineItemBase, table=True):
    """
    Sales Order Item - One line on a sales order

    Domain Rules:
    - Each item belongs to exactly one sales order
    - Immutable once the order is shipped
    """

    __tablename__ = "sales_order_items"
    __table_args__ = (
        Index('ix_sales_order_items_order_id', 'order_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique sales order item identifier (auto-increment)"
    )

    order_id: int = Field(
        sa_column=Column(Integer, ForeignKey("sales_orders.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to SalesOrder"
    )
