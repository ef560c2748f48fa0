"""Quote Item Domain Entity"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, ForeignKey
from src.domain.document import LineItemBase


class QuoteItem(LineItemBase, table=True):
    """
    Quote Item - One priced line on a quote

    Domain Rules:
    - Each item belongs to exactly one quote
    - line_total = calculate_line_total(quantity, unit_price, discount_percent, tax_rate)
    """

    __tablename__ = "quote_items"
    __table_args__ = (
        Index('ix_quote_items_quote_id', 'quote_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique quote item identifier (auto-increment)"
    )

    quote_id: int = Field(
        sa_column=Column(Integer, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Quote"
    )
