"""Quote Domain Entity

Price proposals sent to customers before an order is placed.
"""

from datetime import datetime, date
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, ForeignKey, String, Date, Text
from src.domain.document import DocumentTotalsBase


class QuoteStatus(str, Enum):
    """Quote status types"""
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"


class Quote(DocumentTotalsBase, table=True):
    """
    Quote - Priced proposal for a customer

    Domain Rules:
    - quote_number must be unique (QT-NNNNNN)
    - Totals are computed from quote_items at creation time
    - quote_number is never changed after issuance
    """

    __tablename__ = "quotes"
    __table_args__ = (
        Index('ix_quotes_customer_id', 'customer_id'),
        Index('ix_quotes_status', 'status'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique quote identifier (auto-increment)"
    )

    quote_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique quote number (e.g., QT-000001)"
    )

    customer_id: int = Field(
        sa_column=Column(Integer, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False),
        description="Foreign key to Customer"
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the quote was issued"
    )

    expiry_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Date after which the quote is no longer valid"
    )

    status: QuoteStatus = Field(
        default=QuoteStatus.DRAFT,
        description="Quote status (draft, sent, accepted, rejected, expired)"
    )

    terms: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Terms and conditions"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Internal notes"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Quote creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
