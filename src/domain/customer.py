"""Customer Domain Entity

Companies that quotes, sales orders and invoices are issued to.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, String, Text
from src.domain.base import BaseModel


class CustomerStatus(str, Enum):
    """Customer status types"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Customer(BaseModel, table=True):
    """
    Customer - Company buying from us

    Domain Rules:
    - company_name is required
    - Deleting a customer is a soft delete (status -> inactive)
    - Documents reference customers by id and keep them from hard deletion
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_status', 'status'),
        Index('ix_customers_email', 'email'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique customer identifier (auto-increment)"
    )

    company_name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Company name"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Billing contact email"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Phone number"
    )

    status: CustomerStatus = Field(
        default=CustomerStatus.ACTIVE,
        description="Customer status (active, inactive)"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Internal notes"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Customer creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
