"""Data Transfer Objects for Customer Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from src.domain.customer import CustomerStatus


class CreateCustomerCommandDTO(BaseModel):
    """
    Command DTO for creating a customer

    Used as input to CreateCustomer use case.
    """

    company_name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Company name (required)"
    )

    email: Optional[EmailStr] = Field(
        default=None,
        description="Billing contact email"
    )

    phone: Optional[str] = Field(
        default=None,
        max_length=50,
        description="Phone number"
    )

    status: CustomerStatus = Field(
        default=CustomerStatus.ACTIVE,
        description="Customer status (active, inactive)"
    )

    notes: Optional[str] = Field(
        default=None,
        description="Internal notes"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "company_name": "Globex Corporation",
                "email": "billing@globex.example",
                "phone": "+1 555 0100",
                "status": "active"
            }
        }


class UpdateCustomerCommandDTO(BaseModel):
    """
    Command DTO for partial customer updates

    Only fields explicitly provided are written.
    """

    company_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    status: Optional[CustomerStatus] = None
    notes: Optional[str] = None


class ListCustomersFilterDTO(BaseModel):
    """Filters accepted by ListCustomers"""

    status: Optional[CustomerStatus] = Field(
        default=None,
        description="Only customers with this status"
    )

    search: Optional[str] = Field(
        default=None,
        min_length=1,
        description="Substring matched against company name or email"
    )


class CustomerResponseDTO(BaseModel):
    """
    Response DTO for customer operations
    """

    customer_id: int
    company_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    status: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ListCustomersResponseDTO(BaseModel):
    customers: list[CustomerResponseDTO] = Field(default_factory=list)
    total: int = Field(..., description="Number of customers returned")
