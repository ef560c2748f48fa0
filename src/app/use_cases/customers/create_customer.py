"""CreateCustomer Use Case"""

from typing import Any
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.validation import validate
from src.domain.customer import Customer
from .dtos import CreateCustomerCommandDTO, CustomerResponseDTO


class CreateCustomer:
    """
    Use Case: Validate input and create a single customer

    Flow:
    1. Validate payload (VALIDATION_ERROR on failure)
    2. Persist customer
    3. Commit transaction
    4. Return response
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, payload: Any) -> Result[CustomerResponseDTO]:
        validated = validate(CreateCustomerCommandDTO, payload, "Invalid customer payload")
        if validated.is_err():
            return validated

        command = validated.value

        try:
            customer = await self.customer_repo.create(
                Customer(
                    company_name=command.company_name,
                    email=command.email,
                    phone=command.phone,
                    status=command.status,
                    notes=command.notes,
                )
            )
            await self.uow.commit()
            return Return.ok(to_customer_response(customer))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_CUSTOMER_FAILED",
                    message="Failed to create customer",
                    reason=str(e),
                )
            )


def to_customer_response(customer: Customer) -> CustomerResponseDTO:
    return CustomerResponseDTO(
        customer_id=customer.id,
        company_name=customer.company_name,
        email=customer.email,
        phone=customer.phone,
        status=customer.status.value,
        notes=customer.notes,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )
