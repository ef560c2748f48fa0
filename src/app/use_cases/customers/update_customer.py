"""UpdateCustomer Use Case"""

from typing import Any
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.validation import validate
from .create_customer import to_customer_response
from .dtos import UpdateCustomerCommandDTO, CustomerResponseDTO


class UpdateCustomer:
    """
    Use Case: Partially update a customer

    Business Rules:
    1. Only fields present in the payload are changed
    2. An empty payload leaves the row untouched
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int, payload: Any) -> Result[CustomerResponseDTO]:
        validated = validate(UpdateCustomerCommandDTO, payload, "Invalid customer payload")
        if validated.is_err():
            return validated

        changes = validated.value.model_dump(exclude_unset=True)

        try:
            customer = await self.customer_repo.get_by_id(customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {customer_id} not found",
                        reason="Customer does not exist",
                    )
                )

            if not changes:
                return Return.ok(to_customer_response(customer))

            for field, value in changes.items():
                setattr(customer, field, value)

            customer = await self.customer_repo.update(customer)
            await self.uow.commit()
            return Return.ok(to_customer_response(customer))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_CUSTOMER_FAILED",
                    message="Failed to update customer",
                    reason=str(e),
                )
            )
