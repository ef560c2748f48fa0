"""DeleteCustomer Use Case

Customers are referenced by documents, so deletion only marks them
inactive.
"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import CustomerStatus
from .create_customer import to_customer_response
from .dtos import CustomerResponseDTO


class DeleteCustomer:
    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int) -> Result[CustomerResponseDTO]:
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

            customer.status = CustomerStatus.INACTIVE
            customer = await self.customer_repo.update(customer)
            await self.uow.commit()
            return Return.ok(to_customer_response(customer))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_CUSTOMER_FAILED",
                    message="Failed to delete customer",
                    reason=str(e),
                )
            )
