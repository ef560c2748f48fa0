"""ListCustomers Use Case"""

from typing import Any
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.validation import validate
from .create_customer import to_customer_response
from .dtos import ListCustomersFilterDTO, ListCustomersResponseDTO


class ListCustomers:
    """
    Use Case: List customers with optional status and search filters

    Results are ordered by company name.
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, filters: Any = None) -> Result[ListCustomersResponseDTO]:
        validated = validate(ListCustomersFilterDTO, filters, "Invalid customer filters")
        if validated.is_err():
            return validated

        try:
            customers = await self.customer_repo.list(
                status=validated.value.status,
                search=validated.value.search,
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Failed to select customers",
                    reason=str(e),
                )
            )

        return Return.ok(
            ListCustomersResponseDTO(
                customers=[to_customer_response(customer) for customer in customers],
                total=len(customers),
            )
        )
