"""Customer use cases"""
from .create_customer import CreateCustomer
from .list_customers import ListCustomers
from .get_customer import GetCustomer
from .update_customer import UpdateCustomer
from .delete_customer import DeleteCustomer
from .dtos import (
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    ListCustomersFilterDTO,
    CustomerResponseDTO,
    ListCustomersResponseDTO,
)

__all__ = [
    "CreateCustomer",
    "ListCustomers",
    "GetCustomer",
    "UpdateCustomer",
    "DeleteCustomer",
    "CreateCustomerCommandDTO",
    "UpdateCustomerCommandDTO",
    "ListCustomersFilterDTO",
    "CustomerResponseDTO",
    "ListCustomersResponseDTO",
]
