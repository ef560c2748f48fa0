"""Customer API Routes

FastAPI routes for customer CRUD. Deletion is a soft delete.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.customers import (
    CreateCustomer,
    ListCustomers,
    GetCustomer,
    UpdateCustomer,
    DeleteCustomer,
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerResponseDTO,
    ListCustomersResponseDTO,
)
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/sales/customers", tags=["Customers"])


@router.get("", response_model=ListCustomersResponseDTO, status_code=status.HTTP_200_OK)
async def list_customers(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    search: Optional[str] = None,
    session: AsyncSession = Depends(get_session),
):
    """
    List customers ordered by company name.

    **Query parameters:**
    - `status` (optional): active or inactive
    - `search` (optional): substring matched against company name or email

    **Returns:**
    - 200: Customers
    - 400: Invalid filters
    """
    filters = {}
    if status_filter is not None:
        filters["status"] = status_filter
    if search is not None:
        filters["search"] = search

    use_case = ListCustomers(SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(filters)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("", response_model=CustomerResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CreateCustomerCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    """
    Create a customer.

    **Returns:**
    - 201: Customer created
    - 422: Invalid request body
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateCustomer(uow, SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{customer_id}", response_model=CustomerResponseDTO, status_code=status.HTTP_200_OK)
async def get_customer(
    customer_id: int,
    session: AsyncSession = Depends(get_session),
):
    use_case = GetCustomer(SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(customer_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.patch("/{customer_id}", response_model=CustomerResponseDTO, status_code=status.HTTP_200_OK)
async def update_customer(
    customer_id: int,
    request: UpdateCustomerCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    """
    Partially update a customer. Only fields present in the body change.

    **Returns:**
    - 200: Updated customer
    - 404: Customer not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateCustomer(uow, SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(customer_id, request.model_dump(exclude_unset=True))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{customer_id}", response_model=CustomerResponseDTO, status_code=status.HTTP_200_OK)
async def delete_customer(
    customer_id: int,
    session: AsyncSession = Depends(get_session),
):
    """
    Soft delete a customer (status becomes inactive).

    **Returns:**
    - 200: Customer marked inactive
    - 404: Customer not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteCustomer(uow, SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(customer_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
