"""Unit tests for customer use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.customers import (
    CreateCustomer,
    ListCustomers,
    GetCustomer,
    UpdateCustomer,
    DeleteCustomer,
)
from src.domain.customer import Customer, CustomerStatus


async def assign_id(customer):
    customer.id = 1
    return customer


async def passthrough(customer):
    return customer


@pytest.fixture
def mock_customer_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=assign_id)
    repo.update = AsyncMock(side_effect=passthrough)
    return repo


@pytest.fixture
def existing_customer():
    return Customer(
        id=5,
        company_name="Stark Industries",
        email="orders@stark.com",
        status=CustomerStatus.ACTIVE,
    )


@pytest.mark.asyncio
class TestCreateCustomer:
    async def test_create_customer_from_dict(self, mock_uow, mock_customer_repo):
        use_case = CreateCustomer(mock_uow, mock_customer_repo)

        result = await use_case.execute(
            {"company_name": "Wayne Enterprises", "email": "ap@wayne.com", "phone": "555-0100"}
        )

        assert result.is_ok()
        assert result.value.customer_id == 1
        assert result.value.company_name == "Wayne Enterprises"
        assert result.value.status == "active"
        mock_uow.commit.assert_called_once()

    async def test_invalid_payload_lists_issues(self, mock_uow, mock_customer_repo):
        use_case = CreateCustomer(mock_uow, mock_customer_repo)

        result = await use_case.execute({"company_name": "", "email": "not-an-email"})

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        fields = [issue.split(":")[0] for issue in result.error.issues]
        assert "company_name" in fields
        assert "email" in fields
        mock_customer_repo.create.assert_not_called()

    async def test_repository_failure_rolls_back(self, mock_uow, mock_customer_repo):
        mock_customer_repo.create = AsyncMock(side_effect=Exception("database is locked"))
        use_case = CreateCustomer(mock_uow, mock_customer_repo)

        result = await use_case.execute({"company_name": "Wayne Enterprises"})

        assert result.is_err()
        assert result.error.code == "CREATE_CUSTOMER_FAILED"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestListCustomers:
    async def test_list_passes_filters(self, mock_customer_repo, existing_customer):
        mock_customer_repo.list = AsyncMock(return_value=[existing_customer])

        result = await ListCustomers(mock_customer_repo).execute({"status": "active", "search": "stark"})

        assert result.is_ok()
        assert result.value.total == 1
        assert result.value.customers[0].company_name == "Stark Industries"
        mock_customer_repo.list.assert_called_once_with(status=CustomerStatus.ACTIVE, search="stark")

    async def test_list_without_filters(self, mock_customer_repo):
        mock_customer_repo.list = AsyncMock(return_value=[])

        result = await ListCustomers(mock_customer_repo).execute()

        assert result.is_ok()
        assert result.value.customers == []
        mock_customer_repo.list.assert_called_once_with(status=None, search=None)

    async def test_unknown_status_is_rejected(self, mock_customer_repo):
        mock_customer_repo.list = AsyncMock()

        result = await ListCustomers(mock_customer_repo).execute({"status": "archived"})

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_customer_repo.list.assert_not_called()

    async def test_database_error(self, mock_customer_repo):
        mock_customer_repo.list = AsyncMock(side_effect=Exception("no such table: customers"))

        result = await ListCustomers(mock_customer_repo).execute({})

        assert result.is_err()
        assert result.error.code == "DATABASE_ERROR"
        assert result.error.message == "Failed to select customers"


@pytest.mark.asyncio
class TestGetUpdateDeleteCustomer:
    async def test_get_customer(self, mock_customer_repo, existing_customer):
        mock_customer_repo.get_by_id = AsyncMock(return_value=existing_customer)

        result = await GetCustomer(mock_customer_repo).execute(5)

        assert result.is_ok()
        assert result.value.email == "orders@stark.com"

    async def test_get_customer_not_found(self, mock_customer_repo):
        mock_customer_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetCustomer(mock_customer_repo).execute(404)

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"

    async def test_update_only_changes_given_fields(self, mock_uow, mock_customer_repo, existing_customer):
        mock_customer_repo.get_by_id = AsyncMock(return_value=existing_customer)

        result = await UpdateCustomer(mock_uow, mock_customer_repo).execute(5, {"phone": "555-0199"})

        assert result.is_ok()
        assert result.value.phone == "555-0199"
        assert result.value.email == "orders@stark.com"
        mock_customer_repo.update.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_empty_update_is_a_no_op(self, mock_uow, mock_customer_repo, existing_customer):
        mock_customer_repo.get_by_id = AsyncMock(return_value=existing_customer)

        result = await UpdateCustomer(mock_uow, mock_customer_repo).execute(5, {})

        assert result.is_ok()
        mock_customer_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_update_not_found(self, mock_uow, mock_customer_repo):
        mock_customer_repo.get_by_id = AsyncMock(return_value=None)

        result = await UpdateCustomer(mock_uow, mock_customer_repo).execute(404, {"phone": "1"})

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"

    async def test_delete_is_soft(self, mock_uow, mock_customer_repo, existing_customer):
        mock_customer_repo.get_by_id = AsyncMock(return_value=existing_customer)

        result = await DeleteCustomer(mock_uow, mock_customer_repo).execute(5)

        assert result.is_ok()
        assert result.value.status == "inactive"
        assert existing_customer.status == CustomerStatus.INACTIVE
        mock_uow.commit.assert_called_once()
