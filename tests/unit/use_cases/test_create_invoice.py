"""Unit tests for CreateInvoice use case

Tests cover:
- Draft invoice creation with computed totals
- Due date and currency defaults
- Invoice number generation and collision retry
- Missing customer or sales order
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime, date
from sqlalchemy.exc import IntegrityError

from src.app.use_cases.billing.create_invoice import CreateInvoice
from src.app.use_cases.billing.dtos import CreateInvoiceCommandDTO
from src.app.use_cases.sales.dtos import LineItemInputDTO
from src.domain.customer import Customer
from src.domain.invoice import InvoiceStatus


@pytest.fixture
def mock_customer_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Customer(id=7, company_name="Umbrella Corp"))
    return repo


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    repo = MagicMock()
    repo.get_latest_number = AsyncMock(return_value="INV-000122")

    async def create(invoice):
        invoice.id = 123
        invoice.created_at = datetime(2024, 1, 31, 12, 0, 0)
        return invoice

    repo.create = AsyncMock(side_effect=create)
    return repo


@pytest.fixture
def mock_invoice_line_repo():
    repo = MagicMock()

    async def create_many(lines):
        for line_id, line in enumerate(lines, start=1):
            line.id = line_id
        return lines

    repo.create_many = AsyncMock(side_effect=create_many)
    return repo


@pytest.fixture
def mock_sales_order_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=MagicMock(id=42))
    return repo


@pytest.fixture
def create_invoice_use_case(
    mock_uow, mock_customer_repo, mock_invoice_repo, mock_invoice_line_repo, mock_sales_order_repo
):
    """CreateInvoice use case instance with mocked dependencies"""
    return CreateInvoice(
        uow=mock_uow,
        customer_repo=mock_customer_repo,
        invoice_repo=mock_invoice_repo,
        invoice_line_repo=mock_invoice_line_repo,
        sales_order_repo=mock_sales_order_repo,
    )


@pytest.fixture
def sample_command():
    """Sample CreateInvoiceCommandDTO"""
    return CreateInvoiceCommandDTO(
        customer_id=7,
        invoice_date=date(2024, 1, 31),
        tax_rate=Decimal("10"),
        discount_amount=Decimal("20"),
        items=[
            LineItemInputDTO(
                description="Consulting hours",
                quantity=Decimal("10"),
                unit_price=Decimal("25"),
            ),
        ],
    )


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:
    async def test_create_invoice_success(
        self, create_invoice_use_case, mock_invoice_repo, mock_invoice_line_repo, mock_uow, sample_command
    ):
        """
        Given: INV-000122 is the latest invoice number
        When: create_invoice is called
        Then: Draft invoice INV-000123 is created with amount_due equal to total
        """
        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_ok()
        response = result.value

        assert response.invoice_id == 123
        assert response.invoice_number == "INV-000123"
        assert response.status == InvoiceStatus.DRAFT.value
        assert response.subtotal == Decimal("250.00")
        assert response.discount_amount == Decimal("20.00")
        assert response.tax_amount == Decimal("23.00")
        assert response.total == Decimal("253.00")
        assert response.amount_paid == Decimal("0")
        assert response.amount_due == Decimal("253.00")
        assert response.currency == "USD"
        assert response.items[0].line_total == Decimal("250.00")

        mock_invoice_repo.create.assert_called_once()
        mock_invoice_line_repo.create_many.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_due_date_defaults_from_invoice_date(self, create_invoice_use_case, sample_command):
        result = await create_invoice_use_case.execute(sample_command)

        assert result.value.invoice_date == date(2024, 1, 31)
        assert result.value.due_date == date(2024, 3, 1)

    async def test_explicit_due_date_and_currency(self, create_invoice_use_case, sample_command):
        command = sample_command.model_copy(update={"due_date": date(2024, 2, 15), "currency": "EUR"})

        result = await create_invoice_use_case.execute(command)

        assert result.value.due_date == date(2024, 2, 15)
        assert result.value.currency == "EUR"

    async def test_configured_due_days_and_currency(
        self, mock_uow, mock_customer_repo, mock_invoice_repo, mock_invoice_line_repo, sample_command
    ):
        use_case = CreateInvoice(
            mock_uow,
            mock_customer_repo,
            mock_invoice_repo,
            mock_invoice_line_repo,
            due_days=14,
            currency="GBP",
        )

        result = await use_case.execute(sample_command)

        assert result.value.due_date == date(2024, 2, 14)
        assert result.value.currency == "GBP"

    async def test_invoice_linked_to_sales_order(
        self, create_invoice_use_case, mock_sales_order_repo, sample_command
    ):
        command = sample_command.model_copy(update={"sales_order_id": 42})

        result = await create_invoice_use_case.execute(command)

        assert result.is_ok()
        assert result.value.sales_order_id == 42
        mock_sales_order_repo.get_by_id.assert_called_once_with(42)


@pytest.mark.asyncio
class TestCreateInvoiceFailures:
    async def test_customer_not_found(
        self, create_invoice_use_case, mock_customer_repo, mock_invoice_repo, sample_command
    ):
        mock_customer_repo.get_by_id = AsyncMock(return_value=None)

        result = await create_invoice_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"
        mock_invoice_repo.create.assert_not_called()

    async def test_sales_order_not_found(
        self, create_invoice_use_case, mock_sales_order_repo, mock_invoice_repo, sample_command
    ):
        mock_sales_order_repo.get_by_id = AsyncMock(return_value=None)
        command = sample_command.model_copy(update={"sales_order_id": 404})

        result = await create_invoice_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "SALES_ORDER_NOT_FOUND"
        mock_invoice_repo.create.assert_not_called()

    async def test_number_conflict_after_retries(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        mock_invoice_repo.create = AsyncMock(
            side_effect=IntegrityError(
                "INSERT INTO invoices",
                {},
                Exception("UNIQUE constraint failed: invoices.invoice_number"),
            )
        )

        result = await create_invoice_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "DOCUMENT_NUMBER_CONFLICT"
        assert mock_uow.rollback.call_count == 3
        mock_uow.commit.assert_not_called()

    async def test_unexpected_error(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        mock_invoice_repo.get_latest_number = AsyncMock(side_effect=Exception("Database connection lost"))

        result = await create_invoice_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "CREATE_INVOICE_FAILED"
        assert "Database connection lost" in result.error.reason
        mock_uow.rollback.assert_called_once()
