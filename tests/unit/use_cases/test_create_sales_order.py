"""Unit tests for CreateSalesOrder and GetSalesOrder use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime, date

from src.app.use_cases.sales import (
    CreateSalesOrder,
    GetSalesOrder,
    CreateSalesOrderCommandDTO,
    LineItemInputDTO,
)
from src.domain.customer import Customer
from src.domain.quote import Quote, QuoteStatus
from src.domain.sales_order import SalesOrder, SalesOrderStatus
from src.domain.sales_order_item import SalesOrderItem


@pytest.fixture
def mock_customer_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Customer(id=3, company_name="Initech"))
    return repo


@pytest.fixture
def mock_quote_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(
        return_value=Quote(
            id=11,
            quote_number="QT-000011",
            customer_id=3,
            issue_date=date(2024, 4, 1),
            status=QuoteStatus.ACCEPTED,
        )
    )
    return repo


@pytest.fixture
def mock_order_repo():
    repo = MagicMock()
    repo.get_latest_number = AsyncMock(return_value="SO-000041")

    async def create(order):
        order.id = 42
        order.created_at = datetime(2024, 4, 2, 8, 0, 0)
        return order

    item_ids = iter(range(1, 100))

    async def add_item(item):
        item.id = next(item_ids)
        return item

    repo.create = AsyncMock(side_effect=create)
    repo.add_item = AsyncMock(side_effect=add_item)
    return repo


@pytest.fixture
def create_order_use_case(mock_uow, mock_customer_repo, mock_quote_repo, mock_order_repo):
    return CreateSalesOrder(
        uow=mock_uow,
        customer_repo=mock_customer_repo,
        quote_repo=mock_quote_repo,
        order_repo=mock_order_repo,
    )


@pytest.fixture
def sample_command():
    return CreateSalesOrderCommandDTO(
        customer_id=3,
        quote_id=11,
        order_date=date(2024, 4, 2),
        tax_rate=Decimal("8.5"),
        shipping_amount=Decimal("15"),
        items=[
            LineItemInputDTO(description="Widget", quantity=Decimal("2"), unit_price=Decimal("50")),
            LineItemInputDTO(
                description="Installation",
                quantity=Decimal("1"),
                unit_price=Decimal("100"),
                discount_percent=Decimal("10"),
            ),
        ],
    )


@pytest.mark.asyncio
class TestCreateSalesOrder:
    async def test_create_sales_order_with_shipping(
        self, create_order_use_case, mock_order_repo, mock_uow, sample_command
    ):
        """
        Given: Items worth 190 after line discounts, 8.5% tax and 15 shipping
        When: The sales order is created
        Then: Totals match the document calculation and the number is SO-000042
        """
        result = await create_order_use_case.execute(sample_command)

        assert result.is_ok()
        response = result.value
        assert response.order_id == 42
        assert response.order_number == "SO-000042"
        assert response.quote_id == 11
        assert response.status == SalesOrderStatus.PENDING.value
        assert response.subtotal == Decimal("190.00")
        assert response.tax_amount == Decimal("16.15")
        assert response.shipping_amount == Decimal("15")
        assert response.total == Decimal("221.15")
        assert len(response.items) == 2

        mock_uow.commit.assert_called_once()

    async def test_order_without_quote_skips_quote_lookup(
        self, create_order_use_case, mock_quote_repo, sample_command
    ):
        command = sample_command.model_copy(update={"quote_id": None})

        result = await create_order_use_case.execute(command)

        assert result.is_ok()
        assert result.value.quote_id is None
        mock_quote_repo.get_by_id.assert_not_called()

    async def test_quote_not_found(
        self, create_order_use_case, mock_quote_repo, mock_order_repo, sample_command
    ):
        mock_quote_repo.get_by_id = AsyncMock(return_value=None)

        result = await create_order_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "QUOTE_NOT_FOUND"
        mock_order_repo.create.assert_not_called()

    async def test_customer_not_found(
        self, create_order_use_case, mock_customer_repo, sample_command
    ):
        mock_customer_repo.get_by_id = AsyncMock(return_value=None)

        result = await create_order_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"


@pytest.mark.asyncio
class TestGetSalesOrder:
    async def test_get_sales_order_with_items(self):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(
            return_value=SalesOrder(
                id=5,
                order_number="SO-000005",
                customer_id=3,
                order_date=date(2024, 4, 2),
                status=SalesOrderStatus.CONFIRMED,
                subtotal=Decimal("100.00"),
                tax_rate=Decimal("0"),
                tax_amount=Decimal("0.00"),
                discount_amount=Decimal("0.00"),
                shipping_amount=Decimal("0.00"),
                total=Decimal("100.00"),
                created_at=datetime(2024, 4, 2, 8, 0, 0),
            )
        )
        repo.get_items = AsyncMock(
            return_value=[
                SalesOrderItem(
                    id=9,
                    order_id=5,
                    description="Widget",
                    quantity=Decimal("1"),
                    unit_price=Decimal("100"),
                    line_total=Decimal("100.00"),
                    sort_order=0,
                )
            ]
        )

        result = await GetSalesOrder(repo).execute(5)

        assert result.is_ok()
        assert result.value.order_number == "SO-000005"
        assert result.value.status == "confirmed"
        assert result.value.items[0].description == "Widget"
        repo.get_items.assert_called_once_with(5)

    async def test_sales_order_not_found(self):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=None)

        result = await GetSalesOrder(repo).execute(999)

        assert result.is_err()
        assert result.error.code == "SALES_ORDER_NOT_FOUND"
