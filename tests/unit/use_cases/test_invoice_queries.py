"""Unit tests for GetInvoice and ListInvoices use cases

Tests cover:
- Reading back an invoice with its lines in any status
- Invoice not found
- List filters forwarded to the repository
- Invalid filters
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime, date

from src.app.use_cases.billing.get_invoice import GetInvoice
from src.app.use_cases.billing.list_invoices import ListInvoices
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine


def make_invoice(invoice_id=1, number="INV-000001", status=InvoiceStatus.DRAFT, invoice_date=date(2024, 1, 31)):
    return Invoice(
        id=invoice_id,
        invoice_number=number,
        customer_id=7,
        status=status,
        invoice_date=invoice_date,
        due_date=date(2024, 3, 1),
        subtotal=Decimal("150.00"),
        tax_rate=Decimal("10"),
        tax_amount=Decimal("15.00"),
        discount_amount=Decimal("0.00"),
        total=Decimal("165.00"),
        amount_paid=Decimal("0.00"),
        amount_due=Decimal("165.00"),
        currency="USD",
        created_at=datetime(2024, 1, 31, 12, 0, 0),
    )


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.fixture
def mock_invoice_line_repo():
    repo = MagicMock()
    repo.get_by_invoice_id = AsyncMock(
        return_value=[
            InvoiceLine(
                id=1,
                invoice_id=1,
                description="Implementation services",
                quantity=Decimal("10"),
                unit_price=Decimal("15.00"),
                line_total=Decimal("150.00"),
                sort_order=0,
            )
        ]
    )
    return repo


@pytest.mark.asyncio
class TestGetInvoice:
    async def test_paid_invoice_is_readable(self, mock_invoice_repo, mock_invoice_line_repo):
        """
        Given: An invoice that is no longer a draft
        When: It is fetched by id
        Then: Header and lines are returned
        """
        mock_invoice_repo.get_by_id = AsyncMock(return_value=make_invoice(status=InvoiceStatus.PAID))

        result = await GetInvoice(mock_invoice_repo, mock_invoice_line_repo).execute(1)

        assert result.is_ok()
        assert result.value.invoice_number == "INV-000001"
        assert result.value.status == "paid"
        assert result.value.total == Decimal("165.00")
        assert [item.description for item in result.value.items] == ["Implementation services"]
        mock_invoice_line_repo.get_by_invoice_id.assert_called_once_with(1)

    async def test_not_found(self, mock_invoice_repo, mock_invoice_line_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetInvoice(mock_invoice_repo, mock_invoice_line_repo).execute(999)

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_invoice_line_repo.get_by_invoice_id.assert_not_called()

    async def test_database_failure(self, mock_invoice_repo, mock_invoice_line_repo):
        mock_invoice_repo.get_by_id = AsyncMock(side_effect=Exception("connection lost"))

        result = await GetInvoice(mock_invoice_repo, mock_invoice_line_repo).execute(1)

        assert result.is_err()
        assert result.error.code == "GET_INVOICE_FAILED"


@pytest.mark.asyncio
class TestListInvoices:
    async def test_filters_are_parsed_and_forwarded(self, mock_invoice_repo):
        mock_invoice_repo.list = AsyncMock(
            return_value=[
                make_invoice(2, "INV-000002", invoice_date=date(2024, 2, 10)),
                make_invoice(1, "INV-000001"),
            ]
        )

        result = await ListInvoices(mock_invoice_repo).execute(
            {"status": "draft", "customer_id": "7", "date_from": "2024-01-01", "date_to": "2024-02-29"}
        )

        assert result.is_ok()
        assert result.value.total == 2
        assert [invoice.invoice_number for invoice in result.value.invoices] == ["INV-000002", "INV-000001"]
        assert result.value.invoices[0].items == []
        mock_invoice_repo.list.assert_called_once_with(
            status=InvoiceStatus.DRAFT,
            customer_id=7,
            date_from=date(2024, 1, 1),
            date_to=date(2024, 2, 29),
        )

    async def test_no_filters(self, mock_invoice_repo):
        mock_invoice_repo.list = AsyncMock(return_value=[])

        result = await ListInvoices(mock_invoice_repo).execute()

        assert result.is_ok()
        assert result.value.total == 0
        mock_invoice_repo.list.assert_called_once_with(
            status=None, customer_id=None, date_from=None, date_to=None
        )

    @pytest.mark.parametrize(
        "filters",
        [
            {"status": "archived"},
            {"customer_id": "abc"},
            {"date_from": "31/01/2024"},
        ],
    )
    async def test_invalid_filters(self, mock_invoice_repo, filters):
        mock_invoice_repo.list = AsyncMock()

        result = await ListInvoices(mock_invoice_repo).execute(filters)

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_invoice_repo.list.assert_not_called()

    async def test_inverted_date_range(self, mock_invoice_repo):
        mock_invoice_repo.list = AsyncMock()

        result = await ListInvoices(mock_invoice_repo).execute(
            {"date_from": "2024-03-01", "date_to": "2024-01-01"}
        )

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_invoice_repo.list.assert_not_called()

    async def test_database_failure(self, mock_invoice_repo):
        mock_invoice_repo.list = AsyncMock(side_effect=Exception("connection lost"))

        result = await ListInvoices(mock_invoice_repo).execute({})

        assert result.is_err()
        assert result.error.code == "DATABASE_ERROR"
