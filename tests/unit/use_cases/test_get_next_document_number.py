"""Unit tests for GetNextDocumentNumber use case"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.sales import GetNextDocumentNumber


@pytest.fixture
def series():
    return {
        "quotes": ("QT", AsyncMock(return_value="QT-000041")),
        "sales_orders": ("SO", AsyncMock(return_value=None)),
        "invoices": ("INV", AsyncMock(return_value="INV-000122")),
    }


@pytest.mark.asyncio
class TestGetNextDocumentNumber:
    async def test_next_invoice_number(self, series):
        result = await GetNextDocumentNumber(series).execute("invoices")

        assert result.is_ok()
        assert result.value.series == "invoices"
        assert result.value.last_number == "INV-000122"
        assert result.value.next_number == "INV-000123"

    async def test_empty_series_starts_at_one(self, series):
        result = await GetNextDocumentNumber(series).execute("sales_orders")

        assert result.value.last_number is None
        assert result.value.next_number == "SO-000001"

    async def test_only_the_requested_series_is_read(self, series):
        await GetNextDocumentNumber(series).execute("quotes")

        series["quotes"][1].assert_called_once()
        series["invoices"][1].assert_not_called()

    async def test_unknown_series(self, series):
        result = await GetNextDocumentNumber(series).execute("credit_notes")

        assert result.is_err()
        assert result.error.code == "UNKNOWN_DOCUMENT_SERIES"
        assert "invoices, quotes, sales_orders" in result.error.reason

    async def test_database_error(self, series):
        series["quotes"] = ("QT", AsyncMock(side_effect=Exception("database is locked")))

        result = await GetNextDocumentNumber(series).execute("quotes")

        assert result.is_err()
        assert result.error.code == "DATABASE_ERROR"
