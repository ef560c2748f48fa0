"""ListInvoices Use Case"""

from typing import Any
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.validation import validate
from .create_invoice import build_invoice_response
from .dtos import ListInvoicesFilterDTO, ListInvoicesResponseDTO


class ListInvoices:
    """
    Use Case: List invoice headers with optional filters

    Filters: status, customer_id, and an inclusive invoice_date range.
    Ordered by invoice_date then invoice_number, newest first. Lines are
    not loaded; use GetInvoice for a single invoice with its lines.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, filters: Any = None) -> Result[ListInvoicesResponseDTO]:
        validated = validate(ListInvoicesFilterDTO, filters, "Invalid invoice filters")
        if validated.is_err():
            return validated

        criteria = validated.value
        if criteria.date_from and criteria.date_to and criteria.date_from > criteria.date_to:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Invalid invoice filters",
                    reason="date_from must not be after date_to",
                    issues=["date_from: must not be after date_to"],
                )
            )

        try:
            invoices = await self.invoice_repo.list(
                status=criteria.status,
                customer_id=criteria.customer_id,
                date_from=criteria.date_from,
                date_to=criteria.date_to,
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Failed to select invoices",
                    reason=str(e),
                )
            )

        return Return.ok(
            ListInvoicesResponseDTO(
                invoices=[build_invoice_response(invoice, []) for invoice in invoices],
                total=len(invoices),
            )
        )
