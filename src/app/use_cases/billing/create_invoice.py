"""CreateInvoice Use Case

Prices an invoice from its line items and stores it as a draft under the
next INV number.
"""

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.sales_order_repository import SalesOrderRepository
from src.app.use_cases.sales.document_numbering import (
    insert_with_document_number,
    DEFAULT_MAX_RETRIES,
)
from src.app.use_cases.sales.line_items import price_line_items, to_line_item_dto
from src.domain.calculations import calculate_document_totals
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create draft invoice with line items

    Business Rules:
    1. Customer must exist (and the sales order, when referenced)
    2. Invoice number is auto-generated (INV-NNNNNN)
    3. Invoice is created with status=draft
    4. amount_paid = 0, amount_due = total
    5. due_date defaults to invoice_date + due_days

    Flow:
    1. Load customer
    2. Price items and compute totals
    3. Insert invoice and lines under the next number (retry on collision)
    4. Commit transaction
    5. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        sales_order_repo: Optional[SalesOrderRepository] = None,
        number_prefix: str = "INV",
        due_days: int = 30,
        currency: str = "USD",
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.sales_order_repo = sales_order_repo
        self.number_prefix = number_prefix
        self.due_days = due_days
        self.currency = currency
        self.max_retries = max_retries

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer, items and document terms

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            # Step 1: Customer must exist
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {command.customer_id} not found",
                        reason="Invoices must reference an existing customer",
                    )
                )

            if command.sales_order_id is not None and self.sales_order_repo is not None:
                order = await self.sales_order_repo.get_by_id(command.sales_order_id)
                if not order:
                    return Return.err(
                        Error(
                            code="SALES_ORDER_NOT_FOUND",
                            message=f"Sales order with ID {command.sales_order_id} not found",
                            reason="Referenced sales order does not exist",
                        )
                    )

            # Step 2: Price items and compute totals
            priced_items = price_line_items(command.items)
            totals = calculate_document_totals(
                priced_items,
                document_discount=command.discount_amount,
                tax_rate=command.tax_rate,
            )

            invoice_date = command.invoice_date or date.today()
            due_date = command.due_date or invoice_date + timedelta(days=self.due_days)

            # Step 3: Insert under the next invoice number
            async def insert(invoice_number: str):
                invoice = await self.invoice_repo.create(
                    Invoice(
                        invoice_number=invoice_number,
                        customer_id=command.customer_id,
                        sales_order_id=command.sales_order_id,
                        invoice_date=invoice_date,
                        due_date=due_date,
                        status=InvoiceStatus.DRAFT,
                        tax_rate=command.tax_rate,
                        amount_paid=Decimal("0"),
                        amount_due=totals.total,
                        currency=command.currency or self.currency,
                        terms=command.terms,
                        notes=command.notes,
                        **totals.as_dict(),
                    )
                )
                lines = await self.invoice_line_repo.create_many(
                    [InvoiceLine(invoice_id=invoice.id, **fields) for fields in priced_items]
                )
                return invoice, lines

            inserted = await insert_with_document_number(
                self.uow,
                self.number_prefix,
                self.invoice_repo.get_latest_number,
                insert,
                self.max_retries,
                number_column="invoice_number",
            )
            if inserted.is_err():
                return inserted

            invoice, lines = inserted.value

            # Step 4: Commit transaction
            await self.uow.commit()
            logger.info(f"Created invoice {invoice.invoice_number} total={invoice.total}")

            # Step 5: Build response
            return Return.ok(build_invoice_response(invoice, lines))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )


def build_invoice_response(invoice: Invoice, lines) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        invoice_id=invoice.id,
        invoice_number=invoice.invoice_number,
        customer_id=invoice.customer_id,
        sales_order_id=invoice.sales_order_id,
        status=invoice.status.value,
        invoice_date=invoice.invoice_date,
        due_date=invoice.due_date,
        subtotal=invoice.subtotal,
        tax_rate=invoice.tax_rate,
        tax_amount=invoice.tax_amount,
        discount_amount=invoice.discount_amount,
        total=invoice.total,
        amount_paid=invoice.amount_paid,
        amount_due=invoice.amount_due,
        currency=invoice.currency,
        items=[to_line_item_dto(line) for line in lines],
        created_at=invoice.created_at,
    )
