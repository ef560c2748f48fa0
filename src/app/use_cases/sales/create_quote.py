"""CreateQuote Use Case

Prices a quote from its line items and stores it under the next QT number.
"""

import logging
from datetime import date
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.quote_repository import QuoteRepository
from src.domain.calculations import calculate_document_totals
from src.domain.quote import Quote, QuoteStatus
from src.domain.quote_item import QuoteItem
from .document_numbering import insert_with_document_number, DEFAULT_MAX_RETRIES
from .dtos import CreateQuoteCommandDTO, QuoteResponseDTO
from .line_items import price_line_items, to_line_item_dto

logger = logging.getLogger(__name__)


class CreateQuote:
    """
    Use Case: Create a draft quote with line items

    Business Rules:
    1. Customer must exist
    2. line_total is computed per item (discount, then tax)
    3. Document totals use the flat document discount and document tax rate
    4. Quote number is the next number in the QT series
    5. Header and items are committed together

    Flow:
    1. Load customer
    2. Price items and compute totals
    3. Insert header and items under the next number (retry on collision)
    4. Commit transaction
    5. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        quote_repo: QuoteRepository,
        number_prefix: str = "QT",
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.quote_repo = quote_repo
        self.number_prefix = number_prefix
        self.max_retries = max_retries

    async def execute(self, command: CreateQuoteCommandDTO) -> Result[QuoteResponseDTO]:
        """
        Execute quote creation

        Args:
            command: CreateQuoteCommandDTO with customer, items and document terms

        Returns:
            Result[QuoteResponseDTO]: Success with quote details or error
        """
        try:
            # Step 1: Customer must exist
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {command.customer_id} not found",
                        reason="Quotes must reference an existing customer",
                    )
                )

            # Step 2: Price items and compute totals
            priced_items = price_line_items(command.items)
            totals = calculate_document_totals(
                priced_items,
                document_discount=command.discount_amount,
                tax_rate=command.tax_rate,
            )

            # Step 3: Insert under the next quote number
            async def insert(quote_number: str):
                quote = await self.quote_repo.create(
                    Quote(
                        quote_number=quote_number,
                        customer_id=command.customer_id,
                        issue_date=command.issue_date or date.today(),
                        expiry_date=command.expiry_date,
                        status=QuoteStatus.DRAFT,
                        tax_rate=command.tax_rate,
                        terms=command.terms,
                        notes=command.notes,
                        **totals.as_dict(),
                    )
                )
                items = [
                    await self.quote_repo.add_item(QuoteItem(quote_id=quote.id, **fields))
                    for fields in priced_items
                ]
                return quote, items

            inserted = await insert_with_document_number(
                self.uow,
                self.number_prefix,
                self.quote_repo.get_latest_number,
                insert,
                self.max_retries,
                number_column="quote_number",
            )
            if inserted.is_err():
                return inserted

            quote, items = inserted.value

            # Step 4: Commit transaction
            await self.uow.commit()
            logger.info(f"Created quote {quote.quote_number} total={quote.total}")

            # Step 5: Build response
            return Return.ok(build_quote_response(quote, items))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_QUOTE_FAILED",
                    message="Failed to create quote",
                    reason=str(e),
                )
            )


def build_quote_response(quote: Quote, items) -> QuoteResponseDTO:
    return QuoteResponseDTO(
        quote_id=quote.id,
        quote_number=quote.quote_number,
        customer_id=quote.customer_id,
        issue_date=quote.issue_date,
        expiry_date=quote.expiry_date,
        status=quote.status.value,
        subtotal=quote.subtotal,
        tax_rate=quote.tax_rate,
        tax_amount=quote.tax_amount,
        discount_amount=quote.discount_amount,
        total=quote.total,
        terms=quote.terms,
        notes=quote.notes,
        items=[to_line_item_dto(item) for item in items],
        created_at=quote.created_at,
    )
