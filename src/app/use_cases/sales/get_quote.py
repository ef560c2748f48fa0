"""GetQuote Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.quote_repository import QuoteRepository
from .create_quote import build_quote_response
from .dtos import QuoteResponseDTO


class GetQuote:
    """
    Use Case: Retrieve a quote with its line items
    """

    def __init__(self, quote_repo: QuoteRepository):
        self.quote_repo = quote_repo

    async def execute(self, quote_id: int) -> Result[QuoteResponseDTO]:
        try:
            quote = await self.quote_repo.get_by_id(quote_id)
            if not quote:
                return Return.err(
                    Error(
                        code="QUOTE_NOT_FOUND",
                        message=f"Quote with ID {quote_id} not found",
                        reason="Quote does not exist",
                    )
                )

            items = await self.quote_repo.get_items(quote_id)
            return Return.ok(build_quote_response(quote, items))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_QUOTE_FAILED",
                    message="Failed to retrieve quote",
                    reason=str(e),
                )
            )
