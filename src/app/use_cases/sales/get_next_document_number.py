"""GetNextDocumentNumber Use Case

Previews the number the next document of a series would receive. The
preview is not reserved; creation re-reads the series under its own
transaction.
"""

from typing import Callable, Awaitable, Dict, Optional, Tuple
from libs.result import Result, Return, Error
from src.domain.calculations import generate_document_number
from .dtos import NextDocumentNumberResponseDTO

LatestNumberReader = Callable[[], Awaitable[Optional[str]]]


class GetNextDocumentNumber:
    """
    Use Case: Preview next document number for a series

    Business Rules:
    1. Series is one of the configured names (quotes, sales_orders, invoices)
    2. Unknown series are rejected rather than queried
    """

    def __init__(self, series: Dict[str, Tuple[str, LatestNumberReader]]):
        """
        Args:
            series: Maps series name to (prefix, latest number reader)
        """
        self.series = series

    async def execute(self, series_name: str) -> Result[NextDocumentNumberResponseDTO]:
        if series_name not in self.series:
            return Return.err(
                Error(
                    code="UNKNOWN_DOCUMENT_SERIES",
                    message=f"Unknown document series '{series_name}'",
                    reason=f"Expected one of: {', '.join(sorted(self.series))}",
                )
            )

        prefix, latest_number = self.series[series_name]

        try:
            last_number = await latest_number()
        except Exception as e:
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Failed to select latest document number",
                    reason=str(e),
                )
            )

        return Return.ok(
            NextDocumentNumberResponseDTO(
                series=series_name,
                last_number=last_number,
                next_number=generate_document_number(prefix, last_number),
            )
        )
