"""Document number allocation

generate_document_number is a pure increment; uniqueness comes from the
unique index on each number column. On a collision the unit of work is
rolled back and the whole insert is retried with a freshly read number.
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar
from sqlalchemy.exc import IntegrityError
from tenacity import AsyncRetrying, RetryError, retry_if_exception_type, stop_after_attempt
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.calculations import generate_document_number

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_RETRIES = 3


class DocumentNumberTaken(Exception):
    """Raised when an insert hit the unique index of the number column"""

    def __init__(self, number: str):
        super().__init__(f"Document number {number} already taken")
        self.number = number


def is_number_collision(error: IntegrityError, number_column: str) -> bool:
    """
    True when the IntegrityError comes from the number column's unique index

    SQLite reports "UNIQUE constraint failed: quotes.quote_number",
    PostgreSQL "duplicate key value violates unique constraint
    "quotes_quote_number_key"". NOT NULL and foreign key violations
    mention neither.
    """
    detail = str(error.orig).lower()
    return "unique" in detail and number_column.lower() in detail


async def insert_with_document_number(
    uow: UnitOfWork,
    prefix: str,
    latest_number: Callable[[], Awaitable[Optional[str]]],
    insert: Callable[[str], Awaitable[T]],
    max_retries: int = DEFAULT_MAX_RETRIES,
    number_column: str = "number",
) -> Result[T]:
    """
    Insert a document under the next number of its series

    Args:
        uow: Unit of work rolled back after a collision
        prefix: Series prefix (QT, SO, INV)
        latest_number: Reads the latest number of the series
        insert: Inserts header and items under the given number (flush, no commit)
        max_retries: Attempts before giving up
        number_column: Column carrying the unique number (quote_number, ...)

    Returns:
        Result[T]: Whatever insert returned, or DOCUMENT_NUMBER_CONFLICT

    Raises:
        IntegrityError: Any other constraint violation, after rollback
    """
    created = None
    number = None

    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max_retries),
            retry=retry_if_exception_type(DocumentNumberTaken),
            reraise=False,
        ):
            with attempt:
                number = generate_document_number(prefix, await latest_number())
                try:
                    created = await insert(number)
                except IntegrityError as e:
                    await uow.rollback()
                    if not is_number_collision(e, number_column):
                        raise
                    logger.warning(
                        f"Document number {number} already taken "
                        f"(attempt {attempt.retry_state.attempt_number}/{max_retries}): {e.orig}"
                    )
                    raise DocumentNumberTaken(number) from e
    except RetryError:
        return Return.err(
            Error(
                code="DOCUMENT_NUMBER_CONFLICT",
                message=f"Could not allocate a unique {prefix} document number",
                reason=f"Number {number} collided after {max_retries} attempts; retry the request",
            )
        )

    return Return.ok(created)
