"""Sales API Routes

FastAPI routes for quotes, sales orders and document number previews.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.sales import (
    CreateQuote,
    GetQuote,
    CreateSalesOrder,
    GetSalesOrder,
    GetNextDocumentNumber,
    CreateQuoteCommandDTO,
    QuoteResponseDTO,
    CreateSalesOrderCommandDTO,
    SalesOrderResponseDTO,
    NextDocumentNumberResponseDTO,
)
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.quote_repository import SqlAlchemyQuoteRepository
from src.adapter.repositories.sales_order_repository import SqlAlchemySalesOrderRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_config
from src.api.error import ClientError

router = APIRouter(prefix="/sales", tags=["Sales"])

DOCUMENT_NOT_FOUND_RESPONSE = {
    "description": "Document or customer not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "CUSTOMER_NOT_FOUND",
                    "message": "Customer with ID 42 not found"
                }
            }
        }
    }
}

NUMBER_CONFLICT_RESPONSE = {
    "description": "No free document number after retrying",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "DOCUMENT_NUMBER_CONFLICT",
                    "message": "Could not allocate a unique document number"
                }
            }
        }
    }
}


@router.post(
    "/quotes",
    response_model=QuoteResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={404: DOCUMENT_NOT_FOUND_RESPONSE, 409: NUMBER_CONFLICT_RESPONSE},
)
async def create_quote(
    request: CreateQuoteCommandDTO,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Create a draft quote.

    Line totals and document totals are computed server side; any totals
    in the request are ignored.

    **Example request:**
    ```json
    {
      "customer_id": 1,
      "tax_rate": "8.5",
      "discount_amount": "0",
      "items": [
        {"description": "Consulting", "quantity": "5", "unit_price": "100", "discount_percent": "10"}
      ]
    }
    ```

    **Returns:**
    - 201: Quote created (e.g. QT-000001)
    - 404: Customer not found
    - 409: Document number conflict
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateQuote(
        uow,
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyQuoteRepository(session),
        number_prefix=config.QUOTE_NUMBER_PREFIX,
        max_retries=config.DOCUMENT_NUMBER_MAX_RETRIES,
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/quotes/{quote_id}",
    response_model=QuoteResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: DOCUMENT_NOT_FOUND_RESPONSE},
)
async def get_quote(
    quote_id: int,
    session: AsyncSession = Depends(get_session),
):
    use_case = GetQuote(SqlAlchemyQuoteRepository(session))
    result = await use_case.execute(quote_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/orders",
    response_model=SalesOrderResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={404: DOCUMENT_NOT_FOUND_RESPONSE, 409: NUMBER_CONFLICT_RESPONSE},
)
async def create_sales_order(
    request: CreateSalesOrderCommandDTO,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Create a draft sales order, optionally referencing a quote.

    Shipping is added after tax.

    **Returns:**
    - 201: Sales order created (e.g. SO-000001)
    - 404: Customer or quote not found
    - 409: Document number conflict
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateSalesOrder(
        uow,
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyQuoteRepository(session),
        SqlAlchemySalesOrderRepository(session),
        number_prefix=config.SALES_ORDER_NUMBER_PREFIX,
        max_retries=config.DOCUMENT_NUMBER_MAX_RETRIES,
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/orders/{order_id}",
    response_model=SalesOrderResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: DOCUMENT_NOT_FOUND_RESPONSE},
)
async def get_sales_order(
    order_id: int,
    session: AsyncSession = Depends(get_session),
):
    use_case = GetSalesOrder(SqlAlchemySalesOrderRepository(session))
    result = await use_case.execute(order_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/documents/next-number",
    response_model=NextDocumentNumberResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_next_document_number(
    series: str = Query(..., description="quotes, sales_orders or invoices"),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Preview the next number of a document series.

    The number is not reserved; two callers may see the same preview.

    **Returns:**
    - 200: Next number (e.g. INV-000124)
    - 400: Unknown series
    """
    use_case = GetNextDocumentNumber(
        {
            "quotes": (
                config.QUOTE_NUMBER_PREFIX,
                SqlAlchemyQuoteRepository(session).get_latest_number,
            ),
            "sales_orders": (
                config.SALES_ORDER_NUMBER_PREFIX,
                SqlAlchemySalesOrderRepository(session).get_latest_number,
            ),
            "invoices": (
                config.INVOICE_NUMBER_PREFIX,
                SqlAlchemyInvoiceRepository(session).get_latest_number,
            ),
        }
    )
    result = await use_case.execute(series)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
