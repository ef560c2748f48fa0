"""Invoice API Routes

FastAPI routes for invoice creation, lookup and proforma generation.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
import base64
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.billing import (
    CreateInvoice,
    GetInvoice,
    ListInvoices,
    GenerateProforma,
    CreateInvoiceCommandDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
    ProformaInvoiceResponseDTO,
)
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.invoice_line_repository import SqlAlchemyInvoiceLineRepository
from src.adapter.repositories.sales_order_repository import SqlAlchemySalesOrderRepository
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_config
from src.api.error import ClientError

router = APIRouter(prefix="/accounting/invoices", tags=["Invoices"])

INVALID_STATUS_RESPONSE = {
    "description": "Invalid invoice status",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVALID_INVOICE_STATUS",
                    "message": "Proforma can only be generated for draft invoices"
                }
            }
        }
    }
}

INVOICE_NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVOICE_NOT_FOUND",
                    "message": "Invoice with ID 123 not found"
                }
            }
        }
    }
}


def build_proforma_use_case(session: AsyncSession, config) -> GenerateProforma:
    return GenerateProforma(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
        ReportLabPdfService(),
        company_name=config.COMPANY_NAME,
        company_address=config.COMPANY_ADDRESS,
    )


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    request: CreateInvoiceCommandDTO,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Create a draft invoice.

    **Example response:**
    ```json
    {
      "invoice_id": 1,
      "invoice_number": "INV-000001",
      "customer_id": 1,
      "status": "draft",
      "subtotal": "450.00",
      "tax_amount": "38.25",
      "total": "488.25",
      "amount_paid": "0.00",
      "amount_due": "488.25",
      "currency": "USD"
    }
    ```

    **Returns:**
    - 201: Invoice created
    - 404: Customer or sales order not found
    - 409: Document number conflict
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateInvoice(
        uow,
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        sales_order_repo=SqlAlchemySalesOrderRepository(session),
        number_prefix=config.INVOICE_NUMBER_PREFIX,
        due_days=config.INVOICE_DUE_DAYS,
        currency=config.DEFAULT_CURRENCY,
        max_retries=config.DOCUMENT_NUMBER_MAX_RETRIES,
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListInvoicesResponseDTO, status_code=status.HTTP_200_OK)
async def list_invoices(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    customer_id: Optional[str] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    session: AsyncSession = Depends(get_session),
):
    """
    List invoices, newest invoice date first.

    **Query parameters:**
    - `status` (optional): draft, sent, partial, paid, overdue or cancelled
    - `customer_id` (optional): Only this customer's invoices
    - `date_from`, `date_to` (optional): Inclusive invoice date range (YYYY-MM-DD)

    **Returns:**
    - 200: Invoice headers without lines
    - 400: Invalid filters
    """
    filters = {
        key: value
        for key, value in {
            "status": status_filter,
            "customer_id": customer_id,
            "date_from": date_from,
            "date_to": date_to,
        }.items()
        if value is not None
    }

    result = await ListInvoices(SqlAlchemyInvoiceRepository(session)).execute(filters)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    responses={404: INVOICE_NOT_FOUND_RESPONSE},
)
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session),
):
    """
    Get an invoice with its lines, whatever its status.

    **Returns:**
    - 200: Invoice
    - 404: Invoice not found
    """
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}/proforma",
    response_model=ProformaInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: INVOICE_NOT_FOUND_RESPONSE, 400: INVALID_STATUS_RESPONSE},
)
async def get_proforma_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Generate a proforma (preview) invoice for a draft invoice.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Returns:**
    - 200: Proforma with the PDF as base64
    - 400: Invoice is not in draft status
    - 404: Invoice not found
    """
    use_case = build_proforma_use_case(session, config)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}/proforma/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: INVOICE_NOT_FOUND_RESPONSE,
        400: INVALID_STATUS_RESPONSE,
    }
)
async def download_proforma_invoice_pdf(
    invoice_id: int,
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Download the proforma invoice as a PDF file.

    **Returns:**
    - 200: PDF file as binary response
    - 400: Invoice is not in draft status
    - 404: Invoice not found
    """
    use_case = build_proforma_use_case(session, config)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    pdf_bytes = base64.b64decode(result.value.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=proforma_{result.value.invoice_number}.pdf"
        }
    )
