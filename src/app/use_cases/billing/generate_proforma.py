"""GenerateProforma Use Case

Generates a proforma invoice PDF for preview purposes.
"""

import base64
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.services.pdf_service import PdfService
from src.app.use_cases.sales.line_items import to_line_item_dto
from src.domain.invoice import InvoiceStatus
from .dtos import ProformaInvoiceResponseDTO


class GenerateProforma:
    """
    Use Case: Generate proforma invoice PDF

    Business Rules:
    1. Invoice must exist
    2. Invoice must have status=draft (proforma is for preview)
    3. Generates PDF with invoice details, line items and totals
    4. Returns PDF as base64-encoded string

    Flow:
    1. Retrieve invoice by ID
    2. Validate invoice status is draft
    3. Retrieve line items and customer
    4. Generate PDF using PDF service
    5. Return response with PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
        pdf_service: PdfService,
        company_name: str = "Acme ERP",
        company_address: str = "",
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_address = company_address

    async def execute(self, invoice_id: int) -> Result[ProformaInvoiceResponseDTO]:
        """
        Execute proforma invoice generation

        Args:
            invoice_id: Invoice ID to generate proforma for

        Returns:
            Result[ProformaInvoiceResponseDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Validate status is draft
            if invoice.status != InvoiceStatus.DRAFT:
                return Return.err(
                    Error(
                        code="INVALID_INVOICE_STATUS",
                        message=f"Proforma can only be generated for draft invoices. "
                                f"Current status: {invoice.status.value}",
                        reason="Only draft invoices support proforma generation",
                    )
                )

            # Step 3: Retrieve line items and customer
            invoice_lines = await self.invoice_line_repo.get_by_invoice_id(invoice_id)
            customer = await self.customer_repo.get_by_id(invoice.customer_id)

            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {invoice.customer_id} not found",
                        reason="Invoice references a missing customer",
                    )
                )

            # Step 4: Generate PDF
            pdf_bytes = self.pdf_service.generate_proforma_invoice(
                invoice=invoice,
                invoice_lines=invoice_lines,
                customer=customer,
                company_name=self.company_name,
                company_address=self.company_address,
            )

            pdf_base64 = base64.b64encode(pdf_bytes).decode("utf-8")

            # Step 5: Build response
            response = ProformaInvoiceResponseDTO(
                invoice_id=invoice.id,
                invoice_number=invoice.invoice_number,
                customer_id=invoice.customer_id,
                company_name=customer.company_name,
                status=invoice.status.value,
                invoice_date=invoice.invoice_date,
                due_date=invoice.due_date,
                subtotal=invoice.subtotal,
                tax_amount=invoice.tax_amount,
                discount_amount=invoice.discount_amount,
                total=invoice.total,
                currency=invoice.currency,
                line_items=[to_line_item_dto(line) for line in invoice_lines],
                pdf_base64=pdf_base64,
                generated_at=datetime.utcnow(),
            )

            return Return.ok(response)

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_PROFORMA_FAILED",
                    message="Failed to generate proforma invoice",
                    reason=str(e),
                )
            )
