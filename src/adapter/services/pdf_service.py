"""ReportLab PDF Generation Service Implementation

Implements PDF generation using ReportLab library.
"""

from io import BytesIO
from xml.sax.saxutils import escape
from decimal import Decimal
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine

LINE_COLUMNS = [62 * mm, 20 * mm, 26 * mm, 16 * mm, 16 * mm, 30 * mm]


def _percent(value: Decimal) -> str:
    return f"{value:.4f}".rstrip("0").rstrip(".") + "%"


def _quantity(value: Decimal) -> str:
    return f"{value:,.4f}".rstrip("0").rstrip(".")


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Generates proforma invoices with line items and a totals breakdown.
    """

    def generate_proforma_invoice(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Customer,
        company_name: str,
        company_address: str,
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=15 * mm,
            leftMargin=15 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
        )

        styles = getSampleStyleSheet()
        elements = []
        currency = invoice.currency

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=24,
            spaceAfter=10,
            textColor=colors.HexColor("#2C3E50"),
        )
        proforma_style = ParagraphStyle(
            "ProformaStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=colors.HexColor("#E74C3C"),
            spaceAfter=20,
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#7F8C8D"),
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        # Header
        elements.append(Paragraph(escape(company_name), title_style))
        elements.append(Paragraph(escape(company_address), header_style))
        elements.append(Spacer(1, 10 * mm))
        elements.append(Paragraph("PROFORMA INVOICE", proforma_style))

        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Status:", invoice.status.value.upper()],
            ["Invoice Date:", invoice.invoice_date.strftime("%Y-%m-%d")],
            ["Due Date:", invoice.due_date.strftime("%Y-%m-%d")],
            ["Currency:", currency],
        ]
        if invoice.terms:
            invoice_info.append(["Terms:", invoice.terms])

        invoice_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm])
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(invoice_table)
        elements.append(Spacer(1, 10 * mm))

        # Bill to
        elements.append(Paragraph("Bill To:", bold_style))
        elements.append(Paragraph(escape(customer.company_name), normal_style))
        if customer.email:
            elements.append(Paragraph(escape(customer.email), normal_style))
        elements.append(Spacer(1, 10 * mm))

        # Line items
        line_data = [["Description", "Qty", "Unit Price", "Disc.", "Tax", "Line Total"]]
        for line in invoice_lines:
            line_data.append(
                [
                    Paragraph(escape(line.description), normal_style),
                    _quantity(line.quantity),
                    f"{line.unit_price:,.2f}",
                    _percent(line.discount_percent),
                    _percent(line.tax_rate),
                    f"{currency} {line.line_total:,.2f}",
                ]
            )

        line_table = Table(line_data, colWidths=LINE_COLUMNS, repeatRows=1)
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Totals breakdown
        totals_data = [
            ["Subtotal:", f"{currency} {invoice.subtotal:,.2f}"],
            ["Discount:", f"-{currency} {invoice.discount_amount:,.2f}"],
            [f"Tax ({_percent(invoice.tax_rate)}):", f"{currency} {invoice.tax_amount:,.2f}"],
            ["Total:", f"{currency} {invoice.total:,.2f}"],
            ["Amount Due:", f"{currency} {invoice.amount_due:,.2f}"],
        ]
        totals_table = Table(totals_data, colWidths=[140 * mm, 30 * mm])
        totals_table.setStyle(
            TableStyle(
                [
                    ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("FONTNAME", (0, 3), (-1, 4), "Helvetica-Bold"),
                    ("LINEABOVE", (0, 3), (-1, 3), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)
        elements.append(Spacer(1, 15 * mm))

        footer_note = Paragraph(
            "<i>This is a proforma invoice for preview purposes only. "
            "It is not a legally binding document until officially issued.</i>",
            ParagraphStyle(
                "FooterNote",
                parent=styles["Normal"],
                fontSize=9,
                textColor=colors.HexColor("#95A5A6"),
            ),
        )
        elements.append(footer_note)

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
