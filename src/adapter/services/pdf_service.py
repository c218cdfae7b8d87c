"""ReportLab PDF Generation Service Implementation

Implements invoice rendering using ReportLab library.
"""

from io import BytesIO
from xml.sax.saxutils import escape

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

from src.app.services.pdf_service import PdfService, InvoiceDocument, DocumentParty


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Lays out the issuer block, the bill-to block, the line item table and
    the charges breakdown. All amounts arrive pre-formatted.
    """

    def render_invoice(self, document: InvoiceDocument) -> bytes:
        """
        Render an invoice PDF

        Args:
            document: Display-ready invoice view

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=document.invoice_number,
        )

        styles = getSampleStyleSheet()
        elements = []

        # Custom styles
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=6,
            textColor=colors.HexColor("#111827"),
        )
        label_style = ParagraphStyle(
            "LabelStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=colors.HexColor("#2563EB"),
            spaceAfter=16,
        )
        muted_style = ParagraphStyle(
            "MutedStyle",
            parent=styles["Normal"],
            fontSize=9,
            textColor=colors.HexColor("#6B7280"),
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

        # Header - issuer
        elements.append(Paragraph(escape(document.issuer.name or "Invoice"), title_style))
        for line in document.issuer.lines:
            elements.append(Paragraph(escape(line), muted_style))
        elements.append(Spacer(1, 8 * mm))
        elements.append(Paragraph("INVOICE", label_style))

        # Invoice details
        invoice_info = [
            ["Invoice Number:", document.invoice_number],
            ["Status:", document.status.upper()],
            ["Issue Date:", document.issue_date],
            ["Due Date:", document.due_date],
        ]
        invoice_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm])
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#6B7280")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(invoice_table)
        elements.append(Spacer(1, 8 * mm))

        # Bill to
        elements.extend(self._party_block("Bill To:", document.bill_to, bold_style, normal_style))
        elements.append(Spacer(1, 8 * mm))

        # Line items
        line_data = [["Description", "Qty", "Unit Price", "Amount"]]
        for line in document.lines:
            line_data.append(
                [
                    Paragraph(escape(line.description), normal_style),
                    str(line.quantity),
                    line.unit_price,
                    line.line_total,
                ]
            )

        line_table = Table(line_data, colWidths=[80 * mm, 20 * mm, 35 * mm, 35 * mm])
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#111827")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 1), (-1, -1), "MIDDLE"),
                    # Grid
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#D1D5DB")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F9FAFB")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Subtotal, enabled charges, grand total
        summary_data = [["", "Subtotal", document.subtotal]]
        for charge in document.charges:
            summary_data.append(["", charge.label, charge.amount])
        summary_data.append(["", "Grand Total", document.total])

        summary_table = Table(summary_data, colWidths=[100 * mm, 35 * mm, 35 * mm])
        summary_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (1, -1), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (1, -1), (-1, -1), 11),
                    ("LINEABOVE", (1, -1), (-1, -1), 1.5, colors.HexColor("#111827")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(summary_table)

        if document.terms_text:
            elements.append(Spacer(1, 12 * mm))
            elements.append(Paragraph("Terms", bold_style))
            elements.append(Paragraph(escape(document.terms_text), muted_style))

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    @staticmethod
    def _party_block(heading, party: DocumentParty, heading_style, body_style):
        block = [Paragraph(heading, heading_style), Paragraph(escape(party.name), body_style)]
        block.extend(Paragraph(escape(line), body_style) for line in party.lines)
        return block
