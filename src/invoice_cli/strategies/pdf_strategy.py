from pathlib import Path
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..models import InvoiceDocument, LabeledValue
from .base_strategy import BaseRenderStrategy, format_cell, format_value

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
PAGE_MARGIN = 18 * mm


class NumberedCanvas(canvas.Canvas):
    """Canvas that stamps "Page X of Y" on every page once the total is known."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        if not self._saved_page_states:
            self.showPage()
        num_pages = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_page_number(num_pages)
            super().showPage()
        super().save()

    def _draw_page_number(self, page_count: int):
        self.setFont(FONT_REGULAR, 8)
        self.drawRightString(self._pagesize[0] - PAGE_MARGIN, 10 * mm, f"Page {self._pageNumber} of {page_count}")


class PdfRenderStrategy(BaseRenderStrategy):
    """
    Renders an invoice document to an A4 PDF with reportlab.

    Layout, top to bottom:
    1. Title ("INVOICE")
    2. Header block (invoice number, issue date)
    3. Seller and customer blocks side by side
    4. Line item table, header row repeated on every page
    5. Total row

    Long tables flow onto further pages; every page carries a page number.
    """

    name = "pdf"
    extension = ".pdf"

    def __init__(self):
        styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle("InvoiceTitle", parent=styles["Title"], alignment=0, fontName=FONT_BOLD)
        self.body_style = ParagraphStyle("InvoiceBody", parent=styles["Normal"], fontName=FONT_REGULAR, fontSize=10, leading=13)
        self.label_style = ParagraphStyle("InvoiceLabel", parent=self.body_style, fontName=FONT_BOLD)

    def render(self, document: InvoiceDocument, output_path: Path) -> None:
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=document.name,
        )
        story = [
            Paragraph(escape(document.name), self.title_style),
            self._header_table(document.header),
            Spacer(1, 8 * mm),
            self._parties_table(document),
            Spacer(1, 10 * mm),
            self._items_table(document, doc.width),
        ]
        doc.build(story, canvasmaker=NumberedCanvas)

    def _paragraph(self, text: str, style: ParagraphStyle) -> Paragraph:
        return Paragraph(escape(text).replace("\n", "<br/>"), style)

    def _header_table(self, header: List[LabeledValue]) -> Table:
        rows = [
            [self._paragraph(entry.label.capitalize(), self.label_style), self._paragraph(format_value(entry.value), self.body_style)]
            for entry in header
        ]
        table = Table(rows or [[""]], hAlign="LEFT")
        table.setStyle(TableStyle([("LEFTPADDING", (0, 0), (-1, -1), 0), ("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return table

    def _party_block(self, entries: List[LabeledValue]) -> List[Paragraph]:
        block = []
        for entry in entries:
            block.append(self._paragraph(entry.label, self.label_style))
            block.append(self._paragraph(format_value(entry.value), self.body_style))
        return block

    def _parties_table(self, document: InvoiceDocument) -> Table:
        table = Table([[self._party_block(document.seller), self._party_block(document.customer)]], colWidths=["50%", "50%"])
        table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP"), ("LEFTPADDING", (0, 0), (-1, -1), 0)]))
        return table

    def _items_table(self, document: InvoiceDocument, width: float) -> Table:
        details = document.details
        currency = document.currency
        rows = [[self._paragraph(format_value(cell.value), self.label_style) for cell in details.header]]
        for part in details.parts:
            rows.append([
                self._paragraph(format_cell(part[0], currency), self.body_style),
                format_cell(part[1], currency),
                format_cell(part[2], currency),
            ])
        for total in details.total:
            rows.append(["", total.label, f"{currency}{total.value}" if total.price else total.value])

        table = Table(rows, colWidths=[width * 0.6, width * 0.15, width * 0.25], repeatRows=1)
        table.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (-1, -1), FONT_REGULAR),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LINEBELOW", (0, 0), (-1, 0), 1, colors.black),
            ("LINEABOVE", (0, -1), (-1, -1), 1, colors.black),
            ("FONTNAME", (0, -1), (-1, -1), FONT_BOLD),
        ]))
        return table
