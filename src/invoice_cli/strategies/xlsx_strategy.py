from pathlib import Path
from typing import List
import openpyxl
from openpyxl.styles import Alignment, Border, Font, Side
from openpyxl.worksheet.worksheet import Worksheet
from ..models import InvoiceDocument, LabeledValue
from ..operations import CellOperations
from .base_strategy import BaseRenderStrategy

SHEET_TITLE = "Invoice"
COLUMN_WIDTHS = {"A": 42, "B": 34, "C": 16}


class XlsxRenderStrategy(BaseRenderStrategy):
    """
    Renders an invoice document to a single-sheet Excel workbook.

    The sheet is laid out top to bottom like the PDF: title, header block,
    seller block, customer block, line item table and total row. Price cells
    are stored as numbers with a currency number format so the workbook can
    be summed; the table header row is set as print title so it repeats on
    every printed page.

    Example:
        >>> strategy = XlsxRenderStrategy()
        >>> strategy.render(record.document, Path("acme-corp-invoice.xlsx"))
    """

    name = "xlsx"
    extension = ".xlsx"

    def render(self, document: InvoiceDocument, output_path: Path) -> None:
        workbook = openpyxl.Workbook()
        try:
            worksheet = workbook.active
            worksheet.title = SHEET_TITLE
            ops = CellOperations(currency=document.currency)

            title = ops.set_cell_value(worksheet, 1, 1, document.name)
            title.font = Font(bold=True, size=16)

            row = self._write_block(worksheet, ops, 3, document.header, capitalize=True)
            row = self._write_block(worksheet, ops, row + 1, document.seller)
            row = self._write_block(worksheet, ops, row + 1, document.customer)
            self._write_items(worksheet, ops, row + 1, document)

            for column, width in COLUMN_WIDTHS.items():
                worksheet.column_dimensions[column].width = width
            worksheet.page_setup.orientation = "portrait"
            worksheet.page_setup.fitToWidth = 1
            worksheet.page_setup.fitToHeight = 0
            worksheet.sheet_properties.pageSetUpPr.fitToPage = True

            workbook.save(output_path)
        finally:
            workbook.close()

    def _write_block(
        self,
        worksheet: Worksheet,
        ops: CellOperations,
        row: int,
        entries: List[LabeledValue],
        capitalize: bool = False,
    ) -> int:
        """Write label/value pairs from ``row`` on; return the next free row."""
        for entry in entries:
            label = entry.label.capitalize() if capitalize else entry.label
            ops.set_cell_value(worksheet, row, 1, label, bold=True)
            value = ops.set_cell_value(worksheet, row, 2, entry.value)
            if isinstance(entry.value, list):
                value.alignment = Alignment(wrap_text=True, vertical="top")
            row += 1
        return row

    def _write_items(self, worksheet: Worksheet, ops: CellOperations, row: int, document: InvoiceDocument) -> int:
        details = document.details
        header_row = row
        ruler = Border(bottom=Side(style="thin"))
        for cell in ops.set_row_values(worksheet, header_row, 1, [cell.value for cell in details.header], bold=True):
            cell.border = ruler
        worksheet.print_title_rows = f"{header_row}:{header_row}"

        row += 1
        for part in details.parts:
            ops.set_cell_value(worksheet, row, 1, part[0].value)
            ops.set_cell_value(worksheet, row, 2, part[1].value)
            if part[2].price:
                ops.set_price_value(worksheet, row, 3, part[2].value)
            else:
                ops.set_cell_value(worksheet, row, 3, part[2].value)
            row += 1

        for total in details.total:
            ops.set_cell_value(worksheet, row, 2, total.label, bold=True)
            if total.price:
                ops.set_price_value(worksheet, row, 3, total.value, bold=True)
            else:
                ops.set_cell_value(worksheet, row, 3, total.value, bold=True)
            row += 1
        return row
