"""
Unit Tests for the render strategies.

Generates real documents with reportlab and openpyxl and inspects them.
"""
import re
import openpyxl
import pytest

from invoice_cli.records import LineItem
from invoice_cli.strategies import PdfRenderStrategy, XlsxRenderStrategy, get_strategy
from invoice_cli.strategies.base_strategy import format_cell, format_value
from invoice_cli.models import Cell

PAGE_OBJECT = re.compile(rb"/Type\s*/Page\b")


class TestFormatting:

    def test_multi_line_values_join(self):
        assert format_value(["Jane Doe", "1 Main Street"]) == "Jane Doe\n1 Main Street"

    def test_missing_value_is_blank(self):
        assert format_value(None) == ""

    def test_currency_only_on_price_cells(self):
        assert format_cell(Cell(value="12.00", price=True), "€") == "€12.00"
        assert format_cell(Cell(value=3), "€") == "3"


class TestPdfStrategy:

    def test_render_writes_pdf(self, tmp_path, sample_record):
        output = tmp_path / "acme-corp-invoice.pdf"
        PdfRenderStrategy().render(sample_record.document, output)
        assert output.read_bytes().startswith(b"%PDF")

    def test_long_tables_span_pages(self, tmp_path, make_record):
        items = [LineItem(f"Item {n} <special> & co", n, "9.99") for n in range(150)]
        output = tmp_path / "long-invoice.pdf"
        PdfRenderStrategy().render(make_record(items=items).document, output)
        assert len(PAGE_OBJECT.findall(output.read_bytes())) > 1

    def test_zero_items(self, tmp_path, make_record):
        output = tmp_path / "empty-invoice.pdf"
        PdfRenderStrategy().render(make_record(items=[]).document, output)
        assert output.exists()

    def test_numeric_label_values(self, tmp_path, sample_record):
        sample_record.document.header[0].value = 20261019
        output = tmp_path / "acme-corp-invoice.pdf"
        PdfRenderStrategy().render(sample_record.document, output)
        assert output.read_bytes().startswith(b"%PDF")


class TestXlsxStrategy:

    def _render(self, tmp_path, record):
        output = tmp_path / "acme-corp-invoice.xlsx"
        XlsxRenderStrategy().render(record.document, output)
        return openpyxl.load_workbook(output).active

    def _row_of(self, worksheet, value):
        for row in worksheet.iter_rows():
            if row[0].value == value:
                return row[0].row
        raise AssertionError(f"{value!r} not found")

    def test_blocks_and_table(self, tmp_path, sample_record):
        ws = self._render(tmp_path, sample_record)

        assert ws.title == "Invoice"
        assert ws["A1"].value == "INVOICE"
        assert ws["B3"].value == "20261019"
        assert ws["B4"].value == "19/10/2026"

        header_row = self._row_of(ws, "Description")
        assert [ws.cell(header_row, col).value for col in (1, 2, 3)] == ["Description", "Quantity", "Total"]

        first = header_row + 1
        assert ws.cell(first, 1).value == "Website redesign"
        assert ws.cell(first, 2).value == 1
        assert ws.cell(first, 3).value == pytest.approx(1200.0)
        assert "$" in ws.cell(first, 3).number_format

        assert ws.cell(first + 2, 2).value is None

        total_row = first + 3
        assert ws.cell(total_row, 2).value == "Total"
        assert ws.cell(total_row, 3).value == pytest.approx(1395.75)

    def test_customer_block(self, tmp_path, sample_record):
        ws = self._render(tmp_path, sample_record)
        to_row = self._row_of(ws, "To")
        assert ws.cell(to_row, 2).value == "Jane Doe\n1 Main Street, Springfield"
        assert ws.cell(to_row + 1, 1).value == "Customer ID"

    def test_numeric_label_values(self, tmp_path, sample_record):
        sample_record.document.header[0].value = 20261019
        sample_record.document.customer[1].value = 42

        ws = self._render(tmp_path, sample_record)

        assert ws["B3"].value == 20261019
        assert ws.cell(self._row_of(ws, "Customer ID"), 2).value == 42


def test_get_strategy():
    assert isinstance(get_strategy("pdf"), PdfRenderStrategy)
    assert isinstance(get_strategy("xlsx"), XlsxRenderStrategy)
    with pytest.raises(ValueError):
        get_strategy("docx")
