#!/usr/bin/env python3
"""
Cell Operations - Clean Cell Management
Single responsibility: Direct cell value and property operations

This module provides a small object-oriented interface for writing invoice
values into Excel worksheets. It encapsulates type handling so the xlsx
render strategy only deals with layout.

The CellOperations class provides:
- Safe cell value writing with type normalization
- Row writes for table data
- Price cells stored as numbers with a currency number format
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional
from openpyxl.worksheet.worksheet import Worksheet
from openpyxl.cell import Cell
from openpyxl.styles import Font


class CellOperations:
    """
    Focused cell operations for invoice worksheets.

    Attributes:
        currency (str): Currency marker used in price number formats

    Example:
        >>> ops = CellOperations(currency="$")
        >>> cell = ops.set_cell_value(worksheet, 1, 1, "INVOICE", bold=True)
        >>> cell = ops.set_price_value(worksheet, 5, 3, "12.50")
    """

    def __init__(self, currency: str = "$"):
        self.currency = currency

    @property
    def price_format(self) -> str:
        currency = self.currency.replace('"', '')
        return f'"{currency}"#,##0.00'

    def set_cell_value(
        self,
        worksheet: Worksheet,
        row: int,
        col: int,
        value: Any,
        bold: bool = False
    ) -> Cell:
        """
        Set cell value with proper type handling.

        Args:
            worksheet: Target worksheet to modify
            row: Row number (1-based indexing)
            col: Column number (1-based indexing)
            value: Value to set in the cell (any type)
            bold: Whether to use a bold font

        Returns:
            The modified Cell object for further operations
        """
        cell = worksheet.cell(row=row, column=col)
        cell.value = self._normalize_value(value)
        if bold:
            cell.font = Font(bold=True)
        return cell

    def set_price_value(self, worksheet: Worksheet, row: int, col: int, value: Any, bold: bool = False) -> Cell:
        """Store a decimal string as a number formatted with the currency; other text is kept as is."""
        amount = self._to_number(value)
        if amount is None:
            return self.set_cell_value(worksheet, row, col, value, bold=bold)
        cell = self.set_cell_value(worksheet, row, col, amount, bold=bold)
        cell.number_format = self.price_format
        return cell

    def set_row_values(self, worksheet: Worksheet, row: int, start_col: int, values: Iterable[Any], bold: bool = False) -> List[Cell]:
        """Set consecutive cells of one row"""
        return [
            self.set_cell_value(worksheet, row, start_col + offset, value, bold=bold)
            for offset, value in enumerate(values)
        ]

    def _normalize_value(self, value: Any) -> Any:
        """Normalize values for Excel cells"""
        if value is None:
            return None
        elif isinstance(value, str):
            return value.strip() if value.strip() else None
        elif isinstance(value, (int, float)):
            return value
        elif isinstance(value, list):
            return "\n".join(str(line) for line in value)
        else:
            return str(value)

    def _to_number(self, value: Any) -> Optional[float]:
        if isinstance(value, (int, float)):
            return value
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            return None
        return float(amount) if amount.is_finite() else None
