import json
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer
from typing import List, Optional, Union

DETAIL_COLUMN_COUNT = 3
RECORD_EXTENSIONS = (".json", ".pdf", ".xlsx")


class RecordModel(BaseModel):
    """
    Common base for every part of an invoice record.

    Unknown keys are kept so that a record written by another tool survives a
    load/save cycle unchanged.
    """
    model_config = ConfigDict(extra='allow')


class LabeledValue(RecordModel):
    """
    One label/value pair of the header, customer or seller blocks.

    The value is either a single scalar or an ordered list of lines, as in
    ``{"label": "To", "value": ["Jane Doe", "1 Main Street"]}``. Numbers are
    kept as numbers so that records written by other tools load unchanged.
    """
    label: str
    value: Union[List[str], str, int, float]


class Cell(RecordModel):
    """
    A single cell of the line item table.

    Price cells carry ``price: true`` and hold a decimal string with exactly
    two fraction digits. The quantity cell may hold ``None`` when the entered
    text was not a number.
    """
    value: Optional[Union[int, float, str]] = None
    price: Optional[bool] = None

    @model_serializer(mode='wrap')
    def drop_missing_price(self, handler):
        data = handler(self)
        if self.price is None:
            data.pop('price', None)
        return data


class TotalCell(RecordModel):
    label: str = "Total"
    value: str
    price: bool = True


class InvoiceDetails(RecordModel):
    """The line item table: fixed 3-column header, rows and the total row."""
    header: List[Cell]
    parts: List[List[Cell]] = Field(default_factory=list)
    total: List[TotalCell]

    @field_validator('header')
    @classmethod
    def header_has_three_columns(cls, header: List[Cell]) -> List[Cell]:
        if len(header) != DETAIL_COLUMN_COUNT:
            raise ValueError(f"details header must have {DETAIL_COLUMN_COUNT} columns, got {len(header)}")
        return header

    @field_validator('parts')
    @classmethod
    def rows_have_three_cells(cls, parts: List[List[Cell]]) -> List[List[Cell]]:
        for index, row in enumerate(parts):
            if len(row) != DETAIL_COLUMN_COUNT:
                raise ValueError(f"line item {index + 1} must have {DETAIL_COLUMN_COUNT} cells, got {len(row)}")
        return parts

    @field_validator('total')
    @classmethod
    def single_total_row(cls, total: List[TotalCell]) -> List[TotalCell]:
        if len(total) != 1:
            raise ValueError(f"details total must hold exactly one row, got {len(total)}")
        return total

    @property
    def total_value(self) -> str:
        return self.total[0].value


class InvoiceDocument(RecordModel):
    """
    The document handed to a render strategy.

    Mirrors the ``data.invoice`` object of a record file:
    - name: the title printed on the document ("INVOICE")
    - header: invoice number and issue date
    - currency: symbol placed in front of every price cell
    - customer / seller: the two party blocks
    - details: the line item table
    """
    name: str
    header: List[LabeledValue]
    currency: str
    customer: List[LabeledValue]
    seller: List[LabeledValue]
    details: InvoiceDetails


class RecordData(RecordModel):
    invoice: InvoiceDocument


class InvoiceRecord(RecordModel):
    """
    One persisted invoice.

    ``file_name`` (``fileName`` on disk) is the record identity shared by the
    record store and the renderers. It is kept without an extension; files
    written by older versions stored it with ``.pdf`` and are normalised on
    load.

    Example:
        >>> record = InvoiceRecord.model_validate(json.loads(text))
        >>> record.file_name
        'acme-corp-invoice'
    """
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias='fileName')
    data: RecordData

    @field_validator('file_name')
    @classmethod
    def strip_extension(cls, file_name: str) -> str:
        for extension in RECORD_EXTENSIONS:
            if file_name.endswith(extension):
                return file_name[:-len(extension)]
        return file_name

    @property
    def document(self) -> InvoiceDocument:
        return self.data.invoice

    def to_json(self) -> str:
        """Serialize the record in the on-disk format (2-space indented JSON)."""
        return json.dumps(self.model_dump(mode='json', by_alias=True), indent=2, ensure_ascii=False)
