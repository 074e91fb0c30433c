"""
Record construction helpers.

Everything needed to turn the answers of the interactive session into an
:class:`~invoice_cli.models.InvoiceRecord`: file name derivation, invoice
number and issue date encoding, price normalisation and the total row.
All functions here are pure; the seller block and the currency come in as
arguments instead of module state.
"""

import datetime
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Iterable, List, Optional, Sequence

from .models import (
    Cell,
    InvoiceDetails,
    InvoiceDocument,
    InvoiceRecord,
    LabeledValue,
    RecordData,
    TotalCell,
)

TITLE = "INVOICE"
FILE_NAME_SUFFIX = "-invoice"
DETAIL_COLUMNS = ("Description", "Quantity", "Total")
INVOICE_NUMBER_FORMAT = "%Y%m%d"
ISSUE_DATE_FORMAT = "%d/%m/%Y"
CENTS = Decimal("0.01")
TOTAL_PRECISION = 60

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")
_PATH_SEPARATORS = re.compile(r"[/\\]")


@dataclass
class CustomerInfo:
    name: str
    address: str
    customer_id: str


@dataclass
class LineItem:
    description: str
    quantity: Optional[int]
    total: str


def slugify(name: str) -> str:
    """
    Lowercase ``name`` and join its words with hyphens.

    Path separators count as word breaks, so the slug always names a file
    directly inside the record directory: ``"AC/DC"`` gives ``"ac-dc"``.
    """
    return "-".join(_PATH_SEPARATORS.sub(" ", name).split()).lower()


def derive_file_name(company_name: str) -> str:
    """
    Derive the record identity from the company name.

    Example:
        >>> derive_file_name("Acme Corp ")
        'acme-corp-invoice'
    """
    return f"{slugify(company_name)}{FILE_NAME_SUFFIX}"


def generate_invoice_number(issued_on: datetime.date) -> str:
    # Same-day invoices share a number.
    return issued_on.strftime(INVOICE_NUMBER_FORMAT)


def format_issue_date(issued_on: datetime.date) -> str:
    return issued_on.strftime(ISSUE_DATE_FORMAT)


def to_price(value) -> str:
    """
    Normalise an amount to a decimal string with two fraction digits.

    Raises:
        ValueError: If ``value`` is not a finite decimal number.
    """
    text = str(value).strip()
    try:
        amount = Decimal(text)
        if not amount.is_finite():
            raise ValueError(f"Not a decimal amount: {text!r}")
        return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        # quantize fails once the amount has more digits than the context precision
        raise ValueError(f"Not a decimal amount: {text!r}") from e


def parse_quantity(text: str) -> Optional[int]:
    """
    Read the leading integer of ``text``.

    ``"12"`` and ``"12 boxes"`` both give 12. Text without a leading integer
    gives ``None``, which is stored as ``null`` in the record.
    """
    match = _LEADING_INTEGER.match(text)
    if not match:
        return None
    return int(match.group(1))


def compute_total(parts: Iterable[Sequence[Cell]]) -> str:
    """Sum the total column of every row; an empty table totals ``"0.00"``."""
    prices = [Decimal(to_price(row[2].value)) for row in parts]
    with localcontext() as context:
        context.prec = TOTAL_PRECISION
        total = sum(prices, Decimal("0"))
        return str(total.quantize(CENTS, rounding=ROUND_HALF_UP))


def build_details(items: Iterable[LineItem]) -> InvoiceDetails:
    parts = [
        [
            Cell(value=item.description),
            Cell(value=item.quantity),
            Cell(value=to_price(item.total), price=True),
        ]
        for item in items
    ]
    return InvoiceDetails(
        header=[Cell(value=column) for column in DETAIL_COLUMNS],
        parts=parts,
        total=[TotalCell(label="Total", value=compute_total(parts), price=True)],
    )


def build_customer(customer: CustomerInfo) -> List[LabeledValue]:
    return [
        LabeledValue(label="To", value=[customer.name, customer.address]),
        LabeledValue(label="Customer ID", value=customer.customer_id),
    ]


def build_invoice_record(
    company_name: str,
    customer: CustomerInfo,
    items: Iterable[LineItem],
    seller: Sequence[LabeledValue],
    currency: str = "$",
    issued_on: Optional[datetime.date] = None,
) -> InvoiceRecord:
    """
    Assemble a complete invoice record.

    Args:
        company_name: Name the record file is derived from.
        customer: Customer block answers.
        items: Line items in entry order.
        seller: Seller block from configuration; copied into the record.
        currency: Currency marker printed in front of prices.
        issued_on: Creation date (default: today). Drives the invoice number
                   and the issue date.

    Returns:
        InvoiceRecord: A record ready to be saved and rendered.
    """
    issued_on = issued_on or datetime.date.today()
    document = InvoiceDocument(
        name=TITLE,
        header=[
            LabeledValue(label="number", value=generate_invoice_number(issued_on)),
            LabeledValue(label="issue date", value=format_issue_date(issued_on)),
        ],
        currency=currency,
        customer=build_customer(customer),
        seller=[entry.model_copy(deep=True) for entry in seller],
        details=build_details(items),
    )
    return InvoiceRecord(file_name=derive_file_name(company_name), data=RecordData(invoice=document))
