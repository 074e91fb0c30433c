from .service import InvoiceService, BatchResult
from .models import InvoiceRecord, InvoiceDocument
from .exceptions import (
    InvoiceCliError,
    DirectoryCreationFailure,
    RecordNotFound,
    RecordWriteError,
    MalformedRecord,
    RenderError,
    InvalidSellerConfig,
)

__all__ = [
    "InvoiceService", "BatchResult", "InvoiceRecord", "InvoiceDocument",
    "InvoiceCliError", "DirectoryCreationFailure", "RecordNotFound", "RecordWriteError",
    "MalformedRecord", "RenderError", "InvalidSellerConfig",
]
