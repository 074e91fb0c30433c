class InvoiceCliError(Exception):
    """
    Base exception class for all invoice CLI errors.

    Every failure raised by the store, the renderers and the configuration
    loader inherits from this class, so the command loop can catch one type
    at each action boundary and report it to the user.

    Example:
        >>> try:
        ...     service.render_one("acme-corp-invoice.json")
        ... except InvoiceCliError as e:
        ...     print(f"Could not generate the document: {e}")
    """
    pass

class DirectoryCreationFailure(InvoiceCliError):
    """
    Raised when a working directory cannot be created.

    An already existing directory is not a failure. Any other error from the
    filesystem (permissions, a regular file in the way) is fatal: the CLI
    cannot store records or documents without its directories.
    """
    pass

class RecordNotFound(InvoiceCliError):
    """
    Raised when a record file does not exist in the record directory.

    Example:
        Record directory: invoices/
        File name: "acme-corp-invoice.json"
        If invoices/acme-corp-invoice.json is missing, RecordNotFound is raised.
    """
    pass

class RecordWriteError(InvoiceCliError):
    """
    Raised when a record file cannot be written to the record directory.

    The filesystem error (permissions, disk full) is
    chained as ``__cause__``. Nothing is rendered for a record that was not
    saved.
    """
    pass

class MalformedRecord(InvoiceCliError):
    """
    Raised when a record file exists but cannot be used.

    This exception is raised when:
    - The file does not contain valid JSON
    - The JSON does not match the invoice record structure
    - A line item row or the table header does not have exactly 3 cells
    """
    pass

class RenderError(InvoiceCliError):
    """
    Raised when a render strategy fails to produce a document.

    The backend exception is chained as ``__cause__``. Render errors
    are caught and logged by the service; they never touch the record
    directory.
    """
    pass

class InvalidSellerConfig(InvoiceCliError):
    """
    Raised when the seller configuration file is found but is invalid.

    This exception is raised when:
    - The configuration file contains invalid JSON
    - The entries are not a list of ``{"label": ..., "value": ...}`` objects
    """
    pass
