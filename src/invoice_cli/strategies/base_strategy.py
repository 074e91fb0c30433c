from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union
from ..models import Cell, InvoiceDocument


def format_value(value: Union[List[str], str, int, float, None]) -> str:
    """Flatten a record value to display text; multi-line values join with newlines."""
    if value is None:
        return ""
    if isinstance(value, list):
        return "\n".join(str(line) for line in value)
    return str(value)


def format_cell(cell: Cell, currency: str) -> str:
    text = format_value(cell.value)
    if cell.price and text:
        return f"{currency}{text}"
    return text


class BaseRenderStrategy(ABC):
    """
    Abstract base class for all document render strategies.

    This class defines the Strategy Pattern interface the renderer adapter
    talks to. A strategy receives the ``data.invoice`` document of a record
    verbatim and is responsible for everything visual: page layout,
    pagination, typography and currency symbol placement.

    Strategies are stateless; one instance can render any number of
    documents.

    Attributes:
        name (str): Key used to select the strategy from configuration
        extension (str): File extension of the produced documents

    Example:
        >>> class TextStrategy(BaseRenderStrategy):
        ...     name = "txt"
        ...     extension = ".txt"
        ...     def render(self, document, output_path):
        ...         output_path.write_text(document.name)
    """

    name: str = ""
    extension: str = ""

    @abstractmethod
    def render(self, document: InvoiceDocument, output_path: Path) -> None:
        """
        Lay out ``document`` and write it to ``output_path``.

        Args:
            document: The invoice document of one record
            output_path: Destination file; its directory already exists

        Returns:
            None. The document is saved to output_path.

        Raises:
            Any backend exception. The renderer adapter wraps it in
            RenderError.
        """
        pass
