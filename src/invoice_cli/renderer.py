import logging
from pathlib import Path
from .components.record_store import ensure_directory
from .exceptions import RenderError
from .models import InvoiceRecord
from .strategies import BaseRenderStrategy

logger = logging.getLogger(__name__)


class RendererAdapter:
    """
    Connects invoice records to a render strategy.

    The adapter owns no layout logic. It derives the output path from the
    record's file name, makes sure the output directory exists, hands the
    record document to the strategy and turns any backend failure into a
    :class:`RenderError`.

    Attributes:
        strategy (BaseRenderStrategy): Backend producing the documents
        output_dir (Path): Directory receiving the documents
    """

    def __init__(self, strategy: BaseRenderStrategy, output_dir: Path):
        self.strategy = strategy
        self.output_dir = Path(output_dir)

    def output_path_for(self, record: InvoiceRecord) -> Path:
        return self.output_dir / f"{record.file_name}{self.strategy.extension}"

    def render(self, record: InvoiceRecord) -> Path:
        """
        Render ``record`` into the output directory.

        Returns:
            Path: The written document

        Raises:
            DirectoryCreationFailure: If the output directory cannot be created
            RenderError: If the strategy fails for any reason
        """
        ensure_directory(self.output_dir)
        output_path = self.output_path_for(record)
        logger.debug(f"Rendering '{record.file_name}' with {type(self.strategy).__name__}")

        try:
            self.strategy.render(record.document, output_path)
        except Exception as e:
            raise RenderError(f"Failed to render {output_path.name}: {e}") from e

        logger.info(f"Invoice saved as {output_path}")
        return output_path
