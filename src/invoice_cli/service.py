import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence
from .components.config_loader import SellerConfigLoader
from .components.record_store import RecordStore, ensure_directory
from .exceptions import MalformedRecord, RecordNotFound, RenderError
from .models import InvoiceRecord, LabeledValue
from .renderer import RendererAdapter
from .settings import AppSettings
from .strategies import get_strategy

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of a render-all run: documents written and per-record errors."""
    generated: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


class InvoiceService:
    """
    Main service for the invoice CLI. It orchestrates the record store and the
    renderer adapter for the create, render-one and render-all actions.
    """
    def __init__(
        self,
        store: RecordStore,
        renderer: RendererAdapter,
        seller: Sequence[LabeledValue],
        currency: str = "$",
    ):
        self.store = store
        self.renderer = renderer
        self.seller = list(seller)
        self.currency = currency

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "InvoiceService":
        """
        Wire up a service from resolved settings.

        Raises:
            InvalidSellerConfig: If the seller configuration file is invalid
            ValueError: If the render format is unknown
        """
        seller = SellerConfigLoader(settings.seller_config).load()
        renderer = RendererAdapter(get_strategy(settings.render_format), settings.output_dir)
        return cls(RecordStore(settings.records_dir), renderer, seller, currency=settings.currency)

    def prepare(self) -> None:
        """Create the record and output directories; failure is fatal for the session."""
        self.store.ensure_directory()
        ensure_directory(self.renderer.output_dir)

    def save_record(self, record: InvoiceRecord) -> Path:
        return self.store.save(record)

    def render_record(self, record: InvoiceRecord) -> Path:
        return self.renderer.render(record)

    def list_records(self) -> List[str]:
        return self.store.list()

    def render_one(self, file_name: str) -> Path:
        """
        Load one record and render it.

        Args:
            file_name: Record file name as returned by :meth:`list_records`

        Returns:
            Path: The generated document

        Raises:
            RecordNotFound: If the record file is missing
            MalformedRecord: If the record file cannot be parsed
            RenderError: If the renderer fails
        """
        record = self.store.load(file_name)
        return self.renderer.render(record)

    def render_all(self) -> BatchResult:
        """
        Render every stored record, one after the other.

        A record that is missing, malformed or fails to render is logged and
        reported in the result; the remaining records are still processed.
        """
        result = BatchResult()
        file_names = self.list_records()
        logger.info(f"Starting document generation for {len(file_names)} records.")

        for file_name in file_names:
            try:
                result.generated.append(self.render_one(file_name))
            except (RecordNotFound, MalformedRecord, RenderError) as e:
                msg = f"{file_name}: {e}"
                logger.error(msg)
                result.errors.append(msg)

        return result
