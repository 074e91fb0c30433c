from pathlib import Path
from typing import Optional
from pydantic import BaseModel

RECORDS_DIR_NAME = "invoices"
OUTPUT_DIR_NAME = "generated_invoices"
SELLER_CONFIG_NAME = "seller.json"


class AppSettings(BaseModel):
    """
    Resolved runtime configuration of one CLI session.

    Both working directories hang off ``root`` under fixed names unless they
    are overridden explicitly.

    Example:
        >>> settings = AppSettings.from_root("/srv/billing", render_format="xlsx")
        >>> settings.records_dir
        PosixPath('/srv/billing/invoices')
    """
    root: Path
    records_dir: Path
    output_dir: Path
    seller_config: Optional[Path] = None
    currency: str = "$"
    render_format: str = "pdf"

    @classmethod
    def from_root(
        cls,
        root: Path,
        records_dir: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        seller_config: Optional[Path] = None,
        currency: str = "$",
        render_format: str = "pdf",
    ) -> "AppSettings":
        root = Path(root)
        if seller_config is None and (root / SELLER_CONFIG_NAME).exists():
            seller_config = root / SELLER_CONFIG_NAME
        return cls(
            root=root,
            records_dir=Path(records_dir) if records_dir else root / RECORDS_DIR_NAME,
            output_dir=Path(output_dir) if output_dir else root / OUTPUT_DIR_NAME,
            seller_config=seller_config,
            currency=currency,
            render_format=render_format,
        )
