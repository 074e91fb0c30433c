import json
import logging
from pathlib import Path
from typing import List, Optional
from pydantic import TypeAdapter, ValidationError
from ..models import LabeledValue
from ..exceptions import InvalidSellerConfig

logger = logging.getLogger(__name__)

DEFAULT_SELLER = (
    {"label": "From", "value": ["YOUR NAME", "YOUR ADDRESS"]},
    {"label": "RELEVANT REGISTRATION NUMBER", "value": "YOUR REGISTRATION NUMBER"},
    {"label": "Bank Account", "value": "YOUR BANK ACCOUNT"},
)

_SELLER_ADAPTER = TypeAdapter(List[LabeledValue])


class SellerConfigLoader:
    """
    Loads and validates the seller block printed on every invoice.

    The seller block is a JSON list of label/value pairs, for example::

        [
          {"label": "From", "value": ["Jane Doe", "1 Main Street"]},
          {"label": "Bank Account", "value": "DE00 1234 5678"}
        ]

    When no configuration file exists the built-in placeholder block is
    returned, so a fresh checkout still produces complete documents.

    Attributes:
        config_path (Optional[Path]): Seller configuration file, if any

    Example:
        >>> loader = SellerConfigLoader("seller.json")
        >>> seller = loader.load()
        >>> seller[0].label
        'From'
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else None

    def load(self) -> List[LabeledValue]:
        """
        Load the seller block.

        Returns:
            List[LabeledValue]: Seller entries in file order

        Raises:
            InvalidSellerConfig: If the file exists but contains invalid JSON
                                 or is not a list of label/value objects
        """
        if self.config_path is None or not self.config_path.exists():
            logger.debug("No seller configuration found, using placeholder seller block")
            return _SELLER_ADAPTER.validate_python(list(DEFAULT_SELLER))

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            seller = _SELLER_ADAPTER.validate_python(data)
        except json.JSONDecodeError as e:
            raise InvalidSellerConfig(f"Invalid JSON in seller config {self.config_path}: {e}") from e
        except ValidationError as e:
            raise InvalidSellerConfig(f"Seller config {self.config_path} is invalid: {e}") from e

        logger.info(f"Loaded seller block from {self.config_path}")
        return seller
