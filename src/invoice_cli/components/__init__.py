from .config_loader import SellerConfigLoader, DEFAULT_SELLER
from .record_store import RecordStore, ensure_directory, RECORD_SUFFIX

__all__ = ["SellerConfigLoader", "DEFAULT_SELLER", "RecordStore", "ensure_directory", "RECORD_SUFFIX"]
