import json
import logging
import os
from pathlib import Path
from typing import List
from pydantic import ValidationError
from ..models import InvoiceRecord
from ..exceptions import DirectoryCreationFailure, MalformedRecord, RecordNotFound, RecordWriteError

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".json"


def ensure_directory(directory: Path) -> Path:
    """
    Create ``directory`` and its parents if needed.

    Raises:
        DirectoryCreationFailure: For any error other than the directory
                                  already existing
    """
    directory = Path(directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationFailure(f"Could not create directory {directory}: {e}") from e
    return directory


class RecordStore:
    """
    Lists, loads and saves invoice records in one directory.

    Each record lives in ``<fileName>.json``. The store keeps no index and no
    cache: every call goes to the filesystem, so files added or removed by
    hand are picked up on the next call.

    Attributes:
        records_dir (Path): Directory holding the record files

    Example:
        >>> store = RecordStore("invoices/")
        >>> store.save(record)
        PosixPath('invoices/acme-corp-invoice.json')
        >>> store.load("acme-corp-invoice.json").file_name
        'acme-corp-invoice'
    """

    def __init__(self, records_dir: Path):
        self.records_dir = Path(records_dir)

    def ensure_directory(self) -> Path:
        return ensure_directory(self.records_dir)

    def path_for(self, file_name: str) -> Path:
        """Return the record path for a bare record name or a ``.json`` file name."""
        if not file_name.endswith(RECORD_SUFFIX):
            file_name = f"{file_name}{RECORD_SUFFIX}"
        return self.records_dir / file_name

    def list(self) -> List[str]:
        """
        Return the record file names in directory listing order.

        The order is whatever the filesystem yields; sort the result if a
        stable order matters.
        """
        self.ensure_directory()
        return [
            entry.name for entry in os.scandir(self.records_dir)
            if entry.is_file() and entry.name.endswith(RECORD_SUFFIX)
        ]

    def load(self, file_name: str) -> InvoiceRecord:
        """
        Load and validate one record.

        Args:
            file_name: Record name, with or without the ``.json`` suffix

        Returns:
            InvoiceRecord: The parsed record

        Raises:
            RecordNotFound: If the record file does not exist
            MalformedRecord: If the file is not valid JSON or does not match
                             the record structure
        """
        record_path = self.path_for(file_name)

        try:
            with open(record_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise RecordNotFound(f"Invoice record not found: {record_path}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedRecord(f"Invalid JSON in invoice record {record_path}: {e}") from e

        try:
            record = InvoiceRecord.model_validate(data)
        except ValidationError as e:
            raise MalformedRecord(f"Invoice record {record_path} is invalid: {e}") from e

        logger.debug(f"Loaded record '{record.file_name}' from {record_path}")
        return record

    def save(self, record: InvoiceRecord) -> Path:
        """
        Write ``record`` to ``<fileName>.json``, replacing any existing file.

        Returns:
            Path: The written record file

        Raises:
            RecordWriteError: If the file cannot be written
        """
        self.ensure_directory()
        record_path = self.path_for(record.file_name)
        if record_path.exists():
            logger.warning(f"Overwriting existing invoice record {record_path}")

        try:
            with open(record_path, 'w', encoding='utf-8') as f:
                f.write(record.to_json())
        except OSError as e:
            raise RecordWriteError(f"Could not write invoice record {record_path}: {e}") from e

        logger.info(f"Saved invoice record to {record_path}")
        return record_path
