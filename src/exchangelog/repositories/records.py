"""Exchange records file repository."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from exchangelog.models.exchange import Exchange
from exchangelog.models.records import ExchangeRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(ExchangeRecord | list[ExchangeRecord])


class RecordLoadError(Exception):
    """Raised when a records file cannot be loaded."""

    def __init__(self, path: Path | str, reason: str, original_error: Exception | None = None):
        self.path = Path(path)
        self.reason = reason
        self.original_error = original_error
        message = f"""Cannot load exchange records from {self.path}

Reason: {reason}

Records files hold one JSON object or a list of objects, e.g.
  {{"exchange_id": "ID-1", "in": {{"headers": {{}}, "body": "Hello"}}}}"""
        super().__init__(message)


class RecordRepository:
    """Repository for exchange records stored as JSON."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._records: list[ExchangeRecord] | None = None

    def close(self) -> None:
        """Drop any records held in memory."""
        self._records = None

    def __enter__(self) -> "RecordRepository":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def exists(self) -> bool:
        """Check if the records file exists."""
        return self.path.is_file()

    def get_records(self) -> list[ExchangeRecord]:
        """Read and validate the records file.

        Returns:
            List of exchange records, in file order
        """
        if self._records is not None:
            return self._records
        if not self.exists():
            raise RecordLoadError(self.path, "file not found")

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise RecordLoadError(self.path, e.strerror or str(e), e) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RecordLoadError(self.path, f"invalid JSON: {e}", e) from e

        try:
            parsed = _records_adapter.validate_python(data)
        except ValidationError as e:
            raise RecordLoadError(self.path, f"invalid record: {e}", e) from e

        self._records = parsed if isinstance(parsed, list) else [parsed]
        logger.debug("Loaded %d records from %s", len(self._records), self.path)
        return self._records

    def load(self) -> list[Exchange]:
        """Load the records file as exchanges.

        Each call builds fresh exchanges, so stream bodies start unread.

        Returns:
            List of exchanges
        """
        return [record.to_exchange() for record in self.get_records()]
