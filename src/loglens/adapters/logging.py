"""Python logging handler adapter for loglens.

This adapter bridges Python's standard library logging module to a
LogCatalog, so an application's own log calls become queryable records.
"""

import logging
from datetime import datetime

from loglens.core.catalog import LogCatalog
from loglens.core.models import LogLevel, LogRecord

# Standard logging levels mapped onto the catalog's closed level set
_LEVEL_MAPPING = {
    logging.DEBUG: LogLevel.DEBUG,
    logging.INFO: LogLevel.INFO,
    logging.WARNING: LogLevel.WARN,
    logging.ERROR: LogLevel.ERROR,
    logging.CRITICAL: LogLevel.FATAL,
}


def _map_level(levelno: int) -> LogLevel:
    """Map a logging level number to the nearest LogLevel at or below it."""
    for threshold in sorted(_LEVEL_MAPPING, reverse=True):
        if levelno >= threshold:
            return _LEVEL_MAPPING[threshold]
    return LogLevel.DEBUG


class CatalogHandler(logging.Handler):
    """Logging handler that adds log records to a LogCatalog.

    Session, business and request ids are read from the ``extra`` fields
    ``session_id``, ``business_id`` and ``request_id``.

    Example:
        ```python
        from loglens import CatalogHandler, create_catalog

        catalog = create_catalog()
        logging.getLogger().addHandler(CatalogHandler(catalog))
        logging.getLogger().warning("Invalid asset ID", extra={"session_id": "42111"})
        ```
    """

    def __init__(
        self,
        catalog: LogCatalog,
        default_id: str = "unknown",
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a catalog.

        Args:
            catalog: Catalog receiving the converted records.
            default_id: Id used when a record has no session, business or
                request id in its extra fields.
            level: Minimum logging level handled.
        """
        super().__init__(level)
        self._catalog = catalog
        self._default_id = default_id

    def _extra_id(self, record: logging.LogRecord, key: str) -> str:
        value = getattr(record, key, None)
        return self._default_id if value is None else str(value)

    def emit(self, record: logging.LogRecord) -> None:
        """Convert a logging record and add it to the catalog.

        Args:
            record: The log record to emit.
        """
        entry = LogRecord(
            timestamp=datetime.fromtimestamp(record.created, tz=self._catalog.tz),
            level=_map_level(record.levelno),
            session_id=self._extra_id(record, "session_id"),
            business_id=self._extra_id(record, "business_id"),
            request_id=self._extra_id(record, "request_id"),
            description=record.getMessage(),
        )
        self._catalog.add(entry)
