"""loglens - indexed in-memory log queries and constant-memory profiling."""

from loglens.adapters.logging import CatalogHandler
from loglens.adapters.storage.indexed import IndexedStore, create_catalog
from loglens.core.catalog import IngestReport, LogCatalog
from loglens.core.encoding.ndjson import encode_records
from loglens.core.errors import (
    DuplicateIndexError,
    InvalidRangeError,
    InvalidSampleError,
    LateIndexError,
    LogLensError,
    NoSamplesError,
    ParseError,
    UnknownIndexError,
)
from loglens.core.models import LogLevel, LogRecord, StatSnapshot
from loglens.core.parsing import (
    ParseResult,
    format_line,
    parse_line,
    parse_timestamp,
    try_parse_line,
)
from loglens.core.ports import RecordStorePort
from loglens.core.profiling import (
    AsyncProfiledFunction,
    ProfiledFunction,
    timed,
    wrap,
)
from loglens.core.stats import StatAccumulator

__all__ = [
    # Models
    "LogLevel",
    "LogRecord",
    "StatSnapshot",
    # Errors
    "DuplicateIndexError",
    "InvalidRangeError",
    "InvalidSampleError",
    "LateIndexError",
    "LogLensError",
    "NoSamplesError",
    "ParseError",
    "UnknownIndexError",
    # Parsing
    "ParseResult",
    "format_line",
    "parse_line",
    "parse_timestamp",
    "try_parse_line",
    # Storage
    "IndexedStore",
    "RecordStorePort",
    "create_catalog",
    # Catalog
    "IngestReport",
    "LogCatalog",
    "encode_records",
    "CatalogHandler",
    # Profiling
    "AsyncProfiledFunction",
    "ProfiledFunction",
    "StatAccumulator",
    "timed",
    "wrap",
]
