"""NDJSON export of log records.

Objects keep the field order of the log line grammar, so a record reads
the same way in both forms.
"""

import json
from collections.abc import Iterable, Iterator
from typing import Any

from loglens.core.models import LogRecord


def record_to_dict(record: LogRecord) -> dict[str, Any]:
    """Map a record to JSON-safe fields in log line order."""
    return {
        "timestamp": record.timestamp.isoformat(),
        "level": record.level.value,
        "session_id": record.session_id,
        "business_id": record.business_id,
        "request_id": record.request_id,
        "description": record.description,
    }


def iter_ndjson(records: Iterable[LogRecord]) -> Iterator[str]:
    """Yield one newline-terminated JSON line per record.

    Suitable for writing large query results to a stream without
    building the whole payload in memory.
    """
    for record in records:
        yield json.dumps(record_to_dict(record)) + "\n"


def encode_records(records: Iterable[LogRecord]) -> str:
    """Encode records as a single NDJSON string (empty if no records)."""
    return "".join(iter_ndjson(records))
