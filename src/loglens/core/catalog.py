"""Log catalog: an indexed store configured for log queries."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo

from loglens.core.errors import InvalidRangeError, ParseError
from loglens.core.models import LogRecord
from loglens.core.parsing import parse_timestamp, try_parse_line
from loglens.core.ports import RecordStorePort

logger = logging.getLogger(__name__)

LEVEL_INDEX = "level"
BUSINESS_INDEX = "business_id"
SESSION_INDEX = "session_id"


@dataclass
class IngestReport:
    """Outcome of ingesting a batch of lines.

    Attributes:
        ingested: Number of records added to the catalog.
        failures: One ParseError per rejected line, in line order.
    """

    ingested: int = 0
    failures: list[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no line was rejected."""
        return not self.failures

    @property
    def total(self) -> int:
        """Number of non-blank lines seen."""
        return self.ingested + len(self.failures)


class LogCatalog:
    """Queryable in-memory collection of log records.

    Records are indexed by level, business id and session id. Date range
    queries scan all records.

    The catalog defines its three indexes on the store it is given, so the
    store must be empty and have no index with the same names.

    Args:
        store: Empty storage adapter implementing RecordStorePort.
        tz: Timezone the log timestamps are written in (default UTC). Also
            used for naive datetimes and string bounds in range queries.
    """

    def __init__(
        self, store: RecordStorePort[LogRecord], tz: tzinfo = timezone.utc
    ) -> None:
        self.tz = tz
        self._store = store
        self._store.define_index(LEVEL_INDEX, lambda r: r.level.value)
        self._store.define_index(BUSINESS_INDEX, lambda r: r.business_id)
        self._store.define_index(SESSION_INDEX, lambda r: r.session_id)

    def ingest(self, raw_text: str) -> IngestReport:
        """Parse and store every valid line of a text blob.

        Lines are split on line feeds only, so form feeds or Unicode line
        separators inside a description stay part of it. Blank lines are
        skipped. Malformed lines are collected in the report and do not
        stop the batch.
        """
        return self.ingest_lines(raw_text.split("\n"))

    def ingest_lines(self, lines: Iterable[str]) -> IngestReport:
        """Parse and store every valid line from an iterable of lines."""
        report = IngestReport()
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            result = try_parse_line(line, self.tz, line_number)
            if result.record is None:
                logger.warning("skipping malformed log line: %s", result.error)
                report.failures.append(result.error)
                continue
            self._store.insert(result.record)
            report.ingested += 1
        logger.info(
            "ingested %d records, rejected %d lines",
            report.ingested,
            len(report.failures),
        )
        return report

    def add(self, record: LogRecord) -> None:
        """Store an already-built record."""
        self._store.insert(record)

    def get_logs_by_log_level(self, level: str) -> list[LogRecord]:
        """Return records with the given level (case-insensitive)."""
        return self._store.lookup(LEVEL_INDEX, str(level).upper())

    def get_logs_by_business(self, business_id: str) -> list[LogRecord]:
        """Return records for the given business id."""
        return self._store.lookup(BUSINESS_INDEX, business_id)

    def get_logs_by_session(self, session_id: str) -> list[LogRecord]:
        """Return records for the given session id."""
        return self._store.lookup(SESSION_INDEX, session_id)

    def get_logs_by_date_range(
        self, start: datetime | str, end: datetime | str
    ) -> list[LogRecord]:
        """Return records with ``start <= timestamp <= end``.

        Results keep insertion order, which need not be chronological.

        Args:
            start: Lower bound, inclusive.
            end: Upper bound, inclusive.

        Raises:
            InvalidRangeError: If ``start`` is after ``end`` or a string
                bound cannot be parsed.
        """
        lower = self._as_instant(start)
        upper = self._as_instant(end)
        if lower > upper:
            raise InvalidRangeError(f"range start {lower} is after end {upper}")
        return self._store.scan(lambda r: lower <= r.timestamp <= upper)

    def records(self) -> list[LogRecord]:
        """All records in insertion order."""
        return list(self._store)

    def _as_instant(self, value: datetime | str) -> datetime:
        if isinstance(value, str):
            try:
                return parse_timestamp(value, self.tz)
            except ValueError as e:
                raise InvalidRangeError(f"invalid range bound {value!r}") from e
        if value.tzinfo is None:
            return value.replace(tzinfo=self.tz)
        return value

    def __len__(self) -> int:
        return len(self._store)
