"""Strict parser for the structured log line grammar.

A valid line looks like::

    2012-09-13 16:04:22 DEBUG SID:34523 BID:1329 RID:65d33 'Starting new session'
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from loglens.core.errors import ParseError
from loglens.core.models import LogLevel, LogRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

LINE_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2}) "
    r"(?P<time>\d{2}:\d{2}:\d{2}) "
    r"(?P<level>[A-Za-z]+) "
    r"SID:(?P<sid>[A-Za-z0-9]+) "
    r"BID:(?P<bid>[A-Za-z0-9]+) "
    r"RID:(?P<rid>[A-Za-z0-9]+) "
    r"'(?P<description>.*)'$"
)

_LEVELS = {level.value: level for level in LogLevel}


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one line: either a record or an error."""

    record: LogRecord | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        """True when the line produced a record."""
        return self.record is not None


def parse_timestamp(text: str, tz: tzinfo = timezone.utc) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` string into an aware datetime.

    Args:
        text: Date and time separated by a single space.
        tz: Timezone the wall-clock time is expressed in (default UTC).

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If the text is not a valid calendar date and time.
    """
    return datetime.strptime(text, TIMESTAMP_FORMAT).replace(tzinfo=tz)


def parse_line(
    line: str,
    tz: tzinfo = timezone.utc,
    line_number: int | None = None,
) -> LogRecord:
    """Parse a single log line into a LogRecord.

    Args:
        line: One line of text; a trailing newline is ignored.
        tz: Timezone the timestamps are written in (default UTC).
        line_number: Position of the line in its batch, used in errors.

    Returns:
        The parsed LogRecord.

    Raises:
        ParseError: If the line does not match the grammar, carries an
            impossible date or time, or names an unknown level.
    """
    stripped = line.rstrip("\r\n")
    match = LINE_PATTERN.match(stripped)
    if match is None:
        raise ParseError(stripped, "does not match log grammar", line_number)

    level = _LEVELS.get(match["level"])
    if level is None:
        raise ParseError(stripped, f"unknown level {match['level']!r}", line_number)

    try:
        timestamp = parse_timestamp(f"{match['date']} {match['time']}", tz)
    except ValueError as e:
        raise ParseError(stripped, f"invalid timestamp ({e})", line_number) from e

    return LogRecord(
        timestamp=timestamp,
        level=level,
        session_id=match["sid"],
        business_id=match["bid"],
        request_id=match["rid"],
        description=match["description"],
    )


def try_parse_line(
    line: str,
    tz: tzinfo = timezone.utc,
    line_number: int | None = None,
) -> ParseResult:
    """Parse a line without raising on malformed input.

    Returns:
        ParseResult holding the record on success or the ParseError
        on failure.
    """
    try:
        return ParseResult(record=parse_line(line, tz, line_number))
    except ParseError as e:
        return ParseResult(error=e)


def format_line(record: LogRecord) -> str:
    """Serialize a record back into the log grammar.

    The timestamp is written in the record's own timezone, so a line
    parsed with a given ``tz`` formats back to the same text.
    """
    return (
        f"{record.timestamp.strftime(TIMESTAMP_FORMAT)} {record.level.value} "
        f"SID:{record.session_id} BID:{record.business_id} "
        f"RID:{record.request_id} '{record.description}'"
    )
