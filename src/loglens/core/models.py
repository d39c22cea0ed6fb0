"""Core domain models for indexed log records."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class LogLevel(StrEnum):
    """Closed set of severities accepted in a log line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"


@dataclass(frozen=True)
class LogRecord:
    """A single parsed log line.

    Attributes:
        timestamp: Timezone-aware instant the line was written.
        level: Severity of the entry.
        session_id: Session the entry belongs to (SID).
        business_id: Business the entry belongs to (BID).
        request_id: Request that produced the entry (RID).
        description: Free text, without the surrounding quotes.
    """

    timestamp: datetime
    level: LogLevel
    session_id: str
    business_id: str
    request_id: str
    description: str


@dataclass(frozen=True)
class StatSnapshot:
    """Point-in-time copy of a StatAccumulator.

    Attributes:
        count: Number of observed samples.
        min: Smallest observed sample.
        max: Largest observed sample.
        mean: Arithmetic mean of all samples.
    """

    count: int
    min: float
    max: float
    mean: float
