"""Error taxonomy for loglens.

Every error derives from LogLensError and from the closest builtin
exception, so callers can catch either.
"""


class LogLensError(Exception):
    """Base class for all loglens errors."""


class ParseError(LogLensError, ValueError):
    """A log line does not match the log grammar.

    Attributes:
        line: The offending line, without its trailing newline.
        reason: Short description of what is wrong with it.
        line_number: 1-based position of the line in its batch, if known.
    """

    def __init__(self, line: str, reason: str, line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"{where}: {reason}: {line!r}")


class DuplicateIndexError(LogLensError, ValueError):
    """An index with the same name is already defined."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"index {name!r} already defined")


class LateIndexError(LogLensError, RuntimeError):
    """An index was defined after records were inserted."""

    def __init__(self, name: str, size: int) -> None:
        self.name = name
        super().__init__(
            f"cannot define index {name!r}: store already holds {size} records"
        )


class UnknownIndexError(LogLensError, LookupError):
    """A lookup named an index that was never defined."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown index {name!r}")


class InvalidRangeError(LogLensError, ValueError):
    """A range query received bounds that do not form a range."""


class InvalidSampleError(LogLensError, ValueError):
    """A sample is not a finite, non-negative number."""


class NoSamplesError(LogLensError, LookupError):
    """A statistic was requested before any sample was observed."""

    def __init__(self, message: str = "no samples observed") -> None:
        super().__init__(message)
