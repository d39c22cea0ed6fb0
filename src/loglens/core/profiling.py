"""Profiling wrappers that feed call durations into a StatAccumulator.

Durations are recorded in milliseconds.
"""

import functools
import inspect
import logging
import time
from collections.abc import Awaitable, Callable, Generator
from contextlib import contextmanager
from typing import Any, Generic, ParamSpec, TypeVar

from loglens.core.errors import InvalidSampleError
from loglens.core.stats import StatAccumulator

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

Clock = Callable[[], float]


@contextmanager
def timed(
    accumulator: StatAccumulator,
    *,
    record_failures: bool = True,
    clock: Clock = time.perf_counter,
) -> Generator[None]:
    """Context manager that observes the elapsed time of its block.

    Args:
        accumulator: Receives the elapsed time in milliseconds.
        record_failures: Whether a block that raises is still recorded.
        clock: Monotonic clock returning seconds.
    """
    start = clock()
    try:
        yield
    except BaseException:
        if record_failures:
            # the block's own exception always wins over a bad sample
            try:
                accumulator.observe((clock() - start) * 1000)
            except InvalidSampleError as e:
                logger.warning("dropping sample for failed block: %s", e)
        raise
    accumulator.observe((clock() - start) * 1000)


class _ProfiledBase:
    """State and accessors shared by sync and async profiled callables."""

    def __init__(
        self,
        fn: Callable[..., Any],
        *,
        name: str | None = None,
        record_failures: bool = True,
        clock: Clock = time.perf_counter,
    ) -> None:
        """Initialize the wrapper around a target callable.

        Args:
            fn: The callable to profile.
            name: Label used in reports (default: the target's qualified name).
            record_failures: Whether calls that raise are still timed and
                recorded (default True).
            clock: Monotonic clock returning seconds.
        """
        functools.update_wrapper(self, fn)
        self.fn = fn
        self.name = name or getattr(fn, "__qualname__", repr(fn))
        self.record_failures = record_failures
        self.clock = clock
        self.stats = StatAccumulator()
        self.failures = 0

    def set_record_failures(self, enabled: bool) -> None:
        """Set whether calls that raise are timed and recorded.

        Args:
            enabled: True to record failed calls, False to skip them.
                    Failed calls are counted either way.
        """
        self.record_failures = enabled

    def count(self) -> int:
        return self.stats.count()

    def min(self) -> float:
        return self.stats.min()

    def max(self) -> float:
        return self.stats.max()

    def mean(self) -> float:
        return self.stats.mean()

    def reset(self) -> None:
        """Discard recorded samples and the failure count."""
        self.stats.reset()
        self.failures = 0

    def report(self) -> str:
        """Human-readable summary of the recorded call durations.

        Never raises: an empty wrapper reports that it has no samples.
        """
        policy = "included" if self.record_failures else "excluded"
        snapshot = self.stats.snapshot()
        if snapshot is None:
            return (
                f"{self.name}: no samples "
                f"(failed calls: {self.failures}, {policy})"
            )
        return (
            f"{self.name}: count={snapshot.count} "
            f"min={snapshot.min:.3f}ms max={snapshot.max:.3f}ms "
            f"mean={snapshot.mean:.3f}ms "
            f"(failed calls: {self.failures}, {policy})"
        )

    def _timed_call(self) -> Any:
        return timed(self.stats, record_failures=self.record_failures, clock=self.clock)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} count={self.stats.count()}>"


class ProfiledFunction(_ProfiledBase, Generic[P, R]):
    """A callable that times every call to its target.

    Arguments, return values and exceptions pass through unchanged. Only
    the synchronous part of the call is timed: if the target returns an
    awaitable, the time to create it is what gets recorded.
    """

    def invoke(self, *args: P.args, **kwargs: P.kwargs) -> R:
        """Call the target and record how long it took."""
        try:
            with self._timed_call():
                return self.fn(*args, **kwargs)
        except BaseException:
            self.failures += 1
            raise

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R:
        return self.invoke(*args, **kwargs)


class AsyncProfiledFunction(_ProfiledBase, Generic[P, R]):
    """A coroutine function that times each call until it completes."""

    async def invoke(self, *args: P.args, **kwargs: P.kwargs) -> R:
        """Await the target and record how long it took."""
        try:
            with self._timed_call():
                return await self.fn(*args, **kwargs)
        except BaseException:
            self.failures += 1
            raise

    async def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R:
        return await self.invoke(*args, **kwargs)


def wrap(
    fn: Callable[P, R] | Callable[P, Awaitable[R]],
    *,
    name: str | None = None,
    record_failures: bool = True,
    clock: Clock = time.perf_counter,
) -> "ProfiledFunction[P, R] | AsyncProfiledFunction[P, R]":
    """Wrap a callable so every call is timed.

    Coroutine functions get an AsyncProfiledFunction that times each call
    until the coroutine finishes; anything else gets a ProfiledFunction.

    Example:
        ```python
        fetch = wrap(fetch)
        fetch("a")
        print(fetch.report())
        ```
    """
    cls = AsyncProfiledFunction if inspect.iscoroutinefunction(fn) else ProfiledFunction
    return cls(fn, name=name, record_failures=record_failures, clock=clock)
