"""Constant-memory running statistics over a stream of samples."""

import math
from numbers import Real

from loglens.core.errors import InvalidSampleError, NoSamplesError
from loglens.core.models import StatSnapshot


class StatAccumulator:
    """Running count, min, max and mean of non-negative samples.

    Only four numbers are kept regardless of how many samples are
    observed. The mean is updated incrementally:
    ``mean += (value - mean) / count``.
    """

    __slots__ = ("_count", "_min", "_max", "_mean")

    def __init__(self) -> None:
        self._count = 0
        self._min = 0.0
        self._max = 0.0
        self._mean = 0.0

    def observe(self, value: float) -> None:
        """Add one sample.

        Raises:
            InvalidSampleError: If ``value`` is not a finite, non-negative
                real number. The accumulator is left unchanged.
        """
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidSampleError(f"sample must be a real number, got {value!r}")
        if not math.isfinite(value) or value < 0:
            raise InvalidSampleError(
                f"sample must be finite and non-negative, got {value!r}"
            )
        value = float(value)
        self._count += 1
        if self._count == 1:
            self._min = self._max = self._mean = value
            return
        if value < self._min:
            self._min = value
        if value > self._max:
            self._max = value
        self._mean += (value - self._mean) / self._count

    def count(self) -> int:
        """Number of observed samples (0 when empty)."""
        return self._count

    def min(self) -> float:
        """Smallest observed sample."""
        self._require_samples()
        return self._min

    def max(self) -> float:
        """Largest observed sample."""
        self._require_samples()
        return self._max

    def mean(self) -> float:
        """Arithmetic mean of the observed samples."""
        self._require_samples()
        return self._mean

    def snapshot(self) -> StatSnapshot | None:
        """Frozen copy of the current statistics, or None when empty."""
        if self._count == 0:
            return None
        return StatSnapshot(
            count=self._count, min=self._min, max=self._max, mean=self._mean
        )

    def reset(self) -> None:
        """Discard all samples."""
        self._count, self._min, self._max, self._mean = 0, 0.0, 0.0, 0.0

    def _require_samples(self) -> None:
        if self._count == 0:
            raise NoSamplesError()

    def __repr__(self) -> str:
        if self._count == 0:
            return "StatAccumulator(count=0)"
        return (
            f"StatAccumulator(count={self._count}, min={self._min}, "
            f"max={self._max}, mean={self._mean})"
        )
