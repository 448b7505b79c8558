"""Streaming descriptive statistics with a cached partial sort for order statistics."""

from __future__ import annotations

import heapq
import math
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from .rendering import format_summary
from .utils import lowest_value

T = TypeVar("T")


class Descriptive(Generic[T]):
    """Maintain count, sum, extremes, mean, median and standard deviation.

    Mean and variance are updated incrementally with Welford's recurrence.
    The observations themselves are retained so that the minimum and the
    median can be read from a partially sorted prefix, which is rebuilt at
    most once between two calls to :meth:`add`.

    Instances are not safe for concurrent use: the order-statistic queries
    reorder the stored values.
    """

    __slots__ = ("_sum", "_max", "_values", "_mean", "_sum_sq_dev", "_is_sorted")

    def __init__(self, lowest: Optional[T] = None) -> None:
        self._sum: Any = 0
        self._max: Any = lowest_value() if lowest is None else lowest
        self._values: List[T] = []
        self._mean: float = 0.0
        self._sum_sq_dev: float = 0.0
        self._is_sorted = True

    @classmethod
    def for_type(cls, numeric_type: Callable[..., T]) -> "Descriptive[T]":
        """Create an accumulator whose empty maximum is the type's lowest value."""
        return cls(lowest=lowest_value(numeric_type))

    # ------------------------------------------------------------------
    def add(self, value: T) -> None:
        self._values.append(value)
        self._is_sorted = False
        self._sum += value
        if value > self._max:
            self._max = value

        x = float(value)
        mean_prev = self._mean
        self._mean += (x - self._mean) / len(self._values)
        self._sum_sq_dev += (x - mean_prev) * (x - self._mean)

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.add(value)

    # ------------------------------------------------------------------
    def get_count(self) -> int:
        return len(self._values)

    def get_sum(self) -> T:
        return self._sum

    def get_max(self) -> T:
        """Largest observation, or the lowest-value sentinel when empty."""
        return self._max

    def get_min(self) -> T:
        """Smallest observation.

        The accumulator must not be empty; check :meth:`get_count` first.
        """
        self._sort()
        return self._values[0]

    def get_mean(self) -> float:
        """Arithmetic mean; NaN for an empty population, where it is undefined."""
        count = len(self._values)
        if count == 0:
            return math.nan
        return float(self._sum) / count

    def get_median(self) -> float:
        count = len(self._values)
        if count == 0:
            return math.nan
        self._sort()
        middle = count // 2
        if count % 2 == 0:
            # Averages positions count/2 and count/2 + 1; with two
            # observations the upper position falls back to the last one.
            upper = min(middle + 1, count - 1)
            return (float(self._values[middle]) + float(self._values[upper])) / 2.0
        return float(self._values[middle])

    def get_standard_deviation(self) -> float:
        """Population standard deviation; NaN for an empty population."""
        count = len(self._values)
        if count == 0:
            return math.nan
        return math.sqrt(self._sum_sq_dev / count)

    # ------------------------------------------------------------------
    def _sort(self) -> None:
        """Order the prefix of the values read by get_min and get_median."""
        if self._is_sorted:
            return
        count = len(self._values)
        prefix = count // 2 + 1
        if count % 2 == 0:
            prefix += 1
        prefix = min(prefix, count)

        heap = self._values
        heapq.heapify(heap)
        ordered = [heapq.heappop(heap) for _ in range(prefix)]
        ordered.extend(heap)
        self._values = ordered
        self._is_sorted = True

    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._values)

    def __str__(self) -> str:
        return format_summary(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={len(self._values)})"


__all__ = ["Descriptive"]
