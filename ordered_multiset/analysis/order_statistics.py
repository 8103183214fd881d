"""
Order statistics over a sliding window of numbers.

These are the typical consumers of `OrderedMultiset`: the window contents are kept in one
(or two) multisets so that each step costs O(log w) for a window of size w, irrespective
of how many values in the window are repeated.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, Iterator, Optional, Tuple

from ordered_multiset.interface.multiset import OrderedMultiset

logger = logging.getLogger(__name__)


def _check_window_size(window_size: int) -> None:
    if window_size < 1:
        raise ValueError(f"Window size must be positive, got {window_size}")


class SlidingWindowMedian:
    """
    Running median of the last `window_size` values pushed.

    Uses the usual two-heap scheme, with multisets in place of heaps so that the value leaving
    the window can be removed directly. The invariants maintained after every push are:
    1) every element of `_lower` is <= every element of `_upper`
    2) len(_upper) <= len(_lower) <= len(_upper) + 1
    so the median is always `_lower.last()` (odd size) or the mean of the two middle values.
    """

    def __init__(self, window_size: int) -> None:
        _check_window_size(window_size)
        self.window_size = window_size
        self._window: Deque[float] = deque()
        self._lower: OrderedMultiset[float] = OrderedMultiset()
        self._upper: OrderedMultiset[float] = OrderedMultiset()

    def __len__(self) -> int:
        """Number of values currently in the window."""
        return len(self._window)

    def push(self, value: float) -> Optional[float]:
        """Adds a value (evicting the oldest one if the window is full) and returns the median."""
        self._window.append(value)
        lower_max = self._lower.last()
        if lower_max is None or value <= lower_max:
            self._lower.insert(value)
        else:
            self._upper.insert(value)

        if len(self._window) > self.window_size:
            self._evict(self._window.popleft())

        self._rebalance()
        return self.median()

    def median(self) -> Optional[float]:
        if not self._window:
            return None

        lower_max = self._lower.last()
        assert lower_max is not None
        if len(self._lower) > len(self._upper):
            return lower_max

        upper_min = self._upper.first()
        assert upper_min is not None
        return (lower_max + upper_min) / 2

    def _evict(self, value: float) -> None:
        lower_max = self._lower.last()
        if lower_max is not None and value <= lower_max:
            removed = self._lower.remove_one(value)
        else:
            removed = self._upper.remove_one(value)
        assert removed is not None, f"Value {value} left the window but was not tracked"

    def _rebalance(self) -> None:
        log_level = logging.DEBUG - 1
        logger_active = logger.isEnabledFor(log_level)

        while len(self._lower) > len(self._upper) + 1:
            moved = self._lower.pop_last()
            self._upper.insert(moved)  # type: ignore[arg-type]
            if logger_active:
                logger.log(log_level, f"Moved {moved} from lower to upper half")

        while len(self._upper) > len(self._lower):
            moved = self._upper.pop_first()
            self._lower.insert(moved)  # type: ignore[arg-type]
            if logger_active:
                logger.log(log_level, f"Moved {moved} from upper to lower half")


class SlidingWindowExtrema:
    """Running minimum and maximum of the last `window_size` values pushed."""

    def __init__(self, window_size: int) -> None:
        _check_window_size(window_size)
        self.window_size = window_size
        self._window: Deque[float] = deque()
        self._contents: OrderedMultiset[float] = OrderedMultiset()

    def __len__(self) -> int:
        return len(self._window)

    def push(self, value: float) -> None:
        self._window.append(value)
        self._contents.insert(value)
        if len(self._window) > self.window_size:
            self._contents.remove_one(self._window.popleft())

    def min(self) -> Optional[float]:
        return self._contents.first()

    def max(self) -> Optional[float]:
        return self._contents.last()


def sliding_window_medians(values: Iterable[float], window_size: int) -> Iterator[float]:
    """Yields the median of every full window of `window_size` consecutive values."""
    tracker = SlidingWindowMedian(window_size)
    return _iter_medians(values, tracker)


def _iter_medians(values: Iterable[float], tracker: SlidingWindowMedian) -> Iterator[float]:
    for value in values:
        median = tracker.push(value)
        if len(tracker) == tracker.window_size:
            assert median is not None
            yield median


def sliding_window_extrema(
    values: Iterable[float], window_size: int
) -> Iterator[Tuple[float, float]]:
    """Yields (min, max) of every full window of `window_size` consecutive values."""
    tracker = SlidingWindowExtrema(window_size)
    return _iter_extrema(values, tracker)


def _iter_extrema(
    values: Iterable[float], tracker: SlidingWindowExtrema
) -> Iterator[Tuple[float, float]]:
    for value in values:
        tracker.push(value)
        if len(tracker) == tracker.window_size:
            yield tracker.min(), tracker.max()  # type: ignore[misc]
