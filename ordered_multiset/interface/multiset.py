from __future__ import annotations

from collections.abc import Collection
from typing import Generic, Iterable, Iterator, Optional, Tuple

from sortedcontainers import SortedDict

from ordered_multiset.interface.comparable import ElementT
from ordered_multiset.interface.views import MultisetView


class OrderedMultiset(Collection, Generic[ElementT]):
    """
    Class representing a mutable sorted multi-set (i.e. set where elements are allowed to repeat).

    Elements are stored once per distinct value in a `SortedDict` mapping each value to its
    number of occurrences, so point operations take O(log n) in the number of distinct values.
    A running total of occurrences is kept so that `size` is O(1).

    Absence is never an error: lookups on missing elements return `None` (or 0 for `count`).
    """

    def __init__(self, values: Iterable[ElementT] = ()) -> None:
        self._index: SortedDict = SortedDict()
        self._total = 0
        self._version = 0  # bumped on every mutation, checked by live views
        self.update(values)

    def clear(self) -> None:
        """Removes all elements."""
        if self._index:
            self._index.clear()
            self._total = 0
            self._version += 1

    def is_empty(self) -> bool:
        return self._total == 0

    def size(self) -> int:
        """Total number of elements, counting repeats."""
        return self._total

    def num_distinct(self) -> int:
        return len(self._index)

    def count(self, element: ElementT) -> int:
        """Number of occurrences of `element` (0 if absent)."""
        return self._index.get(element, 0)

    def contains(self, element: ElementT) -> bool:
        return element in self._index

    def first(self) -> Optional[ElementT]:
        """Smallest element, or `None` if the multiset is empty."""
        if not self._index:
            return None
        return self._index.peekitem(0)[0]

    def last(self) -> Optional[ElementT]:
        """Largest element, or `None` if the multiset is empty."""
        if not self._index:
            return None
        return self._index.peekitem(-1)[0]

    def pop_first(self) -> Optional[ElementT]:
        """Removes one occurrence of the smallest element and returns it."""
        if not self._index:
            return None
        return self.remove_one(self._index.peekitem(0)[0])

    def pop_last(self) -> Optional[ElementT]:
        """Removes one occurrence of the largest element and returns it."""
        if not self._index:
            return None
        return self.remove_one(self._index.peekitem(-1)[0])

    def insert(self, element: ElementT) -> None:
        """Adds one occurrence of `element`."""
        # Index is updated first so that an element which cannot be compared leaves no trace.
        self._index[element] = self._index.get(element, 0) + 1
        self._total += 1
        self._version += 1

    def update(self, values: Iterable[ElementT]) -> None:
        """Adds one occurrence of every value in `values`."""
        for value in values:
            self.insert(value)

    def remove_one(self, element: ElementT) -> Optional[ElementT]:
        """
        Removes a single occurrence of `element`.

        Returns the element if it was present, otherwise `None` (and nothing changes).
        """
        num_occurrences = self._index.get(element)
        if num_occurrences is None:
            return None

        if num_occurrences == 1:
            del self._index[element]
        else:
            self._index[element] = num_occurrences - 1
        self._total -= 1
        self._version += 1
        return element

    def remove_all(self, element: ElementT) -> Optional[ElementT]:
        """
        Removes every occurrence of `element`.

        Returns the element if it was present, otherwise `None` (and nothing changes).
        """
        num_occurrences = self._index.pop(element, None)
        if num_occurrences is None:
            return None

        self._total -= num_occurrences
        self._version += 1
        return element

    def iterate(self) -> MultisetView[ElementT]:
        """All elements in ascending order, each repeated by its count. Supports `reversed`."""
        return MultisetView(self)

    def range(
        self,
        minimum: Optional[ElementT] = None,
        maximum: Optional[ElementT] = None,
        inclusive: Tuple[bool, bool] = (True, False),
    ) -> MultisetView[ElementT]:
        """
        Elements between `minimum` and `maximum` in ascending order, each repeated by its count.

        Args:
            minimum: lower bound on the elements, or `None` for no lower bound.
            maximum: upper bound on the elements, or `None` for no upper bound.
            inclusive: whether the (lower, upper) bounds are themselves included. The default
                is the half-open interval `[minimum, maximum)`, as for Python slices.

        Returns:
            A view which can be iterated (and reversed) any number of times.
        """
        return MultisetView(self, minimum=minimum, maximum=maximum, inclusive=inclusive)

    def items(self) -> Iterator[Tuple[ElementT, int]]:
        """Pairs of (distinct element, count) in ascending order."""
        expected_version = self._version
        for element, num_occurrences in self._index.items():
            yield element, num_occurrences
            self._check_not_modified(expected_version)

    def copy(self) -> OrderedMultiset[ElementT]:
        new_multiset: OrderedMultiset[ElementT] = type(self)()
        new_multiset._index = self._index.copy()
        new_multiset._total = self._total
        return new_multiset

    def _check_not_modified(self, expected_version: int) -> None:
        if self._version != expected_version:
            raise RuntimeError(f"{type(self).__name__} was modified during iteration")

    def __iter__(self) -> Iterator[ElementT]:
        return iter(self.iterate())

    def __reversed__(self) -> Iterator[ElementT]:
        return reversed(self.iterate())

    def __contains__(self, element) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return self._total

    def __eq__(self, other) -> bool:
        if isinstance(other, OrderedMultiset):
            return self._total == other._total and self._index == other._index
        else:
            return False

    __hash__ = None  # type: ignore[assignment]  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
