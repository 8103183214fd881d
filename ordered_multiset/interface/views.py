from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Iterator, Optional, Tuple

from ordered_multiset.interface.comparable import ElementT

if TYPE_CHECKING:
    from ordered_multiset.interface.multiset import OrderedMultiset


class MultisetView(Generic[ElementT]):
    """
    Lazy, restartable view over the elements of an `OrderedMultiset` whose keys fall in a range.

    Each call to `iter` or `reversed` starts a fresh traversal. Distinct keys are walked in the
    underlying sorted index and each key is repeated `count` times, so the flat sequence of
    occurrences is never materialized. The multiset must not be mutated while a traversal is in
    progress; doing so raises `RuntimeError` on the next step.
    """

    def __init__(
        self,
        multiset: OrderedMultiset[ElementT],
        minimum: Optional[ElementT] = None,
        maximum: Optional[ElementT] = None,
        inclusive: Tuple[bool, bool] = (True, True),
    ) -> None:
        self._multiset = multiset
        self._minimum = minimum
        self._maximum = maximum
        self._inclusive = inclusive

    def __iter__(self) -> Iterator[ElementT]:
        return self._iter_occurrences(reverse=False)

    def __reversed__(self) -> Iterator[ElementT]:
        return self._iter_occurrences(reverse=True)

    def _iter_occurrences(self, reverse: bool) -> Iterator[ElementT]:
        multiset = self._multiset
        index = multiset._index
        expected_version = multiset._version

        keys = index.irange(
            self._minimum, self._maximum, inclusive=self._inclusive, reverse=reverse
        )
        for key in keys:
            multiset._check_not_modified(expected_version)
            for _ in range(index[key]):
                yield key
                multiset._check_not_modified(expected_version)

    def __repr__(self) -> str:
        lower = "[" if self._inclusive[0] else "("
        upper = "]" if self._inclusive[1] else ")"
        minimum = "" if self._minimum is None else repr(self._minimum)
        maximum = "" if self._maximum is None else repr(self._maximum)
        return f"{type(self).__name__}({lower}{minimum}, {maximum}{upper})"
