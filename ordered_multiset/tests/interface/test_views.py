from __future__ import annotations

from typing import Any, Dict

import pytest

from ordered_multiset.interface.multiset import OrderedMultiset
from ordered_multiset.interface.views import MultisetView


def test_range(staircase_multiset: OrderedMultiset[int]) -> None:
    multiset = staircase_multiset

    assert list(multiset.range(1, 4, inclusive=(True, True))) == [1, 2, 2, 3, 3, 3, 4, 4, 4, 4]
    assert list(multiset.range(1, 3)) == [1, 2, 2]
    assert list(multiset.range(maximum=3)) == [1, 2, 2]
    assert list(multiset.range(maximum=3, inclusive=(True, True))) == [1, 2, 2, 3, 3, 3]
    assert list(reversed(multiset.range(maximum=3, inclusive=(True, True)))) == [
        3,
        3,
        3,
        2,
        2,
        1,
    ]
    assert list(multiset.range(2)) == [2, 2, 3, 3, 3, 4, 4, 4, 4]
    assert list(reversed(multiset.range(2, 4, inclusive=(True, True)))) == [
        4,
        4,
        4,
        4,
        3,
        3,
        3,
        2,
        2,
    ]


def test_range_open_and_degenerate_bounds(staircase_multiset: OrderedMultiset[int]) -> None:
    assert list(staircase_multiset.range(1, 4, inclusive=(False, False))) == [2, 2, 3, 3, 3]
    assert list(staircase_multiset.range(3, 3)) == []
    assert list(staircase_multiset.range(3, 3, inclusive=(True, True))) == [3, 3, 3]
    assert list(staircase_multiset.range(4, 1)) == []
    assert list(staircase_multiset.range(10)) == []
    assert list(staircase_multiset.range(maximum=0)) == []


def test_range_bounds_between_elements() -> None:
    multiset = OrderedMultiset([1.0, 2.0, 3.0, 3.0, 4.0, 5.0, 5.0])
    assert list(multiset.range(1.5, 4.5)) == [2.0, 3.0, 3.0, 4.0]
    assert list(reversed(multiset.range(1.5, 4.5))) == [4.0, 3.0, 3.0, 2.0]


def test_range_examples() -> None:
    multiset = OrderedMultiset([1, 2, 3, 3, 4, 5, 5])
    assert list(multiset.range(1, 3, inclusive=(True, True))) == [1, 2, 3, 3]
    assert list(multiset.range(maximum=3)) == [1, 2]
    assert list(reversed(multiset.range(2))) == [5, 5, 4, 3, 3, 2]


@pytest.mark.parametrize(
    "bounds",
    [
        {},
        {"minimum": 2},
        {"maximum": 3},
        {"minimum": 2, "maximum": 4},
        {"minimum": 1, "maximum": 4, "inclusive": (True, True)},
        {"minimum": 1, "maximum": 4, "inclusive": (False, True)},
        {"minimum": 1, "maximum": 4, "inclusive": (False, False)},
    ],
)
def test_reversed_range_matches_forward(
    staircase_multiset: OrderedMultiset[int], bounds: Dict[str, Any]
) -> None:
    view = staircase_multiset.range(**bounds)
    forward = list(view)
    assert list(reversed(view)) == forward[::-1]

    # Each distinct element appears exactly `count` times, consecutively.
    for element in set(forward):
        first_idx = forward.index(element)
        num_occurrences = staircase_multiset.count(element)
        assert forward[first_idx : first_idx + num_occurrences] == [element] * num_occurrences
        assert forward.count(element) == num_occurrences


def test_range_is_lazy_and_restartable(staircase_multiset: OrderedMultiset[int]) -> None:
    view = staircase_multiset.range(3)
    iterator = iter(view)
    assert next(iterator) == 3

    # Starting a new traversal does not disturb the first one.
    assert list(view) == [3, 3, 3, 4, 4, 4, 4]
    assert list(iterator) == [3, 3, 4, 4, 4, 4]


def test_range_mutation_during_iteration(staircase_multiset: OrderedMultiset[int]) -> None:
    iterator = iter(staircase_multiset.range(2))
    next(iterator)
    staircase_multiset.remove_all(3)
    with pytest.raises(RuntimeError, match="modified during iteration"):
        next(iterator)


def test_view_repr(staircase_multiset: OrderedMultiset[int]) -> None:
    assert repr(staircase_multiset.range(1, 3)) == "MultisetView([1, 3))"
    view = staircase_multiset.range(maximum=3, inclusive=(False, True))
    assert repr(view) == "MultisetView((, 3])"
    assert repr(staircase_multiset.iterate()) == "MultisetView([, ])"
    assert isinstance(staircase_multiset.iterate(), MultisetView)
