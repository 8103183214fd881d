from __future__ import annotations

import pytest

from ordered_multiset.interface.multiset import OrderedMultiset


@pytest.fixture
def multiset_with_repeats() -> OrderedMultiset[int]:
    """Returns the multiset {1, 2, 3, 3, 4, 4, 5}, inserted out of order."""
    multiset: OrderedMultiset[int] = OrderedMultiset()
    for value in [1, 2, 3, 4, 4, 5, 3]:
        multiset.insert(value)
    return multiset


@pytest.fixture
def staircase_multiset() -> OrderedMultiset[int]:
    """Returns a multiset where each value i in 1..4 appears i times."""
    return OrderedMultiset(i for i in range(1, 5) for _ in range(i))
