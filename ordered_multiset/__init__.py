from ordered_multiset.interface.comparable import Comparable
from ordered_multiset.interface.multiset import OrderedMultiset
from ordered_multiset.interface.views import MultisetView

__all__ = [
    "Comparable",
    "OrderedMultiset",
    "MultisetView",
]
