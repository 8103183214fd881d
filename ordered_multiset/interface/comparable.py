from typing import Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, __other) -> bool:
        ...


ElementT = TypeVar("ElementT", bound=Comparable)
