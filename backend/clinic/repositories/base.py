"""
Generic in-memory repository.

Each repository exclusively owns its list of entities and allocates ids
from a per-repository counter starting at 1. Ids are never reused within a
process, even after removals. Lookups are linear scans.
"""

import itertools
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from ..domain.interfaces import IRepository

T = TypeVar("T")


class InMemoryRepository(IRepository[T], Generic[T]):
    """Repository for single-process, in-memory persistence."""

    def __init__(self) -> None:
        self._items: List[T] = []
        self._ids: Iterator[int] = itertools.count(1)

    def add(self, item: T) -> T:
        """Assign the next id and append."""
        item.id = next(self._ids)  # type: ignore[attr-defined]
        self._items.append(item)
        return item

    def remove(self, entity_id: int) -> bool:
        for index, item in enumerate(self._items):
            if item.id == entity_id:  # type: ignore[attr-defined]
                del self._items[index]
                return True
        return False

    def get_by_id(self, entity_id: int) -> Optional[T]:
        for item in self._items:
            if item.id == entity_id:  # type: ignore[attr-defined]
                return item
        return None

    def get_all(self) -> List[T]:
        return list(self._items)

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items if predicate(item)]

    def __len__(self) -> int:
        return len(self._items)
