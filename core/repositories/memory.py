# core/repositories/memory.py

from typing import Callable, List, Optional

from .base import Repository, T


class InMemoryRepository(Repository[T]):
    """Repository backed by a list. Lookups scan linearly."""

    def __init__(self):
        self._items: List[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    def get(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self._items if predicate(item)), None)

    def get_all(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
