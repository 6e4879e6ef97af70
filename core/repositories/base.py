# core/repositories/base.py

from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """Storage for a collection of entities of one type."""

    @abstractmethod
    def add(self, item: T) -> None:
        """Store an item. Duplicate keys are not rejected.

        Args:
            item: The entity to store
        """
        pass

    @abstractmethod
    def get(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Find the first stored item matching a predicate.

        Args:
            predicate: Function returning True for the wanted item

        Returns:
            The first match in insertion order, None if nothing matches
        """
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """Get every stored item in insertion order."""
        pass
