"""
Abstract list contract.

Implementations provide indexed insertion, retrieval, replacement and
removal plus membership, size and clearing. The Python protocol hooks
(len, in, bool) are derived from the contract here.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class List(ABC, Generic[T]):

    @abstractmethod
    def add(self, element: T) -> None:
        """Append element at the end."""

    @abstractmethod
    def insert(self, index: int, element: T) -> None:
        """Insert element so that it ends up at position index."""

    @abstractmethod
    def set(self, index: int, element: T) -> None:
        """Replace the element at index."""

    @abstractmethod
    def get(self, index: int) -> T:
        """Return the element at index."""

    @abstractmethod
    def remove(self, index: int) -> T:
        """Remove the element at index and return it."""

    @abstractmethod
    def contains(self, element: T) -> bool:
        """Check whether an equal element is stored."""

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def __len__(self):
        return self.size()

    def __contains__(self, element):
        return self.contains(element)
