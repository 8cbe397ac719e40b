"""
Singly linked list built from chained nodes.

The list keeps a reference to the head node and a size counter. Every
indexed operation walks the chain from the head, so access, insertion
and removal are all O(index).
"""

import logging
from typing import Generic, Iterable, List as PyList, Optional, TypeVar

from .base import List
from .errors import check_index

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    def __init__(self, value: T, next: "Optional[Node[T]]" = None):
        self.value = value
        self.next = next

    def __repr__(self):
        return f"Node({self.value!r})"


class LinkedList(List[T]):
    def __init__(self, elements: Iterable[T] = ()):
        self._head: Optional[Node[T]] = None
        self._size = 0
        for element in elements:
            self.add(element)

    @classmethod
    def of(cls, *elements: T) -> "LinkedList[T]":
        """Build a list holding elements in the given order."""
        return cls(elements)

    def add(self, element: T) -> None:
        """Add a new node to the end of the list."""
        self.insert(self._size, element)

    def insert(self, index: int, element: T) -> None:
        """Insert element at index, shifting later elements one position up.

        Inserting at size() appends.
        """
        check_index(index, self._size + 1)
        self._size += 1
        new_node = Node(element)
        if index == 0:
            new_node.next = self._head
            self._head = new_node
            return
        previous = self._node_at(index - 1)
        new_node.next = previous.next
        previous.next = new_node

    def set(self, index: int, element: T) -> None:
        check_index(index, self._size)
        self._node_at(index).value = element

    def get(self, index: int) -> T:
        check_index(index, self._size)
        return self._node_at(index).value

    def remove(self, index: int) -> T:
        """Unlink the node at index and return its value."""
        check_index(index, self._size)
        self._size -= 1
        if index == 0:
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(index - 1)
            removed = previous.next
            # index < old size, so the predecessor always has a successor
            assert removed is not None, f"broken chain at index {index}"
            previous.next = removed.next
        removed.next = None
        return removed.value

    def contains(self, element: T) -> bool:
        current = self._head
        while current is not None:
            if current.value == element:
                return True
            current = current.next
        return False

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        """Drop every node and reset the size to zero.

        Links are cut one at a time so that releasing a long chain never
        recurses through the nodes.
        """
        current = self._head
        self._head = None
        released = 0
        while current is not None:
            current.next, current = None, current.next
            released += 1
        self._size = 0
        logger.debug("cleared list, released %d nodes", released)

    def to_list(self) -> PyList[T]:
        """Convert linked list to Python list for easy viewing."""
        result = []
        current = self._head
        while current is not None:
            result.append(current.value)
            current = current.next
        return result

    def _node_at(self, index: int) -> Node[T]:
        current = self._head
        for _ in range(index):
            current = current.next
        return current

    def __eq__(self, other):
        if not isinstance(other, LinkedList):
            return NotImplemented
        if self._size != other._size:
            return False
        mine, theirs = self._head, other._head
        while mine is not None:
            if mine.value != theirs.value:
                return False
            mine, theirs = mine.next, theirs.next
        return True

    def __repr__(self):
        return f"LinkedList({self.to_list()!r})"
