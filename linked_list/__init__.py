"""A generic singly linked list."""

from .base import List
from .errors import IndexOutOfRangeError, check_index
from .linked_list import LinkedList, Node

__all__ = ["List", "LinkedList", "Node", "IndexOutOfRangeError", "check_index"]
