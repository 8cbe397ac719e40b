import pytest

from linked_list import LinkedList


@pytest.fixture
def three():
    """The list [0, 1, 2]."""
    return LinkedList.of(0, 1, 2)
