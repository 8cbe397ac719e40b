"""Errors raised by list operations."""


class IndexOutOfRangeError(IndexError):
    """An index argument fell outside the valid range of an operation."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of bounds for length {length}")


def check_index(index: int, length: int) -> int:
    """Return index if 0 <= index < length, raise IndexOutOfRangeError otherwise."""
    # bool is an int subclass but never a meaningful position
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"list indices must be integers, not {type(index).__name__}")
    if index < 0 or index >= length:
        raise IndexOutOfRangeError(index, length)
    return index
