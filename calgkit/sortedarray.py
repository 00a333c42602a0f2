"""Automatically sorted array ordered by a user-supplied comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

CompareFunc = Callable[[Any, Any], int]

_DEFAULT_CAPACITY = 16


class SortedArray:
    """An array that keeps its values in the order given by ``compare``.

    ``compare(a, b)`` returns a negative number if ``a`` sorts before ``b``,
    a positive number if it sorts after, and zero if they are equal.
    """

    __slots__ = ("_compare", "_data", "capacity")

    def __init__(self, compare: CompareFunc, capacity: int = 0) -> None:
        if compare is None:
            raise TypeError("a comparison function is required")
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._compare = compare
        self._data: list[Any] = []
        # Only a sizing hint; the underlying list grows as needed.
        self.capacity = capacity or _DEFAULT_CAPACITY

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def get(self, index: int) -> Any:
        """Return the value at ``index``, or None if it is out of range."""
        if 0 <= index < len(self._data):
            return self._data[index]
        return None

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def insert(self, value: Any) -> None:
        """Insert ``value`` at the position that keeps the array sorted."""
        data = self._data
        compare = self._compare
        left = 0
        right = len(data) if len(data) > 1 else 0
        index = 0

        while left != right:
            index = (left + right) // 2
            order = compare(value, data[index])
            if order < 0:
                right = index
            elif order > 0:
                left = index + 1
            else:
                break

        if data and compare(value, data[index]) > 0:
            index += 1

        data.insert(index, value)
        if len(data) > self.capacity:
            self.capacity *= 2

    def index_of(self, value: Any) -> int:
        """Return the index of a value equal to ``value``, or -1 if absent."""
        data = self._data
        left, right = 0, len(data)
        while left < right:
            index = (left + right) // 2
            order = self._compare(value, data[index])
            if order < 0:
                right = index
            elif order > 0:
                left = index + 1
            else:
                return index
        return -1

    def remove(self, index: int) -> None:
        """Remove the value at ``index``."""
        self.remove_range(index, 1)

    def remove_range(self, index: int, length: int) -> None:
        """Remove up to ``length`` values starting at ``index``.

        A range running past the end is cut short at the end.
        """
        if not 0 <= index < len(self._data):
            raise IndexError("sorted array index out of range")
        if length < 0:
            raise ValueError("length must not be negative")
        del self._data[index:index + length]

    def clear(self) -> None:
        """Remove all values."""
        self._data.clear()