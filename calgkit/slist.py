"""Singly-linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any

CompareFunc = Callable[[Any, Any], int]
EqualFunc = Callable[[Any, Any], Any]


class SListEntry:
    """An entry in a singly-linked list: a value and a link to the next entry."""

    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: SListEntry | None = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"SListEntry({self.data!r})"


class SListIterator:
    """Iterates over the values of a list; the current entry may be removed.

    The iterator survives removal of the current entry, whether through
    :meth:`remove` or through the list's own removal methods.
    """

    __slots__ = ("_list", "_prev", "_current")

    def __init__(self, slist: SList) -> None:
        self._list = slist
        # The entry whose ``next`` leads to the current entry; None means
        # the list head.
        self._prev: SListEntry | None = None
        self._current: SListEntry | None = None

    def _link(self) -> SListEntry | None:
        if self._prev is None:
            return self._list._head
        return self._prev.next

    def _set_link(self, entry: SListEntry | None) -> None:
        if self._prev is None:
            self._list._head = entry
        else:
            self._prev.next = entry

    def _current_is_live(self) -> bool:
        return self._current is not None and self._current is self._link()

    def __iter__(self) -> SListIterator:
        return self

    def has_more(self) -> bool:
        """Return True if another value remains to be read."""
        if not self._current_is_live():
            return self._link() is not None
        assert self._current is not None
        return self._current.next is not None

    def __next__(self) -> Any:
        if not self._current_is_live():
            self._current = self._link()
        else:
            assert self._current is not None
            self._prev = self._current
            self._current = self._current.next
        if self._current is None:
            raise StopIteration
        return self._current.data

    def remove(self) -> None:
        """Remove the entry last returned; does nothing if there is none."""
        if not self._current_is_live():
            return
        assert self._current is not None
        self._set_link(self._current.next)
        self._current = None


class SList:
    """A singly-linked list of values."""

    __slots__ = ("_head",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: SListEntry | None = None
        tail: SListEntry | None = None
        for value in values:
            entry = SListEntry(value)
            if tail is None:
                self._head = entry
            else:
                tail.next = entry
            tail = entry

    @property
    def head(self) -> SListEntry | None:
        """The first entry, or None if the list is empty."""
        return self._head

    def prepend(self, value: Any) -> SListEntry:
        """Add a value at the start of the list and return its entry."""
        entry = SListEntry(value, self._head)
        self._head = entry
        return entry

    def append(self, value: Any) -> SListEntry:
        """Add a value at the end of the list and return its entry."""
        entry = SListEntry(value)
        if self._head is None:
            self._head = entry
        else:
            rover = self._head
            while rover.next is not None:
                rover = rover.next
            rover.next = entry
        return entry

    def nth_entry(self, n: int) -> SListEntry | None:
        """Return the entry at index ``n``, or None if out of range."""
        if n < 0:
            return None
        for index, entry in enumerate(self.entries()):
            if index == n:
                return entry
        return None

    def nth_data(self, n: int) -> Any:
        """Return the value at index ``n``; raise IndexError if out of range."""
        entry = self.nth_entry(n)
        if entry is None:
            raise IndexError("list index out of range")
        return entry.data

    def __len__(self) -> int:
        return sum(1 for _ in self.entries())

    def __iter__(self) -> Iterator[Any]:
        return (entry.data for entry in self.entries())

    def entries(self) -> Iterator[SListEntry]:
        """Iterate over the entries from first to last."""
        entry = self._head
        while entry is not None:
            following = entry.next
            yield entry
            entry = following

    def to_array(self) -> list[Any]:
        """Return the values as a Python list."""
        return list(self)

    def remove_entry(self, entry: SListEntry | None) -> bool:
        """Unlink ``entry``; return False if it is None or not in the list."""
        if self._head is None or entry is None:
            return False
        if self._head is entry:
            self._head = entry.next
            return True
        rover = self._head
        while rover is not None and rover.next is not entry:
            rover = rover.next
        if rover is None:
            return False
        rover.next = entry.next
        return True

    def remove_data(self, equal: EqualFunc, value: Any) -> int:
        """Remove every value for which ``equal(data, value)`` is true.

        Returns the number of entries removed.
        """
        removed = 0
        prev: SListEntry | None = None
        entry = self._head
        while entry is not None:
            following = entry.next
            if equal(entry.data, value):
                if prev is None:
                    self._head = following
                else:
                    prev.next = following
                removed += 1
            else:
                prev = entry
            entry = following
        return removed

    def sort(self, compare: CompareFunc) -> None:
        """Sort the list in place by ``compare``, keeping the same entries."""
        ordered = sorted(self.entries(), key=cmp_to_key(lambda a, b: compare(a.data, b.data)))
        following: SListEntry | None = None
        for entry in reversed(ordered):
            entry.next = following
            following = entry
        self._head = following

    def find_data(self, equal: EqualFunc, value: Any) -> SListEntry | None:
        """Return the first entry for which ``equal(data, value)`` is true."""
        for entry in self.entries():
            if equal(entry.data, value):
                return entry
        return None

    def iterate(self) -> SListIterator:
        """Return an iterator that allows removal of the current value."""
        return SListIterator(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"