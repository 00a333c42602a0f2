"""Unordered set of values, hashed with user-supplied functions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], Any]
FreeFunc = Callable[[Any], None]

# Good hash table primes: each roughly double the last, and as far as
# possible from the nearest powers of two.
_PRIMES = (
    193, 389, 769, 1543, 3079, 6151,
    12289, 24593, 49157, 98317, 196613, 393241,
    786433, 1572869, 3145739, 6291469, 12582917, 25165843,
    50331653, 100663319, 201326611, 402653189, 805306457, 1610612741,
)


def _default_equal(a: Any, b: Any) -> bool:
    return a == b


class HashSet:
    """A set of values, each held once, using ``hash_func`` and ``equal_func``.

    ``hash_func(value)`` returns an integer hash; ``equal_func(a, b)`` returns
    a true value when ``a`` and ``b`` are to be treated as the same value.
    Without them, the built-in ``hash`` and ``==`` are used.
    """

    __slots__ = ("_hash", "_equal", "_free", "_table", "_prime_index", "_count")

    def __init__(
        self,
        hash_func: HashFunc | None = None,
        equal_func: EqualFunc | None = None,
    ) -> None:
        self._hash: HashFunc = hash_func if hash_func is not None else hash
        self._equal: EqualFunc = equal_func if equal_func is not None else _default_equal
        self._free: FreeFunc | None = None
        self._count = 0
        self._prime_index = 0
        self._table: list[list[Any]] = self._new_table()

    def _new_table(self) -> list[list[Any]]:
        if self._prime_index < len(_PRIMES):
            size = _PRIMES[self._prime_index]
        else:
            size = self._count * 10
        return [[] for _ in range(size)]

    def _chain(self, value: Any) -> list[Any]:
        return self._table[self._hash(value) % len(self._table)]

    def _enlarge(self) -> None:
        old_table = self._table
        self._prime_index += 1
        self._table = self._new_table()
        for chain in old_table:
            for value in chain:
                self._chain(value).append(value)

    def register_free_function(self, free_func: FreeFunc | None) -> None:
        """Set a function called with each value removed from the set."""
        self._free = free_func

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if an equal value is already present."""
        if (self._count * 3) // len(self._table) > 0:
            self._enlarge()
        chain = self._chain(value)
        if any(self._equal(value, existing) for existing in chain):
            return False
        chain.append(value)
        self._count += 1
        return True

    def remove(self, value: Any) -> bool:
        """Remove the value equal to ``value``; return False if there is none."""
        chain = self._chain(value)
        for position, existing in enumerate(chain):
            if self._equal(value, existing):
                del chain[position]
                self._count -= 1
                if self._free is not None:
                    self._free(existing)
                return True
        return False

    def query(self, value: Any) -> bool:
        """Return True if a value equal to ``value`` is in the set."""
        return any(self._equal(value, existing) for existing in self._chain(value))

    def __contains__(self, value: Any) -> bool:
        return self.query(value)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for chain in self._table:
            yield from chain

    def to_array(self) -> list[Any]:
        """Return a list of all values in the set."""
        return list(self)

    def union(self, other: HashSet) -> HashSet:
        """Return a new set holding the values of this set and ``other``.

        The new set uses this set's hash and equality functions.
        """
        result = HashSet(self._hash, self._equal)
        for value in self:
            result.insert(value)
        for value in other:
            if not result.query(value):
                result.insert(value)
        return result

    def intersection(self, other: HashSet) -> HashSet:
        """Return a new set holding the values of this set also in ``other``.

        The new set uses this set's hash function and ``other``'s equality
        function.
        """
        result = HashSet(self._hash, other._equal)
        for value in self:
            if other.query(value):
                result.insert(value)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"