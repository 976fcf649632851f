"""A small linear-scan table keyed by 64-bit hashes."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

from ogb.hashing import get_hash


def _next_power_of_two(n: int) -> int:
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


class HashTable:
    """Entries of (hash, value) searched in insertion order.

    Keys themselves are not stored: two keys with the same hash are the
    same entry.
    """

    def __init__(
        self,
        capacity_count: int = 128,
        hash_function: Callable[[Any], int] = get_hash,
    ) -> None:
        self._hash = hash_function
        self._capacity = min(capacity_count, 8)
        self._entries: List[List[Any]] = []

    @property
    def capacity(self) -> int:
        """Number of entries the table can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def values(self) -> Iterator[Any]:
        return (value for _, value in self._entries)

    def reserve(self, required_count: int) -> None:
        """Grow capacity to the next power of two of ``required_count`` if needed."""
        if self._capacity >= required_count:
            return
        self._capacity = _next_power_of_two(required_count)

    def reset(self) -> None:
        """Drop all entries but keep the capacity."""
        self._entries.clear()

    def add(self, key: Any, value: Any) -> None:
        """Append an entry; this may create several entries with one hash."""
        self.reserve(len(self._entries) + 1)
        self._entries.append([self._hash(key), value])

    def _find_entry(self, key: Any) -> Optional[List[Any]]:
        h = self._hash(key)
        return next((entry for entry in self._entries if entry[0] == h), None)

    def find(self, key: Any) -> Any:
        """The value of the first entry with the key's hash, or None."""
        entry = self._find_entry(key)
        return None if entry is None else entry[1]

    def contains(self, key: Any) -> bool:
        return self._find_entry(key) is not None

    def set(self, key: Any, value: Any) -> bool:
        """Set the value for ``key``; return True if it was newly added."""
        entry = self._find_entry(key)
        if entry is None:
            self.add(key, value)
            return True
        entry[1] = value
        return False

    def get_nth_value(self, n: int) -> Any:
        if not 0 <= n < len(self._entries):
            raise IndexError("hash table index out of range")
        return self._entries[n][1]