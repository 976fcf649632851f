"""A list with explicit power-of-two capacity and fast unordered removal."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List


def _next_power_of_two(n: int) -> int:
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


class GrowingArray:
    """An ordered sequence whose reserved capacity grows in powers of two."""

    def __init__(self, items: Iterable[Any] = (), count_to_reserve: int = 8) -> None:
        self._items: List[Any] = []
        self._allocated = _next_power_of_two(count_to_reserve)
        self.add_multiple(items)

    @property
    def allocated_count(self) -> int:
        return self._allocated

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GrowingArray):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"GrowingArray({self._items!r})"

    def reserve(self, count_to_reserve: int) -> None:
        """Make room for at least ``count_to_reserve`` items."""
        if self._allocated >= count_to_reserve:
            return
        self._allocated = _next_power_of_two(count_to_reserve)

    def add(self, item: Any) -> None:
        self.reserve(len(self._items) + 1)
        self._items.append(item)

    def add_multiple(self, items: Iterable[Any]) -> None:
        new_items = list(items)
        self.reserve(len(self._items) + len(new_items))
        self._items.extend(new_items)

    def resize(self, new_count: int, fill: Any = None) -> None:
        """Truncate, or extend with ``fill``, to exactly ``new_count`` items."""
        if new_count < 0:
            raise ValueError("count cannot be negative")
        self.reserve(new_count)
        if new_count <= len(self._items):
            del self._items[new_count:]
        else:
            self._items.extend([fill] * (new_count - len(self._items)))

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("no items to pop in growing array")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every item but keep the reserved capacity."""
        self._items.clear()

    def find_index_by_identity(self, item: Any) -> int:
        """Index of the first element that is ``item``, or -1."""
        return next((i for i, existing in enumerate(self._items) if existing is item), -1)

    def find_index_by_value(self, item: Any) -> int:
        """Index of the first element equal to ``item``, or -1."""
        return next((i for i, existing in enumerate(self._items) if existing == item), -1)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("growing array index out of range")

    def ordered_remove_by_index(self, index: int) -> Any:
        """Remove and return the item at ``index``, keeping the order."""
        self._check_index(index)
        return self._items.pop(index)

    def unordered_remove_by_index(self, index: int) -> Any:
        """Remove and return the item at ``index``, moving the last item into its place."""
        self._check_index(index)
        last = self._items.pop()
        if index == len(self._items):
            return last
        removed = self._items[index]
        self._items[index] = last
        return removed

    def _remove_at(self, index: int, ordered: bool) -> bool:
        if index < 0:
            return False
        if ordered:
            self.ordered_remove_by_index(index)
        else:
            self.unordered_remove_by_index(index)
        return True

    def ordered_remove_by_identity(self, item: Any) -> bool:
        return self._remove_at(self.find_index_by_identity(item), ordered=True)

    def unordered_remove_by_identity(self, item: Any) -> bool:
        return self._remove_at(self.find_index_by_identity(item), ordered=False)

    def ordered_remove_one_by_value(self, item: Any) -> bool:
        return self._remove_at(self.find_index_by_value(item), ordered=True)

    def unordered_remove_one_by_value(self, item: Any) -> bool:
        return self._remove_at(self.find_index_by_value(item), ordered=False)