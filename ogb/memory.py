"""Simulated allocators: a best-fit free-list heap, bump arenas and temporary storage.

Addresses are plain integers. The heap keeps real backing bytes so that
reallocation copies contents the way a native heap would.
"""

from __future__ import annotations

import threading
import warnings
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

KB = 1024
MB = KB * 1024
GB = MB * 1024

INIT_MEMORY_SIZE = 50 * KB
TEMPORARY_STORAGE_SIZE = 2 * MB
DEFAULT_PAGE_SIZE = 4096
DEFAULT_HEAP_BLOCK_SIZE = 1 * MB
MAX_HEAP_BLOCK_SIZE = 500 * MB

HEAP_ALIGNMENT = 16
HEAP_BLOCK_HEADER_SIZE = 32
HEAP_METADATA_SIZE = 16
_HEAP_BASE_ADDRESS = 0x10000
_FREED_FILL = 0x69


class HeapError(RuntimeError):
    """A bad pointer was handed to the heap, or a request it cannot serve."""


def _align_next(value: int, alignment: int) -> int:
    return (value + alignment - 1) // alignment * alignment


@dataclass
class _Block:
    base: int
    size: int
    data: bytearray = field(repr=False)
    free: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def start(self) -> int:
        return self.base + HEAP_BLOCK_HEADER_SIZE

    @property
    def usable(self) -> int:
        return self.size - HEAP_BLOCK_HEADER_SIZE

    def contains(self, address: int) -> bool:
        return self.base <= address < self.base + self.size

    def best_fit(self, size: int) -> Optional[Tuple[int, int]]:
        """Index and slack of the best free node; an exact fit wins at once."""
        best: Optional[Tuple[int, int]] = None
        for index, (_, node_size) in enumerate(self.free):
            if node_size == size:
                return index, 0
            if node_size > size:
                delta = node_size - size
                if best is None or delta < best[1]:
                    best = (index, delta)
        return best

    def release(self, start: int, size: int) -> None:
        """Return a range to the address-ordered free list, merging neighbours."""
        i = bisect_left(self.free, (start,))
        merged_size = size
        if i < len(self.free) and self.free[i][0] == start + size:
            merged_size += self.free[i][1]
            del self.free[i]
        if i > 0 and sum(self.free[i - 1]) == start:
            prev_start, prev_size = self.free[i - 1]
            self.free[i - 1] = (prev_start, prev_size + merged_size)
        else:
            self.free.insert(i, (start, merged_size))


class Heap:
    """A general purpose heap made of page-aligned blocks with best-fit free lists."""

    METADATA_SIZE = HEAP_METADATA_SIZE
    ALIGNMENT = HEAP_ALIGNMENT

    def __init__(
        self,
        block_size: int = DEFAULT_HEAP_BLOCK_SIZE,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_allocation_size: int = MAX_HEAP_BLOCK_SIZE,
    ) -> None:
        if block_size <= 0 or page_size <= 0:
            raise ValueError("block and page sizes must be positive")
        self._page_size = page_size
        self._block_size = block_size
        self._max_allocation = _align_next(max_allocation_size, page_size)
        self._blocks: List[_Block] = []
        self._allocations: Dict[int, Tuple[int, _Block]] = {}
        self._next_base = _HEAP_BASE_ADDRESS
        self._lock = threading.Lock()
        self._new_block(block_size)

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def _new_block(self, size: int) -> _Block:
        total = _align_next(size + HEAP_BLOCK_HEADER_SIZE, self._page_size)
        block = _Block(base=self._next_base, size=total, data=bytearray(total))
        block.free.append((block.start, block.usable))
        self._next_base += total
        self._blocks.append(block)
        return block

    def _lookup(self, address: int) -> Tuple[int, int, _Block]:
        if not any(block.contains(address) for block in self._blocks):
            raise HeapError("a bad pointer was passed to the heap: it is out of heap bounds")
        meta = address - HEAP_METADATA_SIZE
        entry = self._allocations.get(meta)
        if entry is None:
            raise HeapError(
                "heap error: either a bad pointer was passed to dealloc or the heap is corrupt"
            )
        size, block = entry
        return meta, size, block

    def alloc(self, size: int) -> int:
        """Allocate ``size`` zeroed bytes and return their 16-byte aligned address."""
        if size < 0:
            raise ValueError("allocation size cannot be negative")
        with self._lock:
            total = (size + HEAP_METADATA_SIZE + HEAP_ALIGNMENT) & ~(HEAP_ALIGNMENT - 1)
            if total >= self._max_allocation:
                raise HeapError(f"allocation of {size} bytes is larger than a heap block")

            best: Optional[Tuple[_Block, int, int]] = None
            for block in self._blocks:
                if block.usable < total:
                    continue
                found = block.best_fit(total)
                if found is None:
                    continue
                index, delta = found
                if best is None or delta < best[2]:
                    best = (block, index, delta)
                if delta == 0:
                    break

            if best is None:
                block = self._new_block(max(self._block_size, total))
                best = (block, 0, block.usable - total)

            block, index, _ = best
            start, free_size = block.free[index]
            if free_size == total:
                del block.free[index]
            else:
                block.free[index] = (start + total, free_size - total)

            self._allocations[start] = (total, block)
            offset = start - block.base + HEAP_METADATA_SIZE
            block.data[offset:offset + total - HEAP_METADATA_SIZE] = bytes(
                total - HEAP_METADATA_SIZE
            )
            return start + HEAP_METADATA_SIZE

    def dealloc(self, address: int) -> None:
        """Free an address previously returned by ``alloc``."""
        with self._lock:
            meta, size, block = self._lookup(address)
            del self._allocations[meta]
            offset = meta - block.base
            block.data[offset:offset + size] = bytes([_FREED_FILL]) * size
            block.release(meta, size)

    def realloc(self, address: Optional[int], size: int) -> int:
        """Move an allocation to a new one of ``size`` bytes, keeping its contents."""
        if address is None:
            return self.alloc(size)
        with self._lock:
            _, old_total, old_block = self._lookup(address)
            old_offset = address - old_block.base
            keep = min(size, old_total - HEAP_METADATA_SIZE)
            contents = bytes(old_block.data[old_offset:old_offset + keep])
        new_address = self.alloc(size)
        self.buffer(new_address)[:keep] = contents
        self.dealloc(address)
        return new_address

    def allocation_size(self, address: int) -> int:
        """Usable bytes behind ``address``, including alignment padding."""
        with self._lock:
            _, size, _ = self._lookup(address)
            return size - HEAP_METADATA_SIZE

    def buffer(self, address: int) -> memoryview:
        """A writable view of the bytes of an allocation."""
        with self._lock:
            _, size, block = self._lookup(address)
            offset = address - block.base
            return memoryview(block.data)[offset:offset + size - HEAP_METADATA_SIZE]

    def free_bytes(self) -> int:
        """Total size of every free node in every block."""
        with self._lock:
            return sum(node_size for block in self._blocks for _, node_size in block.free)


class InitializationArena:
    """A fixed bump allocator for use before the heap exists; it never frees."""

    def __init__(self, capacity: int = INIT_MEMORY_SIZE) -> None:
        self.capacity = capacity
        self.head = 0

    def alloc(self, size: int) -> int:
        address = self.head
        self.head += size
        if self.head >= self.capacity:
            raise MemoryError(
                "Out of initialization memory! Please provide more by increasing INIT_MEMORY_SIZE"
            )
        return address


class TemporaryStorage:
    """A ring of scratch memory that wraps to the start when it overflows."""

    def __init__(self, capacity: int = TEMPORARY_STORAGE_SIZE) -> None:
        self.capacity = capacity
        self.pointer = 0
        self.has_warned_overflow = False

    def alloc(self, size: int) -> int:
        if size >= self.capacity:
            raise ValueError("allocation is too large for temporary storage")
        address = self.pointer
        self.pointer += size
        if self.pointer >= self.capacity:
            if not self.has_warned_overflow:
                warnings.warn(
                    "temporary storage was overflown, we wrap around at the start.",
                    RuntimeWarning,
                    stacklevel=2,
                )
                self.has_warned_overflow = True
            self.pointer = 0
            return self.alloc(size)
        return address

    def reset(self) -> None:
        self.pointer = 0
        self.has_warned_overflow = False


class Arena:
    """A bump allocator over a region of ``size`` bytes starting at ``start``."""

    def __init__(self, size: int, start: int = 0) -> None:
        self.size = _align_next(size, 8)
        self.start = start
        self.next = start

    @property
    def used(self) -> int:
        return self.next - self.start

    def push(self, size: int) -> int:
        """Take ``size`` bytes from the arena as they are."""
        address = self.next
        self.next += size
        return address

    def allocate(self, size: int) -> int:
        """Take ``size`` bytes, rounded up to 8 when larger than 8."""
        if size > 8:
            size = _align_next(size, 8)
        return self.push(size)