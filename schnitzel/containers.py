"""Fixed-capacity array, bump allocator and size helpers."""

from __future__ import annotations

from typing import Any, Iterator


def bit(x: int) -> int:
    return 1 << x


def kb(x: int) -> int:
    return 1024 * x


def mb(x: int) -> int:
    return 1024 * kb(x)


def gb(x: int) -> int:
    return 1024 * mb(x)


class FixedArray:
    """A list with a fixed maximum number of elements."""

    def __init__(self, max_elements: int) -> None:
        self.max_elements = max_elements
        self._elements: list[Any] = []

    def _check_index(self, idx: int) -> None:
        if idx < 0:
            raise IndexError("idx negative!")
        if idx >= len(self._elements):
            raise IndexError("Idx out of bounds!")

    def __getitem__(self, idx: int) -> Any:
        self._check_index(idx)
        return self._elements[idx]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._elements))

    @property
    def count(self) -> int:
        return len(self._elements)

    def add(self, element: Any) -> int:
        """Append ``element`` and return its index."""
        if self.is_full():
            raise IndexError("Array Full!")
        self._elements.append(element)
        return len(self._elements) - 1

    def remove_idx_and_swap(self, idx: int) -> None:
        """Remove the element at ``idx`` by moving the last element into its place."""
        self._check_index(idx)
        last = self._elements.pop()
        if idx < len(self._elements):
            self._elements[idx] = last

    def clear(self) -> None:
        self._elements.clear()

    def is_full(self) -> bool:
        return len(self._elements) == self.max_elements


class BumpAllocator:
    """Linear allocator handing out 8-byte aligned slices of one zeroed buffer."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.used = 0
        self.memory = bytearray(capacity)

    def alloc(self, size: int) -> memoryview:
        """Reserve ``size`` bytes and return a writable view of them."""
        aligned = (size + 7) & ~7
        if self.used + aligned > self.capacity:
            raise MemoryError("BumpAllocator is full")
        start = self.used
        self.used += aligned
        return memoryview(self.memory)[start:start + size]