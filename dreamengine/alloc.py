"""Memory allocators that hand out writable byte blocks."""

from __future__ import annotations

from abc import ABC, abstractmethod

DEFAULT_ALIGNMENT = 16


def _check_alignment(alignment: int) -> None:
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError("alignment must be a positive power of two")


class Allocator(ABC):
    """Hands out blocks of memory as writable memoryviews."""

    @abstractmethod
    def allocate(self, size: int, alignment: int = DEFAULT_ALIGNMENT) -> memoryview:
        """Return a writable block of at least size bytes."""

    @abstractmethod
    def deallocate(self, block: memoryview) -> None:
        """Give a block back to the allocator."""


class MallocAllocator(Allocator):
    """Allocates each block independently."""

    def allocate(self, size: int, alignment: int = DEFAULT_ALIGNMENT) -> memoryview:
        if size < 0:
            raise ValueError("size must not be negative")
        return memoryview(bytearray(size))

    def deallocate(self, block: memoryview) -> None:
        block.release()


class ArenaAllocator(Allocator):
    """Linear allocator over one fixed buffer; blocks are freed only by reset."""

    def __init__(self, total_size: int) -> None:
        if total_size < 0:
            raise ValueError("total_size must not be negative")
        self._buffer = bytearray(total_size)
        self._view = memoryview(self._buffer)
        self._total_size = total_size
        self._offset = 0

    @property
    def total_size(self) -> int:
        return self._total_size

    @property
    def used(self) -> int:
        return self._offset

    def allocate(self, size: int, alignment: int = DEFAULT_ALIGNMENT) -> memoryview:
        if size < 0:
            raise ValueError("size must not be negative")
        _check_alignment(alignment)
        start = (self._offset + alignment - 1) & ~(alignment - 1)
        if start + size > self._total_size:
            raise MemoryError("ArenaAllocator: out of memory!")
        self._offset = start + size
        return self._view[start:start + size]

    def deallocate(self, block: memoryview) -> None:
        """Individual blocks are not freed; use reset()."""

    def reset(self) -> None:
        self._offset = 0