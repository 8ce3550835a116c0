"""Alignment helpers and allocators over a simulated address space.

Addresses are plain integers. Each allocator owns the bytes behind the
addresses it hands out; ``read`` and ``write`` move data in and out of them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

_HEAP_BASE = 0x10000
_MALLOC_ALIGNMENT = 16
_PAGE = 4096

DEFAULT_BLOCK_SIZE = 8_388_608


def align(value: int, alignment: int) -> int:
    """Round ``value`` up to a multiple of ``alignment`` (a power of two).

    An alignment of zero leaves ``value`` unchanged.
    """
    if alignment == 0:
        return value
    mask = ~(alignment - 1)
    return (value + alignment - 1) & mask


def is_aligned(value: int, alignment: int) -> bool:
    """Return whether ``value`` is a multiple of ``alignment`` (a power of two)."""
    return (value & (alignment - 1)) == 0


class Allocator(ABC):
    """Interface shared by the allocators."""

    @abstractmethod
    def malloc(self, size: int, alignment: int = 0) -> int:
        """Reserve ``size`` bytes and return their address."""

    @abstractmethod
    def realloc(self, address: Optional[int], size: int, alignment: int = 0) -> Optional[int]:
        """Move an allocation to a region of ``size`` bytes; return its address."""

    @abstractmethod
    def free(self, address: Optional[int]) -> None:
        """Release the allocation at ``address``."""

    @abstractmethod
    def read(self, address: int, size: int) -> bytes:
        """Return ``size`` bytes starting at ``address``."""

    @abstractmethod
    def write(self, address: int, data: bytes) -> None:
        """Store ``data`` starting at ``address``."""

    def malloc_zeroed(self, size: int, alignment: int = 0) -> int:
        """Reserve ``size`` bytes, set them to zero and return their address."""
        address = self.malloc(size, alignment)
        if size:
            self.write(address, bytes(size))
        return address


class DefaultAllocator(Allocator):
    """General-purpose allocator: every allocation is its own region."""

    def __init__(self) -> None:
        self._allocations: Dict[int, bytearray] = {}
        self._next = _HEAP_BASE

    def malloc(self, size: int, alignment: int = 0) -> int:
        if size < 0:
            raise ValueError("size must be non-negative")
        address = align(self._next, max(alignment, _MALLOC_ALIGNMENT))
        self._allocations[address] = bytearray(size)
        self._next = address + max(size, 1)
        return address

    def realloc(self, address: Optional[int], size: int, alignment: int = 0) -> int:
        size = align(size, alignment)
        if address is None:
            return self.malloc(size)
        try:
            old = self._allocations.pop(address)
        except KeyError:
            raise ValueError(f"address {address:#x} was not allocated here") from None
        new_address = self.malloc(size)
        keep = min(len(old), size)
        self._allocations[new_address][:keep] = old[:keep]
        return new_address

    def free(self, address: Optional[int]) -> None:
        if address is None:
            return
        if self._allocations.pop(address, None) is None:
            raise ValueError(f"address {address:#x} was not allocated here")

    def _locate(self, address: int, size: int) -> Tuple[bytearray, int]:
        for base, buffer in self._allocations.items():
            if base <= address and address + size <= base + len(buffer):
                return buffer, address - base
        raise ValueError(f"range at {address:#x} of {size} bytes is not allocated")

    def read(self, address: int, size: int) -> bytes:
        buffer, offset = self._locate(address, size)
        return bytes(buffer[offset:offset + size])

    def write(self, address: int, data: bytes) -> None:
        buffer, offset = self._locate(address, len(data))
        buffer[offset:offset + len(data)] = data


@dataclass
class MemoryFragment:
    """A free range ``[begin, begin + size)`` inside a block."""

    begin: int
    end: int
    size: int


@dataclass
class MemoryBlock:
    """One block of memory and the free fragments inside it."""

    memory: int
    data: bytearray
    fragments: List[MemoryFragment] = field(default_factory=list)
    free_memory: int = 0


class BlockAllocator(Allocator):
    """Carves allocations out of large fixed-size blocks.

    Freed ranges become fragments at the front of their block's free list and
    are not merged with their neighbours.
    """

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if block_size <= 0:
            raise ValueError("block size must be positive")
        self._block_size = block_size
        self._blocks: List[MemoryBlock] = []
        self._sizes: Dict[int, int] = {}
        self._next_base = _HEAP_BASE
        self._allocate_block()

    @property
    def number_of_blocks(self) -> int:
        """The number of blocks reserved so far."""
        return len(self._blocks)

    def _allocate_block(self) -> MemoryBlock:
        base = self._next_base
        self._next_base = align(base + self._block_size, _PAGE) + _PAGE
        block = MemoryBlock(
            memory=base,
            data=bytearray(self._block_size),
            fragments=[MemoryFragment(base, base + self._block_size, self._block_size)],
            free_memory=self._block_size,
        )
        self._blocks.append(block)
        return block

    def _alloc_from_fragment(self, block: MemoryBlock, index: int, size: int) -> int:
        fragment = block.fragments[index]
        start = fragment.begin
        block.free_memory -= size
        fragment.begin = start + size
        fragment.size -= size
        if fragment.size == 0:
            del block.fragments[index]
        self._sizes[start] = size
        return start

    def malloc(self, size: int, alignment: int = 0) -> int:
        size = align(size, alignment)
        if size <= 0:
            raise ValueError("size must be positive")
        if size > self._block_size:
            raise ValueError(f"size {size} exceeds the block size {self._block_size}")
        for block in self._blocks:
            if block.free_memory < size:
                continue
            for index, fragment in enumerate(block.fragments):
                if fragment.size >= size:
                    return self._alloc_from_fragment(block, index, size)
        block = self._allocate_block()
        return self._alloc_from_fragment(block, 0, size)

    def realloc(self, address: Optional[int], size: int, alignment: int = 0) -> Optional[int]:
        if address is None:
            return None
        if address not in self._sizes:
            raise ValueError(f"address {address:#x} was not allocated here")
        old_size = self._sizes[address]
        new_address = self.malloc(size, alignment)
        self.write(new_address, self.read(address, min(old_size, size)))
        self.free(address)
        return new_address

    def free(self, address: Optional[int]) -> None:
        if address is None:
            return
        try:
            size = self._sizes.pop(address)
        except KeyError:
            raise ValueError(f"address {address:#x} was not allocated here") from None
        end = address + size
        for block in self._blocks:
            if address >= block.memory and end <= block.memory + self._block_size:
                offset = address - block.memory
                block.data[offset:offset + size] = bytes(size)
                block.fragments.insert(0, MemoryFragment(address, end, size))
                block.free_memory += size
                return

    def check_memory(self, address: Optional[int]) -> bool:
        """Return whether ``address`` starts a live allocation."""
        if address is None:
            return False
        return address in self._sizes

    def _locate(self, address: int, size: int) -> Tuple[bytearray, int]:
        for block in self._blocks:
            if block.memory <= address and address + size <= block.memory + self._block_size:
                return block.data, address - block.memory
        raise ValueError(f"range at {address:#x} of {size} bytes is outside every block")

    def read(self, address: int, size: int) -> bytes:
        data, offset = self._locate(address, size)
        return bytes(data[offset:offset + size])

    def write(self, address: int, data: bytes) -> None:
        buffer, offset = self._locate(address, len(data))
        buffer[offset:offset + len(data)] = data