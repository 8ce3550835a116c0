"""A growable array with explicit capacity, and a fixed-size array."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, List, Optional, TypeVar, Union, overload

T = TypeVar("T")


class Array(Generic[T]):
    """A dynamic array that tracks its capacity like a reserved buffer.

    Growth follows a fixed rule: when an insertion needs more room than the
    current capacity, capacity becomes one and a half times the new size.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = []
        self._capacity = 0
        if items is not None:
            if isinstance(items, Array):
                self.reserve(len(items))
            self.insert_many(0, items)

    @classmethod
    def filled(cls, size: int, value: Optional[T] = None) -> "Array[T]":
        """Return an array of ``size`` copies of ``value``."""
        array: Array[T] = cls()
        array.resize(size, value)
        return array

    def _grow_for(self, new_size: int) -> None:
        if new_size > self._capacity:
            self.reserve(new_size * 3 // 2)

    def _check_position(self, where: int) -> None:
        if not 0 <= where <= len(self._items):
            raise IndexError(f"position {where} out of range")

    def assign(self, items: Iterable[T]) -> None:
        """Replace the contents with ``items``, keeping the storage."""
        values = list(items)
        self.clear()
        self.insert_many(0, values)

    def capacity(self) -> int:
        """Return how many elements fit without growing."""
        return self._capacity

    def empty(self) -> bool:
        """Return whether the array holds no elements."""
        return not self._items

    def front(self) -> T:
        """Return the first element."""
        if not self._items:
            raise IndexError("front of an empty array")
        return self._items[0]

    def back(self) -> T:
        """Return the last element."""
        if not self._items:
            raise IndexError("back of an empty array")
        return self._items[-1]

    def resize(self, size: int, value: Optional[T] = None) -> None:
        """Grow with copies of ``value`` or shrink to ``size`` elements."""
        if size < 0:
            raise ValueError("size must be non-negative")
        self.reserve(size)
        current = len(self._items)
        if size > current:
            self._items.extend([value] * (size - current))  # type: ignore[list-item]
        else:
            del self._items[size:]

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def reserve(self, capacity: int) -> None:
        """Make room for at least ``capacity`` elements."""
        if capacity > self._capacity:
            self._capacity = capacity

    def push_back(self, value: T) -> None:
        """Append ``value``."""
        self._grow_for(len(self._items) + 1)
        self._items.append(value)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty array")
        return self._items.pop()

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the number of elements."""
        self._capacity = len(self._items)

    def swap(self, other: "Array[T]") -> None:
        """Exchange contents and capacity with ``other``."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def insert(self, where: int, value: Optional[T] = None) -> None:
        """Insert ``value`` before position ``where``."""
        self._check_position(where)
        self._grow_for(len(self._items) + 1)
        self._items.insert(where, value)  # type: ignore[arg-type]

    def insert_many(self, where: int, values: Iterable[T]) -> None:
        """Insert all of ``values`` before position ``where``."""
        self._check_position(where)
        new_values = list(values)
        if not new_values:
            return
        self._grow_for(len(self._items) + len(new_values))
        self._items[where:where] = new_values

    def _check_range(self, first: int, last: Optional[int]) -> int:
        if last is None:
            last = first + 1
        if not 0 <= first <= last <= len(self._items):
            raise IndexError(f"range [{first}, {last}) out of bounds")
        return last

    def erase(self, first: int, last: Optional[int] = None) -> int:
        """Remove ``[first, last)`` keeping order; return ``first``."""
        last = self._check_range(first, last)
        del self._items[first:last]
        return first

    def erase_unordered(self, first: int, last: Optional[int] = None) -> int:
        """Remove ``[first, last)`` by moving tail elements into the gap."""
        last = self._check_range(first, last)
        count = last - first
        moved = min(count, len(self._items) - last)
        size = len(self._items)
        self._items[first:first + moved] = self._items[size - moved:size]
        del self._items[size - count:]
        return first

    def add(self, value: T) -> T:
        """Append ``value`` and return it."""
        self.push_back(value)
        return value

    def emplace_at(self, where: int, value: T) -> None:
        """Insert ``value`` at position ``where``."""
        self.insert(where, value)

    def remove(self, where: int) -> int:
        """Remove the element at ``where``; return ``where``."""
        return self.erase(where)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "Array[T]": ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return Array(self._items[index])
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise TypeError("slice assignment is not supported")
        self._items[index] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Array):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Array({self._items!r})"


class FixedArray(Generic[T]):
    """An array whose length is set at creation and never changes."""

    def __init__(self, size: int, value: Optional[T] = None) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._items: List[Optional[T]] = [value] * size

    def front(self) -> Optional[T]:
        """Return the first element."""
        if not self._items:
            raise IndexError("front of an empty array")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Optional[T]]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Optional[T]:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise TypeError("slice assignment is not supported")
        self._items[index] = value

    def __repr__(self) -> str:
        return f"FixedArray({self._items!r})"