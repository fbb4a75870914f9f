"""An array with a fixed capacity, filled and emptied from the back."""

import copy
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class FixedArray(Generic[T]):
    """Holds at most ``capacity`` values; pushing onto a full array is ignored."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self._capacity = capacity
        self._items: List[T] = []

    @property
    def capacity(self) -> int:
        """How many values the array can hold."""
        return self._capacity

    def push_back(self, value: T) -> bool:
        """Append ``value``; return False and leave the array as is when full."""
        if len(self._items) == self._capacity:
            return False
        self._items.append(value)
        return True

    def pop_back(self) -> Optional[T]:
        """Remove and return the last value, or None when the array is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def copy(self) -> "FixedArray[T]":
        """A new array of the same capacity holding copies of the values."""
        other: FixedArray[T] = FixedArray(self._capacity)
        other._items = [copy.copy(value) for value in self._items]
        return other

    def __repr__(self) -> str:
        return f"FixedArray(capacity={self._capacity}, items={self._items!r})"