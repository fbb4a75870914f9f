"""Ordered containers: a sorted map, a set with custom order and a multiset."""

from functools import total_ordering
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from sortedcontainers import SortedDict, SortedKeyList, SortedList


@total_ordering
class _Descending:
    """Wraps a value so that larger values sort first."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Descending) and self.value == other.value

    def __lt__(self, other: "_Descending") -> bool:
        return other.value < self.value

    def __hash__(self) -> int:
        return hash(self.value)


class SortedMap:
    """A mapping kept in key order, ascending unless ``reverse``."""

    def __init__(self, items: Optional[Iterable[Tuple[Any, Any]]] = None,
                 reverse: bool = False) -> None:
        self.reverse = reverse
        self._data = SortedDict(_Descending) if reverse else SortedDict()
        for key, value in items or ():
            self.insert(key, value)

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key`` unless present; return whether it was added."""
        if key in self._data:
            return False
        self._data[key] = value
        return True

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[key] = value

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __delitem__(self, key: Any) -> None:
        """Remove ``key``; raise KeyError when it is not held."""
        if key not in self._data:
            raise KeyError(key)
        self._data.pop(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def pop_first(self) -> Tuple[Any, Any]:
        """Remove and return the first pair; raise KeyError when empty."""
        if not self._data:
            raise KeyError("pop_first from an empty map")
        return self._data.popitem(0)

    def items(self) -> List[Tuple[Any, Any]]:
        """Every key and value, in order."""
        return list(self._data.items())

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._data))


class UniqueSet:
    """Values in order by ``key``; a value equivalent to one held is refused."""

    def __init__(self, key: Optional[Callable[[Any], Any]] = None,
                 reverse: bool = False) -> None:
        base = key if key is not None else (lambda value: value)
        self._sort_key = (lambda value: _Descending(base(value))) if reverse else base
        self._items = SortedKeyList(key=self._sort_key)

    def insert(self, value: Any) -> Tuple[Any, bool]:
        """Add ``value`` when no equivalent one is held.

        Returns the element now in the set for that key and whether the
        insertion happened.
        """
        key = self._sort_key(value)
        pos = self._items.bisect_key_left(key)
        if pos < len(self._items):
            existing = self._items[pos]
            if not key < self._sort_key(existing):
                return existing, False
        self._items.add(value)
        return value, True

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class MultiSet:
    """Values kept in ascending order, duplicates allowed."""

    def __init__(self) -> None:
        self._items = SortedList()

    def add(self, value: Any) -> None:
        self._items.add(value)

    def count(self, value: Any) -> int:
        """How many times ``value`` is held."""
        return self._items.count(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)