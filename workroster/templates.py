"""Generic helpers: swapping, descending sort, integer addition and equality."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass
class Member:
    """A person compared by name and age."""

    name: str
    age: int


def swap(a: T, b: T) -> Tuple[T, T]:
    """The two values in exchanged order."""
    return b, a


def selection_sort_desc(items: Iterable[T]) -> List[T]:
    """A new list of the items from largest to smallest."""
    return sorted(items, reverse=True)


def _as_int(value: Union[int, str]) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected an int or a single character: {value!r}")
        return ord(value)
    return int(value)


def add_ints(a: Union[int, str], b: Union[int, str]) -> int:
    """Sum of two integers; a single character counts as its code point."""
    return _as_int(a) + _as_int(b)


def values_equal(a: Any, b: Any) -> bool:
    """Whether the two values compare equal."""
    return a == b