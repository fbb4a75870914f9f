"""Callable objects and the predicates used with them."""

import sys
from typing import Callable, Iterable, List, Optional, TextIO, TypeVar

T = TypeVar("T")


class Adder:
    """Adds two values when called."""

    def __call__(self, a, b):
        return a + b


class CountingPrinter:
    """Prints text when called and counts how often it was called."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream
        self.count = 0

    def __call__(self, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        print("operator()被调用了", file=out)
        print(text, file=out)
        self.count += 1


def greater_than_five(value) -> bool:
    """Whether ``value`` is greater than five."""
    return value > 5


def find_first(items: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """The first item the predicate accepts, or None."""
    return next((item for item in items if predicate(item)), None)


def sort_descending(items: Iterable[T]) -> List[T]:
    """A new list of the items from largest to smallest."""
    return sorted(items, reverse=True)


def print_with(printer: Callable[[str], None], text: str) -> None:
    """Hand ``text`` to ``printer``."""
    printer(text)