"""Small value types that overload arithmetic, comparison and increment."""

from dataclasses import dataclass, replace
from typing import Union


@dataclass
class Pair:
    """Two integers added field by field, or both shifted by a number."""

    a: int = 0
    b: int = 0

    def __add__(self, other: Union["Pair", int]) -> "Pair":
        if isinstance(other, Pair):
            return Pair(self.a + other.a, self.b + other.b)
        if isinstance(other, int) and not isinstance(other, bool):
            return Pair(self.a + other, self.b + other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.a}\n{self.b}"


@dataclass
class Counter:
    """An integer with pre- and post-increment."""

    value: int = 0

    def increment(self) -> "Counter":
        """Add one and return this counter, so calls can be chained."""
        self.value += 1
        return self

    def post_increment(self) -> "Counter":
        """Add one and return a copy holding the value from before."""
        before = replace(self)
        self.value += 1
        return before

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Person:
    """A person equal to another with the same name and age."""

    name: str
    age: int


@dataclass
class AgeAccumulator:
    """An age that other ages can be added onto in a chain."""

    age: int

    def add(self, other: "AgeAccumulator") -> "AgeAccumulator":
        """Add ``other``'s age to this one and return this accumulator."""
        self.age += other.age
        return self