"""Collection and generics exercises: fruit baskets, vectors, wrappers and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and at least five fruits."""
    return {"banana": 2, "orange": 3, "apple": 4, "lemon": 5}


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add five of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 5)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: list[int]) -> list[int]:
    """Each value doubled."""
    return [value * 2 for value in values]


def shopping_list() -> list[str]:
    return ["milk"]


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass
class ReportCard(Generic[T]):
    """A student's grade, numeric or alphabetic."""

    grade: T
    student_name: str
    student_age: int

    def report(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"
        )

    def __str__(self) -> str:
        return self.report()