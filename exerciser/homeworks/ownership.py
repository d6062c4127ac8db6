"""Ownership exercises: filling vectors, mutable borrows and string handling."""

from __future__ import annotations


def fill_vec(values: list[int]) -> list[int]:
    """A new list: the given values followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]


def fill_vec_in_place(values: list[int]) -> None:
    """Append 22, 44 and 66 to the list."""
    values.extend((22, 44, 66))


def new_filled_vec() -> list[int]:
    """A fresh list holding 22, 44 and 66."""
    return fill_vec([])


def describe_vec(name: str, values: list[int]) -> str:
    return f"{name} has length {len(values)} content `{values}`"


def add_in_turn(x: int) -> int:
    """Add 100, then 1000, one change after the other."""
    x += 100
    x += 1000
    return x


def get_char(data: str) -> str:
    """The last character of the text, which must not be empty."""
    if not data:
        raise ValueError("empty string has no last character")
    return data[-1]


def string_uppercase(data: str) -> str:
    """Print the text in upper case and return it."""
    data = data.upper()
    print(data)
    return data