"""First exercises: variables, functions, conditionals, primitive types and strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def loop_lines(num: int) -> list[str]:
    """The lines printed by counting loops up to num."""
    return [f"Loop! number {i + 1}" for i in range(num)]


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return b if a < b else a


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that apply to the time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def describe_character(character: str) -> str:
    """Classify a single character as alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError("expected exactly one character")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence) -> str:
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence) -> list:
    """Elements at positions 1 to 3 inclusive."""
    return list(values[1:4])


def second_of(numbers: tuple):
    return numbers[1]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def favorite_fruits() -> Iterator[str]:
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def current_favorite_course() -> str:
    return "Solana"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def describe_number(x: int) -> str:
    return "x is ten!" if x == 10 else "x is not ten!"