"""Enum and option exercises: messages that drive a state, and optional values."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to stop."""


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Change to a new RGB colour."""

    color: tuple[int, int, int]

    def __post_init__(self) -> None:
        color = tuple(self.color)
        if len(color) != 3 or not all(0 <= part <= 255 for part in color):
            raise ValueError("a colour is three values from 0 to 255")
        object.__setattr__(self, "color", color)


Message = Quit | Echo | Move | ChangeColor


@dataclass
class State:
    """Colour, position and whether a quit was asked for, changed by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = tuple(color)

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"not a message: {message!r}")


def print_number(maybe_number: int | None) -> None:
    """Print a number that must be present."""
    if maybe_number is None:
        raise ValueError("no number to print")
    print(f"printing: {maybe_number}")


def numbers_table() -> list[int]:
    """Five numbers computed from their positions."""
    return [(position * 1235 + 2) // (4 * 16) for position in range(5)]


def drain_values(values: list[int | None]) -> list[int]:
    """Pop values from the end of the list until it is empty or a None is popped."""
    drained = []
    while values:
        value = values.pop()
        if value is None:
            break
        drained.append(value)
    return drained


def describe_point(point: Point | None) -> str:
    """The point's co-ordinates, or "no match" when there is no point."""
    match point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"