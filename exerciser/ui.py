"""Coloured status lines and a progress spinner for the terminal."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _print_line(symbol: str, message: str, colour: str) -> None:
    console = Console(highlight=False)
    line = Text()
    line.append(symbol, style=colour)
    line.append(" ")
    line.append(message, style=colour)
    console.print(line, soft_wrap=True)


def warn(message: str) -> None:
    """Print a red warning line."""
    _print_line("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _print_line("✓" if no_emoji() else "✅", message, "green")


class _Spinner:
    """A running spinner whose message can be changed."""

    def __init__(self, status: Status, message: str) -> None:
        self._status = status
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def update(self, message: str) -> None:
        self._message = message
        self._status.update(Text(message))


@contextmanager
def spinner(message: str) -> Iterator[_Spinner]:
    """Show a spinner on stderr for the duration of the block; it is cleared on exit."""
    console = Console(stderr=True)
    with console.status(Text(message)) as status:
        yield _Spinner(status, message)