"""Trait and module exercises: appending "Bar", visibility, re-exports and time."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import singledispatch

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_to_str(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_bar_to_list(value: list) -> list:
    return [*value, "Bar"]


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage from the secret recipe."""
    _get_secret_recipe()
    return "sausage!"


_PEAR = "Pear"
_APPLE = "Apple"
_CUCUMBER = "Cucumber"
_CARROT = "Carrot"

FRUIT = _PEAR
VEGGIE = _CUCUMBER


def favorite_snacks() -> str:
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


def seconds_since_epoch(now: datetime | None = None) -> int:
    """Whole seconds from the Unix epoch to now; naive times are taken as UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    elapsed = now - _UNIX_EPOCH
    if elapsed < timedelta(0):
        raise ValueError("SystemTime before UNIX EPOCH!")
    return elapsed // timedelta(seconds=1)


def is_even(num: int) -> bool:
    return num % 2 == 0