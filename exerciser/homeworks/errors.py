"""Error-handling exercises: nametags, token costs and positive integers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width the way the exercises expect."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; an empty name is an error."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in 32 bits")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying the typed quantity with the given tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationKind(Enum):
    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value could not become a PositiveNonzeroInteger."""

    def __init__(self, kind: CreationKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.kind is self.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationKind.ZERO)
        if self.value < 0:
            raise CreationError(CreationKind.NEGATIVE)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a PositiveNonzeroInteger."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_positive(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and require it to be positive."""
    return PositiveNonzeroInteger(_parse_int(text, 64))


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Like parse_positive, but every failure is a ParsePosNonzeroError."""
    try:
        value = _parse_int(s, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc