"""Rock, paper, scissors with committed hands: hashes first, then the hands."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .pubkey import Pubkey


class RpsError(Exception):
    """A move was rejected; code names the reason."""

    MISSING_PLAYER = "MissingPlayer"
    WRONG_HAND_CHAR = "WrongHandChar"
    WRONG_HASH = "WrongHash"

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code


class Hand(Enum):
    ROCK = "0"
    PAPER = "1"
    SCISSORS = "2"

    @classmethod
    def from_char(cls, hand: str) -> Hand:
        """'0' is rock, '1' paper, '2' scissors."""
        try:
            return cls(hand)
        except ValueError:
            raise RpsError(RpsError.WRONG_HAND_CHAR) from None

    def beats(self) -> Hand:
        """The hand this one defeats."""
        return _BEATS[self]


_BEATS = {Hand.ROCK: Hand.SCISSORS, Hand.PAPER: Hand.ROCK, Hand.SCISSORS: Hand.PAPER}


class HandResult(Enum):
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


def hash_hand(hand_string: str) -> bytes:
    """The commitment for a hand string."""
    return hashlib.sha256(hand_string.encode("utf-8")).digest()


@dataclass
class Game:
    """A game between two players."""

    MAXIMUM_SIZE: ClassVar[int] = (32 * 2) + (32 * 2) + 3 * 2

    players: tuple[Pubkey, Pubkey]
    hashed_hand: list[bytes] = field(default_factory=lambda: [bytes(32), bytes(32)])
    hash_submitted: list[bool] = field(default_factory=lambda: [False, False])
    hand: list[Hand] = field(default_factory=lambda: [Hand.ROCK, Hand.ROCK])
    hand_submitted: list[bool] = field(default_factory=lambda: [False, False])
    winner: str = ""

    def __post_init__(self) -> None:
        self.players = tuple(self.players)
        if len(self.players) != 2:
            raise ValueError("a game has exactly two players")

    def get_player_index(self, player: Pubkey) -> int:
        try:
            return self.players.index(player)
        except ValueError:
            raise RpsError(RpsError.MISSING_PLAYER) from None

    def pick_winner(self) -> HandResult:
        """Result from the first player's point of view."""
        if self.hand[0].beats() == self.hand[1]:
            return HandResult.WIN
        if self.hand[1].beats() == self.hand[0]:
            return HandResult.LOSE
        return HandResult.DRAW

    def place_hash(self, hashed_hand: bytes, indx: int) -> None:
        hashed_hand = bytes(hashed_hand)
        if len(hashed_hand) != 32:
            raise ValueError("a hand hash has 32 bytes")
        self.hashed_hand[indx] = hashed_hand
        self.hash_submitted[indx] = True

    def place_hand(self, hand_string: str, indx: int) -> None:
        """Reveal a hand; its hash must match the committed one."""
        if hash_hand(hand_string) != self.hashed_hand[indx]:
            raise RpsError(RpsError.WRONG_HASH)
        first_word = hand_string.split(" ")[0]
        if not first_word:
            raise RpsError(RpsError.WRONG_HAND_CHAR)
        self.hand[indx] = Hand.from_char(first_word[0])
        self.hand_submitted[indx] = True

        if all(self.hand_submitted):
            match self.pick_winner():
                case HandResult.WIN:
                    self.winner = str(self.players[0])
                case HandResult.LOSE:
                    self.winner = str(self.players[1])
                case HandResult.DRAW:
                    self.winner = "DRAW"