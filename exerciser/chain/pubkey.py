"""Public keys, base58 text form and program-derived addresses."""

from __future__ import annotations

import hashlib
import itertools
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

PUBKEY_BYTES = 32
MAX_SEEDS = 16
MAX_SEED_LEN = 32

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}
_PDA_MARKER = b"ProgramDerivedAddress"

# Edwards25519 field prime and curve constant.
_P = 2**255 - 19
_D = (-121665 * pow(121666, -1, _P)) % _P

_unique_counter = itertools.count(1)
_unique_lock = threading.Lock()


def b58encode(data: bytes) -> str:
    """Encode bytes as base58; each leading zero byte becomes a '1'."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    padding = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    return "1" * padding + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text; raise ValueError on characters outside the alphabet."""
    stripped = text.lstrip("1")
    padding = len(text) - len(stripped)
    number = 0
    for char in stripped:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * padding + body


def is_on_curve(data: bytes) -> bool:
    """True when the 32 bytes decompress to a point on the ed25519 curve."""
    data = bytes(data)
    if len(data) != PUBKEY_BYTES:
        return False
    y = (int.from_bytes(data, "little") & ((1 << 255) - 1)) % _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    x2 = u * pow(v, -1, _P) % _P
    return x2 == 0 or pow(x2, (_P - 1) // 2, _P) == 1


@dataclass(frozen=True, order=True)
class Pubkey:
    """A 32-byte account address."""

    data: bytes = field(default=bytes(PUBKEY_BYTES))

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != PUBKEY_BYTES:
            raise ValueError(f"a public key has {PUBKEY_BYTES} bytes, not {len(data)}")
        object.__setattr__(self, "data", data)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return b58encode(self.data)

    @classmethod
    def from_string(cls, text: str) -> Pubkey:
        """Parse the base58 text form of a key."""
        return cls(b58decode(text))

    @classmethod
    def new_unique(cls) -> Pubkey:
        """A key different from every other key made this way in this process."""
        with _unique_lock:
            number = next(_unique_counter)
        return cls(number.to_bytes(8, "big") + bytes(PUBKEY_BYTES - 8))


def _check_seeds(seeds: list[bytes]) -> None:
    if len(seeds) > MAX_SEEDS:
        raise ValueError(f"at most {MAX_SEEDS} seeds are allowed, got {len(seeds)}")
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise ValueError(f"a seed has at most {MAX_SEED_LEN} bytes, got {len(seed)}")


def _derive(seeds: list[bytes], program_id: Pubkey) -> Pubkey | None:
    digest = hashlib.sha256()
    for seed in seeds:
        digest.update(seed)
    digest.update(bytes(program_id))
    digest.update(_PDA_MARKER)
    result = digest.digest()
    return None if is_on_curve(result) else Pubkey(result)


def create_program_address(seeds: Iterable[bytes], program_id: Pubkey) -> Pubkey:
    """Derive an address from seeds; raise ValueError if it lies on the curve."""
    seeds = [bytes(seed) for seed in seeds]
    _check_seeds(seeds)
    address = _derive(seeds, program_id)
    if address is None:
        raise ValueError("Provided seeds do not result in a valid address")
    return address


def find_program_address(seeds: Iterable[bytes], program_id: Pubkey) -> tuple[Pubkey, int]:
    """Find the highest bump seed giving an off-curve address; return it with the address."""
    seeds = [bytes(seed) for seed in seeds]
    _check_seeds([*seeds, b"\0"])
    for bump in range(255, 0, -1):
        address = _derive([*seeds, bytes([bump])], program_id)
        if address is not None:
            return address, bump
    raise ValueError("Unable to find a viable program address bump seed")