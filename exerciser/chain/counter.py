"""A program that counts how often an account has been greeted."""

from __future__ import annotations

import logging
import struct
from collections.abc import Sequence
from dataclasses import dataclass

from .pubkey import Pubkey
from .runtime import AccountInfo, ProgramError, next_account_info

log = logging.getLogger(__name__)

_U32 = struct.Struct("<I")


@dataclass
class GreetingStruct:
    """State stored in a greeted account: a 32-bit little-endian counter."""

    counter: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> GreetingStruct:
        """Decode exactly four bytes."""
        if len(data) != _U32.size:
            raise ProgramError(
                ProgramError.BORSH_IO_ERROR, f"expected {_U32.size} bytes, got {len(data)}"
            )
        (counter,) = _U32.unpack(bytes(data))
        return cls(counter)

    def to_bytes(self) -> bytes:
        try:
            return _U32.pack(self.counter)
        except struct.error as exc:
            raise ProgramError(ProgramError.BORSH_IO_ERROR, str(exc)) from None


def process_instruction(
    program_id: Pubkey, accounts: Sequence[AccountInfo], instruction_data: bytes
) -> None:
    """Increment the counter stored in the first account, which the program must own."""
    log.info("[lib] Solana Example2 counter program entrypoint")
    hello_account = next_account_info(iter(accounts))
    log.info("[lib] hello account: %s", hello_account.key)

    if hello_account.owner != program_id:
        log.info(" Greeted account does not have the correct program id")
        raise ProgramError(ProgramError.INCORRECT_PROGRAM_ID)
    log.info(" Greeted account has the correct program id")

    greeting = GreetingStruct.from_bytes(hello_account.data)
    if greeting.counter == 2**32 - 1:
        raise ProgramError(ProgramError.ARITHMETIC_OVERFLOW)
    greeting.counter += 1
    log.info(
        "Program added to the greeting counter struct stored at: %s", hello_account.key
    )

    encoded = greeting.to_bytes()
    hello_account.data[: len(encoded)] = encoded
    log.info(" Greeted %d time(s)!", greeting.counter)