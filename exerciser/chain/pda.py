"""A program that creates program-derived accounts and writes a word into them."""

from __future__ import annotations

import logging
import struct
from collections.abc import Sequence
from dataclasses import dataclass

from .pubkey import Pubkey, create_program_address
from .runtime import AccountInfo, ProgramError, Runtime, next_account_info

log = logging.getLogger(__name__)

LAMPORTS_PER_BYTE_YEAR = 3480
EXEMPTION_THRESHOLD = 2.0
ACCOUNT_STORAGE_OVERHEAD = 128

_LEN = struct.Struct("<I")


@dataclass
class StringAccount:
    """Account state: one length-prefixed UTF-8 word."""

    word: str = ""

    @classmethod
    def from_bytes(cls, data: bytes) -> StringAccount:
        """Decode from the start of data; trailing bytes are ignored."""
        data = bytes(data)
        if len(data) < _LEN.size:
            raise ProgramError(ProgramError.BORSH_IO_ERROR, "unexpected end of data")
        (length,) = _LEN.unpack_from(data)
        body = data[_LEN.size : _LEN.size + length]
        if len(body) != length:
            raise ProgramError(ProgramError.BORSH_IO_ERROR, "unexpected end of data")
        try:
            return cls(body.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise ProgramError(ProgramError.BORSH_IO_ERROR, str(exc)) from None

    def to_bytes(self) -> bytes:
        encoded = self.word.encode("utf-8")
        return _LEN.pack(len(encoded)) + encoded


@dataclass(frozen=True)
class PdaCreate:
    seed: str
    bump: int
    account_size: int


@dataclass(frozen=True)
class PdaWrite:
    seed: str


def _decode_seed(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ProgramError(ProgramError.INVALID_INSTRUCTION_DATA, str(exc)) from None


def unpack_instruction(data: bytes) -> PdaCreate | PdaWrite:
    """Decode flag, seed length, seed and, for creation, bump and account size."""
    data = bytes(data)
    log.info("[instruction] Total payload: %s", list(data))
    if len(data) < 2:
        raise ProgramError(ProgramError.BORSH_IO_ERROR, "Invalid parameters passed")
    function_flag, key_length, rest = data[0], data[1], data[2:]
    log.info("[instruction] Received function flag: %d", function_flag)

    match function_flag:
        case 0:
            log.info("[instruction] Initialising PDA")
            if len(rest) < key_length + 1:
                raise ProgramError(ProgramError.INVALID_INSTRUCTION_DATA, "payload too short")
            seed = _decode_seed(rest[:key_length])
            bump = rest[key_length]
            account_size = rest[-1]
            log.info("[instruction] extracted seed: %r", seed)
            log.info("[instruction] extracted bump: %d", bump)
            log.info("[instruction] extracted account size: %d", account_size)
            return PdaCreate(seed=seed, bump=bump, account_size=account_size)
        case 1:
            log.info("[instruction] Writing to PDA")
            if len(rest) < key_length:
                raise ProgramError(ProgramError.INVALID_INSTRUCTION_DATA, "payload too short")
            return PdaWrite(seed=_decode_seed(rest[:key_length]))
        case _:
            raise ProgramError(ProgramError.BORSH_IO_ERROR, "Invalid function flag")


def minimum_balance(size: int) -> int:
    """Lamports needed for an account of size bytes to be rent exempt."""
    return int(
        float((ACCOUNT_STORAGE_OVERHEAD + size) * LAMPORTS_PER_BYTE_YEAR) * EXEMPTION_THRESHOLD
    )


def create_pda(
    runtime: Runtime,
    program_id: Pubkey,
    seed: str,
    bump: int,
    account_size: int,
    accounts: Sequence[AccountInfo],
) -> None:
    """Create the derived account, paid for by the first account; skip it if funded."""
    accounts_iter = iter(accounts)
    funder = next_account_info(accounts_iter)
    account_to_init = next_account_info(accounts_iter)
    log.info(
        "[functions] %s will pay to initalise PDA at %s", funder.key, account_to_init.key
    )
    log.info("The account has %d lamports", account_to_init.lamports)
    if account_to_init.lamports > 0:
        log.info("This account is already initialised that account, skipping")
        return

    lamports = minimum_balance(account_size)
    try:
        expected = create_program_address([seed.encode("utf-8"), bytes([bump])], program_id)
    except ValueError as exc:
        raise ProgramError(ProgramError.INVALID_SEEDS, str(exc)) from None
    if expected != account_to_init.key:
        raise ProgramError(ProgramError.INVALID_SEEDS, "seeds do not derive the account")

    log.info("[functions] PDA instruction created")
    runtime.create_account(funder, account_to_init, lamports, account_size, program_id)
    log.info("[functions] PDA invoked")


def write_pda(program_id: Pubkey, seed: str, accounts: Sequence[AccountInfo]) -> None:
    """Store seed as the word in the first account, which the program must own."""
    account = next_account_info(iter(accounts))
    log.info("Word to save in an account: %r", seed)
    if account.owner != program_id:
        log.info("Word account does not have the correct program id")
        raise ProgramError(ProgramError.INCORRECT_PROGRAM_ID)
    log.info("Word account has the correct program id")

    word_account = StringAccount.from_bytes(account.data)
    log.info('Will attempt to serialise "%r" to account %s', seed, account.key)
    word_account.word = seed
    encoded = word_account.to_bytes()
    if len(encoded) > len(account.data):
        raise ProgramError(ProgramError.BORSH_IO_ERROR, "failed to write whole buffer")
    account.data[: len(encoded)] = encoded
    log.info("Serialisation to PDA successful")


def process_instruction(
    runtime: Runtime,
    program_id: Pubkey,
    accounts: Sequence[AccountInfo],
    instruction_data: bytes,
) -> None:
    """Decode the instruction and dispatch it."""
    log.info("[entrypoint] multifunc example entrypoint")
    instruction = unpack_instruction(instruction_data)
    log.info("[processor] Received instruction struct: %r", instruction)
    match instruction:
        case PdaCreate(seed=seed, bump=bump, account_size=account_size):
            create_pda(runtime, program_id, seed, bump, account_size, accounts)
        case PdaWrite(seed=seed):
            write_pda(program_id, seed, accounts)