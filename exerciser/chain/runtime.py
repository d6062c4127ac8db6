"""A small in-process runtime: accounts, instructions and program invocation."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from .pubkey import Pubkey

SYSTEM_PROGRAM_ID = Pubkey(bytes(32))

Processor = Callable[[Pubkey, Sequence["AccountInfo"], bytes], Any]


class ProgramError(Exception):
    """A program rejected an instruction; code names the reason."""

    INCORRECT_PROGRAM_ID = "IncorrectProgramId"
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_INSTRUCTION_DATA = "InvalidInstructionData"
    NOT_ENOUGH_ACCOUNT_KEYS = "NotEnoughAccountKeys"
    MISSING_ACCOUNT = "MissingAccount"
    BORSH_IO_ERROR = "BorshIoError"
    ACCOUNT_ALREADY_IN_USE = "AccountAlreadyInUse"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    INVALID_SEEDS = "InvalidSeeds"
    ARITHMETIC_OVERFLOW = "ArithmeticOverflow"
    UNSUPPORTED_PROGRAM_ID = "UnsupportedProgramId"

    def __init__(self, code: str, detail: str = "") -> None:
        super().__init__(f"{code}: {detail}" if detail else code)
        self.code = code
        self.detail = detail


@dataclass(eq=False)
class AccountInfo:
    """An account as a program sees it: address, balance, data and owner."""

    key: Pubkey
    lamports: int = 0
    data: bytearray = field(default_factory=bytearray)
    owner: Pubkey = SYSTEM_PROGRAM_ID
    is_signer: bool = False
    is_writable: bool = True

    def __post_init__(self) -> None:
        self.data = bytearray(self.data)


@dataclass(frozen=True)
class Instruction:
    """A call to a program: its id, the account keys it uses and its data."""

    program_id: Pubkey
    accounts: tuple[Pubkey, ...] = ()
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "accounts", tuple(self.accounts))
        object.__setattr__(self, "data", bytes(self.data))


def next_account_info(accounts: Iterator[AccountInfo]) -> AccountInfo:
    """Take the next account from an iterator; too few accounts is an error."""
    try:
        return next(accounts)
    except StopIteration:
        raise ProgramError(ProgramError.NOT_ENOUGH_ACCOUNT_KEYS) from None


class Runtime:
    """Registered programs, and the system operations they may call."""

    def __init__(self) -> None:
        self._programs: dict[Pubkey, Processor] = {}

    def register(self, program_id: Pubkey, processor: Processor) -> None:
        """Make a processor callable under program_id."""
        self._programs[program_id] = processor

    def invoke(self, instruction: Instruction, accounts: Sequence[AccountInfo]) -> Any:
        """Call the instruction's program with the accounts the instruction names."""
        processor = self._programs.get(instruction.program_id)
        if processor is None:
            raise ProgramError(
                ProgramError.UNSUPPORTED_PROGRAM_ID, str(instruction.program_id)
            )
        by_key = {info.key: info for info in accounts}
        try:
            selected = [by_key[key] for key in instruction.accounts]
        except KeyError as exc:
            raise ProgramError(ProgramError.MISSING_ACCOUNT, str(exc.args[0])) from None
        return processor(instruction.program_id, selected, instruction.data)

    def create_account(
        self,
        funder: AccountInfo,
        account: AccountInfo,
        lamports: int,
        space: int,
        owner: Pubkey,
    ) -> None:
        """Fund a new account with lamports, give it space bytes and assign it to owner."""
        if account.lamports > 0 or account.data or account.owner != SYSTEM_PROGRAM_ID:
            raise ProgramError(ProgramError.ACCOUNT_ALREADY_IN_USE, str(account.key))
        if lamports < 0 or space < 0:
            raise ProgramError(ProgramError.INVALID_ARGUMENT)
        if funder.lamports < lamports:
            raise ProgramError(ProgramError.INSUFFICIENT_FUNDS, str(funder.key))
        funder.lamports -= lamports
        account.lamports += lamports
        account.data = bytearray(space)
        account.owner = owner