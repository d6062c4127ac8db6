"""A program that only says hello, and one that calls it."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .pubkey import Pubkey
from .runtime import AccountInfo, Instruction, Runtime, next_account_info

log = logging.getLogger(__name__)


def process_hello(
    program_id: Pubkey, accounts: Sequence[AccountInfo], instruction_data: bytes
) -> None:
    """Log a greeting; accounts and data are ignored."""
    log.info("[lib] Hello World Rust program entrypoint")


def process_cpi(
    runtime: Runtime,
    program_id: Pubkey,
    accounts: Sequence[AccountInfo],
    instruction_data: bytes,
) -> None:
    """Call the program whose account comes first, with no accounts and no data."""
    log.info("[entrypoint] CPI")
    helloworld_account = next_account_info(iter(accounts))
    instruction = Instruction(helloworld_account.key, (), b"")
    log.info("[entrypoint] Calling helloworld")
    runtime.invoke(instruction, [helloworld_account])