import pytest

from exerciser.chain.pubkey import Pubkey
from exerciser.chain.runtime import (
    SYSTEM_PROGRAM_ID,
    AccountInfo,
    Instruction,
    ProgramError,
    Runtime,
    next_account_info,
)


def test_next_account_info_takes_in_order():
    first = AccountInfo(Pubkey.new_unique())
    second = AccountInfo(Pubkey.new_unique())
    accounts = iter([first, second])
    assert next_account_info(accounts) is first
    assert next_account_info(accounts) is second


def test_next_account_info_runs_out():
    with pytest.raises(ProgramError) as info:
        next_account_info(iter([]))
    assert info.value.code == ProgramError.NOT_ENOUGH_ACCOUNT_KEYS


def test_invoke_passes_named_accounts_and_data():
    runtime = Runtime()
    program = Pubkey.new_unique()
    calls = []
    runtime.register(program, lambda pid, accs, data: calls.append((pid, accs, data)) or "ok")
    a = AccountInfo(Pubkey.new_unique())
    b = AccountInfo(Pubkey.new_unique())
    result = runtime.invoke(Instruction(program, [b.key], b"xy"), [a, b])
    assert result == "ok"
    assert calls == [(program, [b], b"xy")]


def test_invoke_unknown_program():
    runtime = Runtime()
    with pytest.raises(ProgramError) as info:
        runtime.invoke(Instruction(Pubkey.new_unique()), [])
    assert info.value.code == ProgramError.UNSUPPORTED_PROGRAM_ID


def test_invoke_missing_account():
    runtime = Runtime()
    program = Pubkey.new_unique()
    runtime.register(program, lambda *args: None)
    with pytest.raises(ProgramError) as info:
        runtime.invoke(Instruction(program, [Pubkey.new_unique()]), [])
    assert info.value.code == ProgramError.MISSING_ACCOUNT


def test_create_account_moves_lamports_and_assigns():
    runtime = Runtime()
    owner = Pubkey.new_unique()
    funder = AccountInfo(Pubkey.new_unique(), lamports=1000)
    account = AccountInfo(Pubkey.new_unique())
    runtime.create_account(funder, account, 400, 16, owner)
    assert funder.lamports + account.lamports == 1000
    assert account.lamports == 400
    assert len(account.data) == 16
    assert account.owner == owner


def test_create_account_insufficient_funds():
    runtime = Runtime()
    funder = AccountInfo(Pubkey.new_unique(), lamports=10)
    account = AccountInfo(Pubkey.new_unique())
    with pytest.raises(ProgramError) as info:
        runtime.create_account(funder, account, 11, 4, Pubkey.new_unique())
    assert info.value.code == ProgramError.INSUFFICIENT_FUNDS
    assert funder.lamports == 10
    assert account.owner == SYSTEM_PROGRAM_ID


def test_create_account_already_in_use():
    runtime = Runtime()
    funder = AccountInfo(Pubkey.new_unique(), lamports=100)
    account = AccountInfo(Pubkey.new_unique(), lamports=1)
    with pytest.raises(ProgramError) as info:
        runtime.create_account(funder, account, 5, 4, Pubkey.new_unique())
    assert info.value.code == ProgramError.ACCOUNT_ALREADY_IN_USE