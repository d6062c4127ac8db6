import pytest

from exerciser.chain.pda import (
    PdaCreate,
    PdaWrite,
    StringAccount,
    create_pda,
    minimum_balance,
    process_instruction,
    unpack_instruction,
    write_pda,
)
from exerciser.chain.pubkey import Pubkey, find_program_address
from exerciser.chain.runtime import AccountInfo, ProgramError, Runtime


def _setup(seed=b"word"):
    program_id = Pubkey.new_unique()
    address, bump = find_program_address([seed], program_id)
    funder = AccountInfo(Pubkey.new_unique(), lamports=10**9, is_signer=True)
    account = AccountInfo(address)
    return program_id, bump, funder, account


def test_string_account_wire_format():
    assert StringAccount("hi").to_bytes() == b"\x02\x00\x00\x00hi"


@pytest.mark.parametrize("word", ["", "hello", "Beyoncé"])
def test_string_account_round_trip_with_trailing_bytes(word):
    data = StringAccount(word).to_bytes() + bytes(10)
    assert StringAccount.from_bytes(data).word == word


def test_string_account_truncated():
    with pytest.raises(ProgramError) as info:
        StringAccount.from_bytes(b"\x05\x00\x00\x00ab")
    assert info.value.code == ProgramError.BORSH_IO_ERROR


def test_unpack_create():
    data = bytes([0, 3]) + b"abc" + bytes([254, 10])
    assert unpack_instruction(data) == PdaCreate(seed="abc", bump=254, account_size=10)


def test_unpack_write():
    assert unpack_instruction(bytes([1, 3]) + b"abc") == PdaWrite(seed="abc")


@pytest.mark.parametrize("data", [b"", b"\x00"])
def test_unpack_too_short(data):
    with pytest.raises(ProgramError) as info:
        unpack_instruction(data)
    assert info.value.code == ProgramError.BORSH_IO_ERROR
    assert info.value.detail == "Invalid parameters passed"


def test_unpack_bad_flag():
    with pytest.raises(ProgramError) as info:
        unpack_instruction(bytes([2, 0]))
    assert info.value.detail == "Invalid function flag"


def test_minimum_balance_for_empty_account():
    assert minimum_balance(0) == 890880


def test_minimum_balance_grows_with_size():
    assert minimum_balance(10) < minimum_balance(64) < minimum_balance(255)


def test_create_then_write():
    program_id, bump, funder, account = _setup()
    runtime = Runtime()
    process_instruction(
        runtime, program_id, [funder, account], bytes([0, 4]) + b"word" + bytes([bump, 64])
    )
    assert account.owner == program_id
    assert len(account.data) == 64
    assert account.lamports == minimum_balance(64)
    assert funder.lamports == 10**9 - minimum_balance(64)

    process_instruction(runtime, program_id, [account], bytes([1, 5]) + b"hello")
    assert StringAccount.from_bytes(account.data).word == "hello"


def test_create_skips_funded_account():
    program_id, bump, funder, account = _setup()
    account.lamports = 1
    create_pda(Runtime(), program_id, "word", bump, 32, [funder, account])
    assert funder.lamports == 10**9
    assert len(account.data) == 0


def test_create_with_wrong_bump():
    program_id, bump, funder, account = _setup()
    wrong = next(b for b in range(255, 0, -1) if b != bump)
    with pytest.raises(ProgramError) as info:
        create_pda(Runtime(), program_id, "word", wrong, 32, [funder, account])
    assert info.value.code == ProgramError.INVALID_SEEDS


def test_write_requires_ownership():
    account = AccountInfo(Pubkey.new_unique(), data=bytes(16), owner=Pubkey.new_unique())
    with pytest.raises(ProgramError) as info:
        write_pda(Pubkey.new_unique(), "hi", [account])
    assert info.value.code == ProgramError.INCORRECT_PROGRAM_ID


def test_write_too_long_for_account():
    program_id = Pubkey.new_unique()
    account = AccountInfo(Pubkey.new_unique(), data=bytes(6), owner=program_id)
    with pytest.raises(ProgramError) as info:
        write_pda(program_id, "too long", [account])
    assert info.value.code == ProgramError.BORSH_IO_ERROR