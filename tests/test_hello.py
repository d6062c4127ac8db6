import logging

import pytest

from exerciser.chain.hello import process_cpi, process_hello
from exerciser.chain.pubkey import Pubkey
from exerciser.chain.runtime import AccountInfo, ProgramError, Runtime


def test_hello_logs_greeting(caplog):
    caplog.set_level(logging.INFO)
    process_hello(Pubkey.new_unique(), [], b"anything")
    assert "[lib] Hello World Rust program entrypoint" in caplog.text


def test_cpi_calls_hello_program(caplog):
    caplog.set_level(logging.INFO)
    runtime = Runtime()
    hello_id = Pubkey.new_unique()
    runtime.register(hello_id, process_hello)
    process_cpi(runtime, Pubkey.new_unique(), [AccountInfo(hello_id)], b"")
    text = caplog.text
    assert "[entrypoint] Calling helloworld" in text
    assert text.index("[entrypoint] CPI") < text.index(
        "[lib] Hello World Rust program entrypoint"
    )


def test_cpi_sends_empty_instruction():
    runtime = Runtime()
    hello_id = Pubkey.new_unique()
    calls = []
    runtime.register(hello_id, lambda pid, accs, data: calls.append((pid, list(accs), data)))
    process_cpi(runtime, Pubkey.new_unique(), [AccountInfo(hello_id)], b"ignored")
    assert calls == [(hello_id, [], b"")]


def test_cpi_needs_an_account():
    with pytest.raises(ProgramError) as info:
        process_cpi(Runtime(), Pubkey.new_unique(), [], b"")
    assert info.value.code == ProgramError.NOT_ENOUGH_ACCOUNT_KEYS


def test_cpi_unregistered_target():
    with pytest.raises(ProgramError) as info:
        process_cpi(Runtime(), Pubkey.new_unique(), [AccountInfo(Pubkey.new_unique())], b"")
    assert info.value.code == ProgramError.UNSUPPORTED_PROGRAM_ID