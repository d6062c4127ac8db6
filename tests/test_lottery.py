from types import SimpleNamespace

import pytest

from exerciser.chain.lottery import Lottery, LotteryError, LotteryProgram, Ticket
from exerciser.chain.pubkey import Pubkey, find_program_address

PRICE = 100
FUNDS = 1_000


@pytest.fixture
def env():
    program = LotteryProgram()
    admin, oracle, alice, bob = (Pubkey.new_unique() for _ in range(4))
    program.fund(alice, FUNDS)
    program.fund(bob, FUNDS)
    lottery = program.initialise_lottery(admin, PRICE, oracle)
    return SimpleNamespace(
        program=program, admin=admin, oracle=oracle, alice=alice, bob=bob, lottery=lottery
    )


def test_initialise(env):
    state = env.program.accounts[env.lottery]
    assert isinstance(state, Lottery)
    assert state.authority == env.admin
    assert state.oracle == env.oracle
    assert state.ticket_price == PRICE
    assert state.count == 0
    assert state.winner_index == 0


def test_buy_ticket(env):
    ticket = env.program.buy_ticket(env.lottery, env.alice)
    expected, _ = find_program_address(
        [(0).to_bytes(4, "big"), bytes(env.lottery)], env.program.program_id
    )
    assert ticket == expected
    assert env.program.accounts[ticket] == Ticket(submitter=env.alice, idx=0)
    assert env.program.balance(env.lottery) == PRICE
    assert env.program.balance(env.alice) == FUNDS - PRICE
    assert env.program.accounts[env.lottery].count == 1


def test_tickets_are_numbered(env):
    first = env.program.buy_ticket(env.lottery, env.alice)
    second = env.program.buy_ticket(env.lottery, env.bob)
    assert first != second
    assert env.program.accounts[second].idx == 1
    assert env.program.accounts[second].submitter == env.bob


def test_poor_player_cannot_buy(env):
    poor = Pubkey.new_unique()
    env.program.fund(poor, PRICE - 1)
    with pytest.raises(LotteryError):
        env.program.buy_ticket(env.lottery, poor)
    assert env.program.accounts[env.lottery].count == 0
    assert env.program.balance(poor) == PRICE - 1


def test_only_oracle_picks(env):
    with pytest.raises(LotteryError):
        env.program.pick_winner(env.lottery, env.admin, 0)
    env.program.pick_winner(env.lottery, env.oracle, 1)
    assert env.program.accounts[env.lottery].winner_index == 1


def test_pay_out_winner(env):
    env.program.buy_ticket(env.lottery, env.alice)
    bob_ticket = env.program.buy_ticket(env.lottery, env.bob)
    env.program.pick_winner(env.lottery, env.oracle, 1)
    paid = env.program.pay_out_winner(env.lottery, env.bob, bob_ticket)
    assert paid == 2 * PRICE
    assert env.program.balance(env.lottery) == 0
    assert env.program.balance(env.bob) == FUNDS - PRICE + 2 * PRICE


def test_pay_out_rejects_wrong_winner(env):
    alice_ticket = env.program.buy_ticket(env.lottery, env.alice)
    env.program.buy_ticket(env.lottery, env.bob)
    env.program.pick_winner(env.lottery, env.oracle, 1)
    with pytest.raises(LotteryError):
        env.program.pay_out_winner(env.lottery, env.alice, alice_ticket)
    with pytest.raises(LotteryError):
        env.program.pay_out_winner(env.lottery, env.bob, alice_ticket)
    assert env.program.balance(env.lottery) == 2 * PRICE


def test_unknown_lottery(env):
    with pytest.raises(LotteryError):
        env.program.buy_ticket(Pubkey.new_unique(), env.alice)


def test_negative_funding(env):
    with pytest.raises(ValueError):
        env.program.fund(env.alice, -1)