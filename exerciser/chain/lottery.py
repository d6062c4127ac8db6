"""A lottery: players buy tickets, an oracle picks the winning index, the winner takes all."""

from __future__ import annotations

from dataclasses import dataclass, field

from .pubkey import Pubkey, find_program_address

PROGRAM_ID = Pubkey.from_string("EnNAUhQEdDNtNszfguvK5RSkSLDStPLtUqeLpbjayoNq")

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


class LotteryError(Exception):
    """An instruction was rejected."""


@dataclass
class Lottery:
    """State of one lottery."""

    authority: Pubkey
    oracle: Pubkey
    ticket_price: int
    winner: Pubkey = field(default_factory=Pubkey)
    winner_index: int = 0
    count: int = 0


@dataclass
class Ticket:
    """A bought ticket: who bought it and its position in the lottery."""

    submitter: Pubkey = field(default_factory=Pubkey)
    idx: int = 0


class LotteryProgram:
    """Accounts and balances of the lottery program."""

    def __init__(self, program_id: Pubkey = PROGRAM_ID) -> None:
        self.program_id = program_id
        self.accounts: dict[Pubkey, Lottery | Ticket] = {}
        self._lamports: dict[Pubkey, int] = {}

    def fund(self, key: Pubkey, lamports: int) -> None:
        """Add lamports to an account."""
        if lamports < 0:
            raise ValueError("cannot fund a negative amount")
        self._lamports[key] = self.balance(key) + lamports

    def balance(self, key: Pubkey) -> int:
        return self._lamports.get(key, 0)

    def _transfer(self, source: Pubkey, destination: Pubkey, lamports: int) -> None:
        if self.balance(source) < lamports:
            raise LotteryError(f"insufficient lamports in {source}")
        self._lamports[source] = self.balance(source) - lamports
        self._lamports[destination] = self.balance(destination) + lamports

    def _load(self, key: Pubkey, kind: type):
        account = self.accounts.get(key)
        if not isinstance(account, kind):
            raise LotteryError(f"{key} is not a {kind.__name__} account")
        return account

    def initialise_lottery(self, admin: Pubkey, ticket_price: int, oracle: Pubkey) -> Pubkey:
        """Create a lottery owned by admin; return its address."""
        if not 0 <= ticket_price <= _U64_MAX:
            raise ValueError("ticket price must fit in 64 unsigned bits")
        key = Pubkey.new_unique()
        self.accounts[key] = Lottery(authority=admin, oracle=oracle, ticket_price=ticket_price)
        return key

    def buy_ticket(self, lottery: Pubkey, player: Pubkey) -> Pubkey:
        """Pay the ticket price into the lottery and create the ticket; return its address."""
        state: Lottery = self._load(lottery, Lottery)
        if self.balance(player) < state.ticket_price:
            raise LotteryError("player cannot afford a ticket")
        ticket_key, _ = find_program_address(
            [state.count.to_bytes(4, "big"), bytes(lottery)], self.program_id
        )
        if ticket_key in self.accounts:
            raise LotteryError(f"ticket account {ticket_key} already in use")
        if state.count == _U32_MAX:
            raise LotteryError("ticket counter overflow")
        self._transfer(player, lottery, state.ticket_price)
        self.accounts[ticket_key] = Ticket(submitter=player, idx=state.count)
        state.count += 1
        return ticket_key

    def pick_winner(self, lottery: Pubkey, oracle: Pubkey, winner: int) -> None:
        """Record the winning ticket index; only the lottery's oracle may do this."""
        state: Lottery = self._load(lottery, Lottery)
        if state.oracle != oracle:
            raise LotteryError("only the lottery's oracle may pick the winner")
        if not 0 <= winner <= _U32_MAX:
            raise ValueError("winner index must fit in 32 unsigned bits")
        state.winner_index = winner

    def pay_out_winner(self, lottery: Pubkey, winner: Pubkey, ticket: Pubkey) -> int:
        """Move the lottery's whole balance to the holder of the winning ticket; return it."""
        state: Lottery = self._load(lottery, Lottery)
        ticket_state: Ticket = self._load(ticket, Ticket)
        if ticket_state.submitter != winner or ticket_state.idx != state.winner_index:
            raise LotteryError("ticket does not belong to the winner")
        amount = self.balance(lottery)
        self._transfer(lottery, winner, amount)
        return amount