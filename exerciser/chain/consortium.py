"""A consortium: weighted members propose answers to questions and vote on them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .pubkey import Pubkey, find_program_address

PROGRAM_ID = Pubkey.from_string("BG8eNGD8vvPpegz6NojiFS2n6yPHV5yt9LJngp1QCkFf")

_U8_MAX = 2**8 - 1
_U32_MAX = 2**32 - 1


class ConsortiumError(Exception):
    """An instruction was rejected."""


@dataclass
class Consortium:
    chairperson: Pubkey
    question_count: int = 0


@dataclass
class Member:
    key: Pubkey
    weight: int
    propose_answers: bool


@dataclass
class Question:
    question: str
    deadline: int
    ans_counter: int = 0
    winner_idx: int = 0
    winner_selected: bool = False


@dataclass
class Answer:
    text: str
    votes: int = 0


@dataclass
class _Voted:
    """Exists only to show that a member has voted on a question."""


class ConsortiumProgram:
    """Accounts of the consortium program."""

    def __init__(self, program_id: Pubkey = PROGRAM_ID) -> None:
        self.program_id = program_id
        self.accounts: dict[Pubkey, object] = {}
        self._question_consortium: dict[Pubkey, Pubkey] = {}

    def _pda(self, *seeds: bytes) -> Pubkey:
        return find_program_address(list(seeds), self.program_id)[0]

    def _init(self, key: Pubkey, account: object) -> None:
        if key in self.accounts:
            raise ConsortiumError(f"account {key} already in use")
        self.accounts[key] = account

    def _load(self, key: Pubkey, kind: type):
        account = self.accounts.get(key)
        if not isinstance(account, kind):
            raise ConsortiumError(f"{key} is not a {kind.__name__} account")
        return account

    def _member_for(self, question: Pubkey, member: Pubkey) -> Member:
        consortium = self._question_consortium[question]
        member_struct: Member = self._load(
            self._pda(bytes(consortium), bytes(member)), Member
        )
        if member_struct.key != member:
            raise ConsortiumError("member record belongs to someone else")
        return member_struct

    def initialise_consortium(self, chairperson: Pubkey, seed: str) -> Pubkey:
        """Create a consortium chaired by chairperson; return its address."""
        key = self._pda(seed.encode("utf-8"), bytes(chairperson))
        self._init(key, Consortium(chairperson=chairperson))
        return key

    def add_member(
        self,
        consortium: Pubkey,
        chairperson: Pubkey,
        weight: int,
        propose_answers: bool,
        member_acc: Pubkey,
    ) -> Pubkey:
        """Admit a member; only the chairperson may. Return the member record's address."""
        state: Consortium = self._load(consortium, Consortium)
        if chairperson != state.chairperson:
            raise ConsortiumError("only the chairperson may add members")
        if not 0 <= weight <= _U8_MAX:
            raise ValueError("weight must fit in 8 unsigned bits")
        key = self._pda(bytes(consortium), bytes(member_acc))
        self._init(key, Member(key=member_acc, weight=weight, propose_answers=propose_answers))
        return key

    def add_question(
        self, consortium: Pubkey, chairperson: Pubkey, question: str, deadline: int
    ) -> Pubkey:
        """Open a question until deadline; return its address."""
        # The chairperson pays for the account; it is not otherwise checked.
        state: Consortium = self._load(consortium, Consortium)
        if state.question_count == _U32_MAX:
            raise ConsortiumError("question counter overflow")
        key = self._pda(bytes(consortium), state.question_count.to_bytes(4, "big"))
        self._init(key, Question(question=question, deadline=deadline))
        self._question_consortium[key] = consortium
        state.question_count += 1
        return key

    def add_answer(self, question: Pubkey, member: Pubkey, text: str, now: int) -> Pubkey:
        """Propose an answer before the deadline; return its address."""
        state: Question = self._load(question, Question)
        member_struct = self._member_for(question, member)
        if not member_struct.propose_answers:
            raise ConsortiumError("member may not propose answers")
        if not state.deadline > now:
            raise ConsortiumError("the question's deadline has passed")
        if state.winner_selected:
            raise ConsortiumError("the question has already been decided")
        if state.ans_counter == _U8_MAX:
            raise ConsortiumError("answer counter overflow")
        key = self._pda(bytes(question), bytes([state.ans_counter]))
        self._init(key, Answer(text=text))
        state.ans_counter += 1
        return key

    def vote(self, answer: Pubkey, question: Pubkey, member: Pubkey, now: int) -> None:
        """Cast a member's weighted vote; each member votes once per question."""
        state: Question = self._load(question, Question)
        answer_state: Answer = self._load(answer, Answer)
        member_struct = self._member_for(question, member)
        if not state.deadline > now:
            raise ConsortiumError("the question's deadline has passed")
        if state.winner_selected:
            raise ConsortiumError("the question has already been decided")
        if answer_state.votes + member_struct.weight > _U32_MAX:
            raise ConsortiumError("vote counter overflow")
        self._init(self._pda(bytes(member), bytes(question)), _Voted())
        answer_state.votes += member_struct.weight

    def tally(
        self,
        question: Pubkey,
        consortium: Pubkey,
        caller: Pubkey,
        answers: Sequence[Pubkey],
        now: int,
    ) -> int:
        """Pick the answer with most votes, the first on a tie; return its index."""
        state: Question = self._load(question, Question)
        consortium_state: Consortium = self._load(consortium, Consortium)
        allowed = caller == consortium_state.chairperson or state.deadline < now
        if not allowed or state.winner_selected:
            raise ConsortiumError("the question cannot be tallied now")
        answers = list(answers)
        if len(answers) != state.ans_counter:
            raise ConsortiumError(
                f"expected {state.ans_counter} answers, got {len(answers)}"
            )
        best_votes, best_idx = 0, 0
        for idx, answer_key in enumerate(answers):
            if self._pda(bytes(question), bytes([idx])) != answer_key:
                raise ConsortiumError(f"answer {idx} is not at its expected address")
            answer_state: Answer = self._load(answer_key, Answer)
            if answer_state.votes > best_votes:
                best_votes, best_idx = answer_state.votes, idx
        state.winner_idx = best_idx
        state.winner_selected = True
        return best_idx