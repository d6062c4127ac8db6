"""A program that finds the n-th prime by trial division."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .pubkey import Pubkey
from .runtime import AccountInfo, ProgramError

log = logging.getLogger(__name__)


def is_prime(number: int) -> bool:
    """Trial division by every i with 2 <= i < number / 2 + 1."""
    upper_range = int(number / 2.0 + 1.0)
    return all(number % i != 0 for i in range(2, upper_range))


def nth_prime(nth: int) -> int:
    """The nth prime, counting 2 as the first; 2 is returned for nth of 0."""
    primes_found = 0
    numb = 2
    latest_prime = 2
    while primes_found < nth:
        if is_prime(numb):
            primes_found += 1
            latest_prime = numb
            log.info("%d th prime number is %d", primes_found, latest_prime)
        numb += 1
    return latest_prime


def process_instruction(
    program_id: Pubkey, accounts: Sequence[AccountInfo], instruction_data: bytes
) -> int:
    """Find the prime whose position is the first data byte; return it."""
    log.info("[entrypoint] compute example entrypoint")
    if not instruction_data:
        raise ProgramError(ProgramError.INVALID_ARGUMENT)
    prime_count = instruction_data[0]
    log.info("[entrypoint] will find %d-prime", prime_count)
    prime = nth_prime(prime_count)
    log.info("%d th prime number is %d", prime_count, prime)
    return prime