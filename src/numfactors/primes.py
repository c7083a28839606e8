# src/numfactors/primes.py
"""
Prime bases: the first K primes, found by trial division.

A PrimeBase starts at 2 and has no gaps, so [], [2, 3, 5] and
[2, 3, 5, 7, 11] are valid bases but [2, 5, 11] is not. The sieve here is
deliberately plain trial division; it is not an efficient implementation.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from numfactors.utility import UserInputError, check_non_negative


def _divisible_by_any(m: int, primes: list[int]) -> bool:
    for p in primes:
        if m % p == 0:
            return True
    return False


def _sieve_under(limit: int) -> list[int]:
    if limit < 2:  # noqa: PLR2004
        return []
    primes = [2]
    m = 3
    while m < limit:
        if not _divisible_by_any(m, primes):
            primes.append(m)
        m += 2
    return primes


def _sieve_first(count: int) -> list[int]:
    if count == 0:
        return []
    primes = [2]
    m = 3
    while len(primes) < count:
        if not _divisible_by_any(m, primes):
            primes.append(m)
        m += 2
    return primes


@dataclass(frozen=True, order=True, slots=True)
class PrimeBase:
    """
    An immutable, gap-free run of primes starting at 2.

    Calling PrimeBase(primes) directly verifies that `primes` really are the
    first len(primes) primes. The sieving constructors skip that check since
    they produce the sequence themselves; `unchecked` skips it on request.
    """
    primes: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        primes = tuple(check_non_negative(p, "prime") for p in self.primes)
        if list(primes) != _sieve_first(len(primes)):
            raise UserInputError(
                f"a prime base must be the first K primes in increasing order, got {list(primes)}."
            )
        object.__setattr__(self, "primes", primes)

    @classmethod
    def _wrap(cls, primes: Iterable[int]) -> PrimeBase:
        base = object.__new__(cls)
        object.__setattr__(base, "primes", tuple(primes))
        return base

    # --- constructors ---------------------------------------------------------

    @classmethod
    def under(cls, limit: int) -> PrimeBase:
        """All primes strictly less than `limit`."""
        return cls._wrap(_sieve_under(check_non_negative(limit, "limit")))

    @classmethod
    def first_n(cls, count: int) -> PrimeBase:
        """The smallest `count` primes."""
        return cls._wrap(_sieve_first(check_non_negative(count, "count")))

    @classmethod
    def unchecked(cls, primes: Iterable[int]) -> PrimeBase:
        """
        Wrap `primes` as a PrimeBase WITHOUT checking that they are prime,
        sorted or gap-free. Meant for test fixtures only; a bad sequence
        silently produces wrong factorizations downstream.
        """
        return cls._wrap(primes)

    # --- queries ---------------------------------------------------------------

    def max(self) -> int | None:
        """The largest prime in the base, or None when empty."""
        return self.primes[-1] if self.primes else None

    def to_list(self) -> list[int]:
        return list(self.primes)

    def __iter__(self) -> Iterator[int]:
        return iter(self.primes)

    def __len__(self) -> int:
        return len(self.primes)

    def __contains__(self, p: object) -> bool:
        return p in self.primes

