# src/numfactors/factors.py
"""
Prime factorizations as immutable exponent maps.

A Factors value maps each prime p to a positive exponent e and stands for the
integer prod(p^e). The empty map stands for 1; zero has no Factors at all.
Combining two factorizations never touches either operand:

    a * b   product            (exponents added)
    a | b   lcm                (exponent-wise max)
    a & b   gcd                (exponent-wise min over shared primes)
    a <= b  a divides b        (subset)
    a >= b  b divides a        (superset)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from numfactors.fmt import format_factorization
from numfactors.utility import (
    MAX_EXPONENT,
    FactorizationError,
    IndeterminateFactorizationError,
    UndefinedFactorizationError,
    UserInputError,
    check_non_negative,
    check_u64,
)

if TYPE_CHECKING:
    from numfactors.primes import PrimeBase


def _normalize(fac: Mapping[int, int] | Factors) -> tuple[tuple[int, int], ...]:
    items: list[tuple[int, int]] = []
    for p, e in fac.items():
        p = check_u64(p, "prime")
        e = check_non_negative(e, f"exponent of {p}")
        if p < 2:  # noqa: PLR2004
            raise UserInputError(f"factor bases must be at least 2, got {p}.")
        if e == 0:
            continue  # a zero exponent means the prime is absent
        if e > MAX_EXPONENT:
            raise UserInputError(f"exponent of {p} must be in 1..{MAX_EXPONENT}, got {e}.")
        items.append((p, e))
    return tuple(sorted(items))


@dataclass(frozen=True, slots=True, init=False)
class Factors:
    _items: tuple[tuple[int, int], ...]

    def __init__(self, fac: Mapping[int, int] | Factors | None = None):
        object.__setattr__(self, "_items", _normalize(fac or {}))

    # --- construction ----------------------------------------------------------

    @classmethod
    def of_strict(cls, n: int, primes: PrimeBase) -> Factors:
        """
        Factor n over `primes`, raising when no factorization can be given.

        Raises UndefinedFactorizationError for n = 0 and
        IndeterminateFactorizationError when the base runs out before the
        remaining cofactor is known to be 1.
        """
        n = check_u64(n, "n")
        if n == 0:
            raise UndefinedFactorizationError(n)
        fac: dict[int, int] = {}
        if n == 1:
            return cls(fac)

        rest = n
        for p in primes:
            if p < 2:  # noqa: PLR2004  unchecked bases only
                continue
            while rest % p == 0:
                fac[p] = fac.get(p, 0) + 1
                rest //= p
            # any factor left would be at least the next prime, which exceeds p
            if p > rest:
                return cls(fac)
        raise IndeterminateFactorizationError(n, rest, primes.max())

    @classmethod
    def of(cls, n: int, primes: PrimeBase) -> Factors | None:
        """
        Factor n over `primes`. 0 has no factorization, 1 has the empty one.

        Returns None both for n = 0 and when the base is too small to certify
        the result; use of_strict() to tell the two apart.
        """
        try:
            return cls.of_strict(n, primes)
        except FactorizationError:
            return None

    # --- mapping view ----------------------------------------------------------

    def get(self, p: int) -> int:
        """Exponent of p, 0 if p does not divide the number."""
        return self.as_dict().get(p, 0)

    def is_empty(self) -> bool:
        return not self._items

    def primes(self) -> list[int]:
        return [p for p, _ in self._items]

    def as_dict(self) -> dict[int, int]:
        return dict(self._items)

    def items(self) -> tuple[tuple[int, int], ...]:
        """(prime, exponent) pairs in increasing prime order."""
        return self._items

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, p: object) -> bool:
        return any(q == p for q, _ in self._items)

    def to_int(self) -> int:
        n = 1
        for p, e in self._items:
            n *= p**e
        return n

    def __int__(self) -> int:
        return self.to_int()

    def __repr__(self) -> str:
        return f"Factors({self.as_dict()!r})"

    def __str__(self) -> str:
        return format_factorization(self.as_dict())

    # --- algebra ---------------------------------------------------------------

    def mul(self, other: Factors) -> Factors:
        product = self.as_dict()
        for p, e in other:
            product[p] = product.get(p, 0) + e
        return Factors(product)

    def union(self, other: Factors) -> Factors:
        """The union of two factorizations is the factorization of their lcm."""
        union = self.as_dict()
        for p, e in other:
            union[p] = max(union.get(p, 0), e)
        return Factors(union)

    def intersection(self, other: Factors) -> Factors:
        """The intersection of two factorizations is the factorization of their gcd."""
        theirs = other.as_dict()
        return Factors({p: min(e, theirs[p]) for p, e in self._items if p in theirs})

    def is_subset(self, other: Factors) -> bool:
        """True iff the number self stands for divides the one other stands for."""
        theirs = other.as_dict()
        return all(e <= theirs.get(p, 0) for p, e in self._items)

    def is_superset(self, other: Factors) -> bool:
        return other.is_subset(self)

    __mul__ = mul
    __or__ = union
    __and__ = intersection
    __le__ = is_subset
    __ge__ = is_superset

    # --- arithmetic functions ------------------------------------------------------

    def totient(self) -> int:
        """
        Euler's totient, prod(p^e - p^(e-1)).

        The empty factorization (the number 1) gives 0 here, not phi(1) = 1.
        """
        if self.is_empty():
            return 0
        t = 1
        for p, e in self._items:
            t *= p**e - p**(e - 1)
        return t

    def divisor_count(self) -> int:
        d = 1
        for _, e in self._items:
            d *= e + 1
        return d

    def big_omega(self) -> int:
        """Number of prime factors counted with multiplicity."""
        return sum(e for _, e in self._items)
