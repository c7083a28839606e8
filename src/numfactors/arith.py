# src/numfactors/arith.py
"""
gcd, lcm and per-number summaries computed from factorizations over a PrimeBase.

Every function here answers None when it cannot give a result, without saying
whether the operands were mathematically unsuitable (a zero) or the base was
too small to factor them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from numfactors.context import FactorCtx
from numfactors.factors import Factors
from numfactors.utility import IndeterminateFactorizationError, check_u64

if TYPE_CHECKING:
    from numfactors.primes import PrimeBase


def gcd(m: int, n: int, primes: PrimeBase) -> int | None:
    """
    Greatest common divisor: the largest d with a*d == m and b*d == n for some
    positive integers a, b.
    """
    m, n = check_u64(m, "m"), check_u64(n, "n")
    if m == 0 or n == 0:
        return None
    if m == 1 or n == 1:
        return 1

    m_fac = Factors.of(m, primes)
    n_fac = Factors.of(n, primes)
    if m_fac is None or n_fac is None:
        return None
    return int(m_fac & n_fac)


def lcm(m: int, n: int, primes: PrimeBase) -> int | None:
    """
    Least common multiple: the smallest q with a*m == q and b*n == q for some
    positive integers a, b. lcm(0, 0) is 0 by convention; lcm with a single
    zero operand has no value.
    """
    m, n = check_u64(m, "m"), check_u64(n, "n")
    if m == 0 and n == 0:
        return 0
    if m == 0 or n == 0:
        return None
    if n == 1:
        return m
    if m == 1:
        return n

    m_fac = Factors.of(m, primes)
    n_fac = Factors.of(n, primes)
    if m_fac is None or n_fac is None:
        return None
    return int(m_fac | n_fac)


def build_ctx(n: int, primes: PrimeBase) -> FactorCtx:
    """Factor n once over `primes` and bundle the derived quantities."""
    n = check_u64(n, "n")
    largest = primes.max()

    if n == 0:
        return FactorCtx(
            n=n, fac={}, totient=None, tau=None, omega=None, big_omega=None,
            largest_prime=largest,
        )

    try:
        fac = Factors.of_strict(n, primes)
    except IndeterminateFactorizationError:
        return FactorCtx(
            n=n, fac={}, totient=None, tau=None, omega=None, big_omega=None,
            incomplete=True, largest_prime=largest,
        )

    return FactorCtx(
        n=n,
        fac=fac.as_dict(),
        totient=fac.totient(),
        tau=fac.divisor_count(),
        omega=len(fac),
        big_omega=fac.big_omega(),
        largest_prime=largest,
    )
