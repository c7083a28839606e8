# tests/test_primes.py
"""
Tests for PrimeBase construction and queries.

Run: pytest -v
"""

from __future__ import annotations

import pytest
from sympy import prime, primerange

from numfactors.primes import PrimeBase
from numfactors.utility import UserInputError

UNDER_CASES = [
    (0, []),
    (1, []),
    (2, []),
    (3, [2]),
    (4, [2, 3]),
    (12, [2, 3, 5, 7, 11]),
    (13, [2, 3, 5, 7, 11]),
    (14, [2, 3, 5, 7, 11, 13]),
]


@pytest.mark.parametrize("limit,expected", UNDER_CASES, ids=[f"under_{c[0]}" for c in UNDER_CASES])
def test_under_small_limits(limit, expected):
    assert PrimeBase.under(limit).to_list() == expected


@pytest.mark.parametrize("limit", [50, 97, 98, 541, 2000])
def test_under_matches_sympy(limit):
    assert PrimeBase.under(limit).to_list() == list(primerange(limit))


@pytest.mark.parametrize("count", [0, 1, 2, 5, 20, 100, 300])
def test_first_n_matches_sympy(count):
    base = PrimeBase.first_n(count)
    assert len(base) == count
    assert base.to_list() == [prime(i) for i in range(1, count + 1)]


def test_under_and_first_n_agree():
    assert PrimeBase.under(12) == PrimeBase.first_n(5)
    assert PrimeBase.under(12).to_list() == [2, 3, 5, 7, 11]


def test_under_never_reaches_limit():
    assert 11 not in PrimeBase.under(11)
    assert 11 in PrimeBase.under(12)


def test_max():
    assert PrimeBase.under(2).max() is None
    assert PrimeBase.first_n(0).max() is None
    assert PrimeBase.first_n(1).max() == 2
    assert PrimeBase.under(12).max() == 11
    assert PrimeBase.first_n(20).max() == 71


def test_iteration_len_and_ordering():
    base = PrimeBase.first_n(4)
    assert list(base) == [2, 3, 5, 7]
    assert len(base) == 4
    assert PrimeBase.first_n(3) < PrimeBase.first_n(4)
    assert hash(base) == hash(PrimeBase.under(8))


def test_base_is_immutable():
    base = PrimeBase.under(10)
    with pytest.raises(AttributeError):
        base.primes = (2,)


# ---------- direct / unchecked construction -----------------------------------


def test_direct_constructor_accepts_first_primes():
    assert PrimeBase((2, 3, 5)) == PrimeBase.first_n(3)
    assert PrimeBase([]) == PrimeBase.under(0)


@pytest.mark.parametrize("bad", [(2, 5, 11), (3, 5), (2, 4), (5, 3, 2), (2.0, 3.0), (2, 3.0, 5), ("2",), (True,)])
def test_direct_constructor_rejects_non_bases(bad):
    with pytest.raises(UserInputError):
        PrimeBase(bad)


def test_validated_base_stores_plain_ints():
    base = PrimeBase([2, 3, 5])
    assert base.primes == (2, 3, 5)
    assert all(type(p) is int for p in base)


def test_unchecked_wraps_without_validation():
    want = PrimeBase.unchecked([2, 3, 5, 7, 11])
    assert want == PrimeBase.under(12)

    odd = PrimeBase.unchecked([2, 5, 11])
    assert odd.to_list() == [2, 5, 11]
    assert odd.max() == 11


@pytest.mark.parametrize("ctor", [PrimeBase.under, PrimeBase.first_n])
@pytest.mark.parametrize("bad", [-1, 2.5, "12", True])
def test_sieves_reject_bad_arguments(ctor, bad):
    with pytest.raises(UserInputError):
        ctor(bad)

