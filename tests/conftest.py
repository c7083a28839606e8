# tests/conftest.py
from __future__ import annotations

import pytest

from numfactors.primes import PrimeBase


@pytest.fixture(scope="session")
def under12() -> PrimeBase:
    return PrimeBase.under(12)


@pytest.fixture(scope="session")
def under1000() -> PrimeBase:
    return PrimeBase.under(1000)
