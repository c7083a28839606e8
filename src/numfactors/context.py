from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FactorCtx:
    """
    One number's factorization over a given prime base, with the values
    derived from it.

    Derived fields are None whenever there is no factorization: for n = 0,
    and when the base ran out before n was certified (`incomplete`).
    """
    n: int
    fac: dict[int, int]
    totient: int | None
    tau: int | None
    omega: int | None
    big_omega: int | None
    incomplete: bool = False
    largest_prime: int | None = None

    @property
    def is_fully_factored(self) -> bool:
        return self.n != 0 and not self.incomplete
