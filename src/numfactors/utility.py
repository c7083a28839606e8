# -----------------------------------------------------------------------------
#  Errors and input guards
# -----------------------------------------------------------------------------

from __future__ import annotations

U64_MAX = (1 << 64) - 1

# Largest exponent an 8-bit slot can hold; 2^63 already fills 64 bits.
MAX_EXPONENT = 255


class UserInputError(ValueError):
    pass


class FactorizationError(Exception):
    """Base class for the two ways a factorization can fail."""

    def __init__(self, n: int, message: str):
        super().__init__(message)
        self.n = n


class UndefinedFactorizationError(FactorizationError):
    """Zero has no prime decomposition."""

    def __init__(self, n: int = 0):
        super().__init__(n, f"{n} has no prime factorization.")


class IndeterminateFactorizationError(FactorizationError):
    """
    The prime base ran out before the remaining cofactor was shown to be 1.

    `remainder` is the unfactored cofactor; it may be a prime beyond the base
    or a product of such primes. `largest_prime` is the base's maximum
    (None for the empty base).
    """

    def __init__(self, n: int, remainder: int, largest_prime: int | None):
        where = "an empty prime base" if largest_prime is None else f"primes up to {largest_prime}"
        super().__init__(
            n,
            f"cannot certify the factorization of {n}: cofactor {remainder} "
            f"is not resolved by {where}.",
        )
        self.remainder = remainder
        self.largest_prime = largest_prime


def check_non_negative(value: object, label: str = "value") -> int:
    """Return value as int, or raise UserInputError if it is not an int >= 0."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise UserInputError(f"{label} must be an integer, got {type(value).__name__}.")
    if value < 0:
        raise UserInputError(f"{label} must be non-negative, got {value}.")
    return int(value)


def check_u64(value: object, label: str = "value") -> int:
    """Like check_non_negative, but also rejects values that do not fit in 64 bits."""
    n = check_non_negative(value, label)
    if n > U64_MAX:
        raise UserInputError(f"{label} must fit in 64 bits (at most {U64_MAX}), got {n}.")
    return n
