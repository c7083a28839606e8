from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("numfactors")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .arith import build_ctx, gcd, lcm
from .context import FactorCtx
from .factors import Factors
from .fmt import format_ctx, format_factorization
from .primes import PrimeBase
from .utility import (
    FactorizationError,
    IndeterminateFactorizationError,
    UndefinedFactorizationError,
    UserInputError,
)

__all__ = [
    "FactorCtx",
    "FactorizationError",
    "Factors",
    "IndeterminateFactorizationError",
    "PrimeBase",
    "UndefinedFactorizationError",
    "UserInputError",
    "__version__",
    "build_ctx",
    "format_ctx",
    "format_factorization",
    "gcd",
    "lcm",
]
