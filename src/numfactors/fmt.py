# src/numfactors/fmt.py
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

from colorama import Fore, Style

if TYPE_CHECKING:
    from numfactors.context import FactorCtx

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

ALIGN_WIDTH = 18  # label column
MULTIPLY_SIGN = "×"


def strip_ansi(s: str) -> str:
    return ANSI_RE.sub("", s)


def format_factorization(fac: Mapping[int, int], *, sep: str = MULTIPLY_SIGN) -> str:
    """
    Turn {p: e, ...} into a tidy string like: 2^3 × 3 × 5^2
    """
    parts: list[str] = []
    for p, e in sorted(fac.items()):
        parts.append(f"{p}^{e}" if e > 1 else f"{p}")
    return f" {sep} ".join(parts) if parts else "1"


def format_ctx(ctx: FactorCtx, *, color: bool = True, sep: str = MULTIPLY_SIGN) -> str:
    """
    Multi-line summary of a FactorCtx:

        Factor summary:
          n:                60
          Factorization:    2^2 × 3 × 5
          Totient φ(n):     16
          Divisors τ(n):    12

    Pass color=False for plain text.
    """

    def paint(s: str, style: str) -> str:
        return f"{style}{s}{Style.RESET_ALL}" if color else s

    lines = [paint("Factor summary:", Fore.CYAN + Style.BRIGHT)]
    lines.append(f"  {'n:':<{ALIGN_WIDTH}}{paint(str(ctx.n), Fore.YELLOW + Style.BRIGHT)}")

    if ctx.n == 0:
        lines.append(f"  {'Factorization:':<{ALIGN_WIDTH}}{paint('undefined (0 has no factors)', Fore.YELLOW)}")
        return "\n".join(lines)

    if ctx.incomplete:
        bound = "an empty prime base" if ctx.largest_prime is None else f"primes ≤ {ctx.largest_prime}"
        lines.append(
            f"  {'Factorization:':<{ALIGN_WIDTH}}"
            f"{paint(f'incomplete (not certified by {bound})', Fore.RED)}"
        )
        return "\n".join(lines)

    lines.append(f"  {'Factorization:':<{ALIGN_WIDTH}}{paint(format_factorization(ctx.fac, sep=sep), Fore.GREEN)}")
    lines.append(f"  {'Totient φ(n):':<{ALIGN_WIDTH}}{ctx.totient}")
    lines.append(f"  {'Divisors τ(n):':<{ALIGN_WIDTH}}{ctx.tau}")
    lines.append(f"  {'Prime factors:':<{ALIGN_WIDTH}}{ctx.omega} distinct, {ctx.big_omega} total")
    return "\n".join(lines)
