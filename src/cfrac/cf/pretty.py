"""Pretty printer for continued fractions and engine states."""

from __future__ import annotations
from fractions import Fraction
from typing import Sequence, TYPE_CHECKING

from cfrac.cf.base import ContinuedFraction

if TYPE_CHECKING:
    from cfrac.gosper import Bihomography


def _fmt_terms(coefficients: Sequence[int]) -> str:
    head, *tail = coefficients
    if not tail:
        return f"{head}"
    return f"{head}; " + ", ".join(str(c) for c in tail)


def _fmt_poly(a: int, b: int, c: int, d: int) -> str:
    parts = []
    for coeff, var in ((a, ""), (b, "x"), (c, "y"), (d, "xy")):
        if coeff == 0:
            continue
        if var and coeff in (1, -1):
            term = var if coeff == 1 else f"-{var}"
        else:
            term = f"{coeff}{var}"
        parts.append(term)
    if not parts:
        return "0"
    return " + ".join(parts).replace("+ -", "- ")


def pps(values: Sequence[ContinuedFraction | Fraction | int]) -> list[str]:
    """Pretty-print a list of values."""
    return [pp(v) for v in values]


def pp(value: ContinuedFraction | Fraction | int | Bihomography) -> str:
    """Pretty-print a continued fraction, a rational, or an engine state."""
    from cfrac.gosper import Bihomography

    match value:
        case ContinuedFraction(coefficients=()):
            return "[ 0 ]"

        case ContinuedFraction(coefficients, negative):
            sign = "- " if negative else ""
            return f"{sign}[ {_fmt_terms(coefficients)} ]"

        case Fraction() | int():
            return str(Fraction(value))

        case Bihomography(a, b, c, d, e, f, g, h):
            return f"({_fmt_poly(a, b, c, d)}) / ({_fmt_poly(e, f, g, h)})"

    return repr(value)
