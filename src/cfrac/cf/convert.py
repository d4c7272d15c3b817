"""Conversions between rationals, floats and continued fractions."""

from __future__ import annotations
from fractions import Fraction
import math
import numbers
from typing import Iterator, List, Optional

import numpy as np

from .base import ContinuedFraction

__all__ = ["from_integer", "from_rational", "from_float", "to_rational", "convergents"]


def from_integer(n: int) -> ContinuedFraction:
    """
    Wrap an integer as a one-term continued fraction.

    ``from_integer(0)`` is ``[0]``. It satisfies ``is_zero`` but differs
    structurally from the canonical zero ``ContinuedFraction()``; use
    ``canonical()`` before comparing with ``==``.
    """
    return ContinuedFraction([abs(n)], n < 0)


def from_rational(q: Fraction | int) -> ContinuedFraction:
    """
    Expand a rational into its regular continued fraction.

    The magnitude is expanded with the Euclidean algorithm and the sign is kept
    separately, so the result never carries a trailing 1 (unless it is exactly
    [1]) and zero comes out as the empty sequence.
    """
    if not isinstance(q, numbers.Rational):
        raise TypeError(f"expected a rational, got {type(q).__name__}")
    f = abs(Fraction(q))
    terms: List[int] = []
    while f.numerator != 0:
        i = math.floor(f)
        terms.append(i)
        f -= i
        if f.numerator == 0:
            break
        f = 1 / f
    return ContinuedFraction(terms, q < 0)


def from_float(value: float, max_terms: Optional[int] = None) -> ContinuedFraction:
    """
    Expand a binary floating point number exactly.

    Args:
        value: A python or numpy floating point scalar.
        max_terms: Keep at most this many coefficients. The truncated
                   expansion is the corresponding convergent of ``value``.
    """
    if not np.isfinite(value):
        raise ValueError(f"cannot expand non-finite value {value}")
    cf = from_rational(Fraction(float(value)))
    if max_terms is not None and len(cf) > max_terms:
        cf = cf.truncate(max_terms).canonical()
    return cf


def to_rational(cf: ContinuedFraction) -> Fraction:
    """
    Evaluate ``cf`` exactly.

    Zero partial quotients are folded first, so ``[1, 0, 0]`` evaluates to 1.
    Raises ValueError when the sequence ends in an unpaired zero.
    """
    cf = cf.canonical()
    if len(cf) == 0:
        return Fraction(0)
    acc = Fraction(cf[-1])
    for c in reversed(cf.coefficients[:-1]):
        acc = c + 1 / acc
    return -acc if cf.negative else acc


def convergents(cf: ContinuedFraction) -> Iterator[Fraction]:
    """Yield p_k/q_k for every prefix, using the Wallis-Euler recurrence."""
    sign = -1 if cf.negative else 1
    p_prev, p = 0, 1
    q_prev, q = 1, 0
    for c in cf.coefficients:
        p_prev, p = p, c * p + p_prev
        q_prev, q = q, c * q + q_prev
        yield Fraction(sign * p, q)
