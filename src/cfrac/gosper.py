"""Arithmetic on continued fractions with Gosper's bihomographic algorithm.

The engine state is the map

    R(x, y) = (a + b*x + c*y + d*x*y) / (e + f*x + g*y + h*x*y)

over the not yet consumed tails x, y of the two operands. Both tails range
over [0, inf], so R is bounded by its four corner values a/e (x=y=0),
b/f (x=inf, y=0), c/g (x=0, y=inf) and d/h (x=y=inf) whenever the
denominator cannot change sign. Once all four corners agree on their integer
part that part is the next output term, no matter what the inputs hold.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
import logging
from typing import List, Optional, Tuple

from cfrac.cf import ContinuedFraction, from_rational, pp
from cfrac.util import DivisionByZero, NonTerminating

__all__ = ["Bihomography", "Operator", "GosperSettings", "DEFAULT_SETTINGS", "apply"]

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class GosperSettings:
    # Every loop iteration (term consumed or emitted) counts towards the cap.
    max_iterations: int = 100_000

    def __post_init__(self):
        if self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")


DEFAULT_SETTINGS = GosperSettings()


@dataclass(frozen=True)
class Bihomography:
    a: int
    b: int
    c: int
    d: int
    e: int
    f: int
    g: int
    h: int

    def numerators(self) -> Tuple[int, int, int, int]:
        return self.a, self.b, self.c, self.d

    def denominators(self) -> Tuple[int, int, int, int]:
        return self.e, self.f, self.g, self.h

    def corners(self) -> List[Optional[Fraction]]:
        """The corner values a/e, b/f, c/g, d/h, or None where undefined."""
        return [
            Fraction(n, m) if m != 0 else None
            for n, m in zip(self.numerators(), self.denominators())
        ]

    def is_constant(self) -> bool:
        return self.a == self.b == self.c == self.d and self.e == self.f == self.g == self.h

    def insert_x(self, p: int) -> Bihomography:
        """Substitute x -> p + 1/x."""
        a, b, c, d, e, f, g, h = self._tuple()
        return Bihomography(b, a + b * p, d, c + d * p, f, e + f * p, h, g + h * p)

    def insert_y(self, q: int) -> Bihomography:
        """Substitute y -> q + 1/y."""
        a, b, c, d, e, f, g, h = self._tuple()
        return Bihomography(c, d, a + c * q, b + d * q, g, h, e + g * q, f + h * q)

    def insert_x_inf(self) -> Bihomography:
        """Let x -> inf: only the x-carrying coefficients survive."""
        _, b, _, d, _, f, _, h = self._tuple()
        return Bihomography(b, b, d, d, f, f, h, h)

    def insert_y_inf(self) -> Bihomography:
        """Let y -> inf: only the y-carrying coefficients survive."""
        _, _, c, d, _, _, g, h = self._tuple()
        return Bihomography(c, d, c, d, g, h, g, h)

    def output(self, r: int) -> Bihomography:
        """Replace R by 1/(R - r) after emitting r."""
        a, b, c, d, e, f, g, h = self._tuple()
        return Bihomography(e, f, g, h, a - e * r, b - f * r, c - g * r, d - h * r)

    def negate(self) -> Bihomography:
        a, b, c, d, e, f, g, h = self._tuple()
        return Bihomography(-a, -b, -c, -d, e, f, g, h)

    def negate_x(self) -> Bihomography:
        """Substitute x -> -x."""
        a, b, c, d, e, f, g, h = self._tuple()
        return Bihomography(a, -b, c, -d, e, -f, g, -h)

    def negate_y(self) -> Bihomography:
        """Substitute y -> -y."""
        a, b, c, d, e, f, g, h = self._tuple()
        return Bihomography(a, b, -c, -d, e, f, -g, -h)

    def _tuple(self) -> Tuple[int, int, int, int, int, int, int, int]:
        return self.a, self.b, self.c, self.d, self.e, self.f, self.g, self.h


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def initial(self) -> Bihomography:
        match self:
            case Operator.ADD:
                return Bihomography(0, 1, 1, 0, 1, 0, 0, 0)
            case Operator.SUB:
                return Bihomography(0, 1, -1, 0, 1, 0, 0, 0)
            case Operator.MUL:
                return Bihomography(0, 0, 0, 1, 1, 0, 0, 0)
            case Operator.DIV:
                return Bihomography(0, 1, 0, 0, 0, 0, 1, 0)
        assert False, "unreachable"


class _Operand:
    """Cursor over the terms of one input."""

    def __init__(self, cf: ContinuedFraction) -> None:
        # the empty sequence is zero, which still has to be substituted once
        self.terms = cf.coefficients or (0,)
        self.position = 0
        self.at_infinity = False

    def exhausted(self) -> bool:
        return self.position >= len(self.terms)

    def next_term(self) -> int:
        term = self.terms[self.position]
        self.position += 1
        return term


def _common_floor(state: Bihomography) -> Optional[int]:
    """The integer part shared by all four corners, if it is already determined."""
    dens = state.denominators()
    if any(m == 0 for m in dens):
        return None
    if not (all(m > 0 for m in dens) or all(m < 0 for m in dens)):
        return None
    floors = {n // m for n, m in zip(state.numerators(), dens)}
    if len(floors) != 1:
        return None
    return floors.pop()


def _advance_x(state: Bihomography) -> bool:
    """Decide which input currently dominates the uncertainty of the output."""
    if state.f == 0 or state.h == 0:
        return False
    if state.e == 0 or state.g == 0:
        return True
    ae, bf, cg, _ = state.corners()
    assert ae is not None and bf is not None and cg is not None
    return abs(bf - ae) > abs(cg - ae)


def _step(state: Bihomography, operand: _Operand, is_x: bool) -> Bihomography:
    if not operand.exhausted():
        term = operand.next_term()
        return state.insert_x(term) if is_x else state.insert_y(term)
    operand.at_infinity = True
    return state.insert_x_inf() if is_x else state.insert_y_inf()


def apply(
    op: Operator,
    x: ContinuedFraction,
    y: ContinuedFraction,
    settings: Optional[GosperSettings] = None,
) -> ContinuedFraction:
    """
    Compute ``x op y`` term by term.

    Raises:
        DivisionByZero: ``op`` is division and ``y`` is zero, or the result is infinite.
        NonTerminating: the loop ran for more than ``settings.max_iterations`` steps.
    """
    settings = settings or DEFAULT_SETTINGS
    if op == Operator.DIV and y.is_zero:
        raise DivisionByZero(f"division of {pp(x)} by zero")

    state = op.initial()
    if x.negative:
        state = state.negate_x()
    if y.negative:
        state = state.negate_y()
    LOG.debug(f"{pp(x)} {op.value} {pp(y)}: start at {pp(state)}")

    xs, ys = _Operand(x), _Operand(y)
    terms: List[int] = []
    negative = False
    iterations = 0

    while True:
        iterations += 1
        if iterations > settings.max_iterations:
            raise NonTerminating(settings.max_iterations, terms)

        if all(m == 0 for m in state.denominators()):
            # R - r was exactly zero after the last emission
            if not terms:
                raise DivisionByZero(f"{pp(x)} {op.value} {pp(y)} has no finite value")
            break

        if xs.at_infinity and ys.at_infinity:
            assert state.is_constant()
            tail = from_rational(Fraction(state.d, state.h))
            assert not terms or not tail.negative
            negative = negative != tail.negative
            terms.extend(tail.coefficients)
            break

        r = _common_floor(state)
        if r is not None:
            if r < 0 and not terms and not negative:
                # the value lies in [r, r + 1) with r + 1 <= 0; continue on -R
                negative = True
                state = state.negate()
                continue
            terms.append(r)
            state = state.output(r)
            continue

        if _advance_x(state):
            if not xs.at_infinity:
                state = _step(state, xs, True)
            else:
                state = _step(state, ys, False)
        else:
            if not ys.at_infinity:
                state = _step(state, ys, False)
            else:
                state = _step(state, xs, True)

    result = ContinuedFraction(terms, negative).canonical()
    LOG.debug(f"{pp(x)} {op.value} {pp(y)} = {pp(result)} after {iterations} iterations")
    return result
