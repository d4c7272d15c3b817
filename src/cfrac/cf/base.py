from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
import numbers
import operator
from typing import List, Tuple


class Fixpoint(Enum):
    ZERO = 0
    ONE = 1
    NEGATIVE_ONE = -1

    def rational(self) -> Fraction:
        return Fraction(self.value)


@dataclass(frozen=True)
class ContinuedFraction:
    """Sign-magnitude continued fraction.

    The value is ``(-1)**negative * (c0 + 1/(c1 + 1/(c2 + ...)))`` where every
    coefficient is a non-negative integer. An empty sequence is zero.
    """

    coefficients: Tuple[int, ...] = ()
    negative: bool = False
    __match_args__ = ("coefficients", "negative")

    def __post_init__(self) -> None:
        # ints and numpy integers; floats and Fractions raise TypeError
        coefficients = tuple(operator.index(c) for c in self.coefficients)
        for c in coefficients:
            if c < 0:
                raise ValueError(f"coefficients must be non-negative, got {c}")
        object.__setattr__(self, "coefficients", coefficients)
        object.__setattr__(self, "negative", bool(self.negative))

    def __len__(self) -> int:
        return len(self.coefficients)

    def __getitem__(self, index: int) -> int:
        return self.coefficients[index]

    def copy(self) -> ContinuedFraction:
        return ContinuedFraction(self.coefficients, self.negative)

    def append(self, term: int) -> ContinuedFraction:
        """Return a copy with one more partial quotient.

        A negative term is stored by magnitude and marks the whole value negative.
        """
        negative = self.negative or term < 0
        return ContinuedFraction(self.coefficients + (abs(term),), negative)

    def truncate(self, length: int) -> ContinuedFraction:
        """Return the first ``length`` coefficients as a new continued fraction."""
        return ContinuedFraction(self.coefficients[:max(length, 0)], self.negative)

    def canonical(self) -> ContinuedFraction:
        """Fold zero partial quotients and a trailing 1 into their neighbours."""
        terms: List[int] = []
        pending = 0
        for i, c in enumerate(self.coefficients):
            if i > 0 and c == 0:
                # a + 1/(0 + 1/(b + ...)) == (a + b) + ...
                pending += 1
                continue
            if pending % 2 == 1 and terms:
                terms[-1] += c
            else:
                terms.append(c)
            pending = 0
        if pending % 2 == 1:
            # trailing a, 0 has no finite value
            raise ValueError(f"{list(self.coefficients)} does not denote a finite value")
        if len(terms) > 1 and terms[-1] == 1:
            terms.pop()
            terms[-1] += 1
        if terms == [0]:
            terms = []
        return ContinuedFraction(terms, self.negative and len(terms) > 0)

    # closed-form comparisons against 0, 1 and -1

    def equals(self, fixpoint: Fixpoint) -> bool:
        n = len(self.coefficients)
        match fixpoint:
            case Fixpoint.ZERO:
                return n == 0 or (n == 1 and self.coefficients[0] == 0)
            case Fixpoint.ONE:
                return not self.negative and n == 1 and self.coefficients[0] == 1
            case Fixpoint.NEGATIVE_ONE:
                return self.negative and n == 1 and self.coefficients[0] == 1
        assert False, "unreachable"

    def greater_than(self, fixpoint: Fixpoint) -> bool:
        n = len(self.coefficients)
        lead = self.coefficients[0] if n > 0 else 0
        match fixpoint:
            case Fixpoint.ZERO:
                return not self.negative and (n > 1 or (n == 1 and lead > 0))
            case Fixpoint.ONE:
                return not self.negative and ((n > 1 and lead >= 1) or (n >= 1 and lead > 1))
            case Fixpoint.NEGATIVE_ONE:
                return not self.negative or n == 0 or lead == 0
        assert False, "unreachable"

    @property
    def is_zero(self) -> bool:
        return self.equals(Fixpoint.ZERO)

    @property
    def is_one(self) -> bool:
        return self.equals(Fixpoint.ONE)

    @property
    def is_negative_one(self) -> bool:
        return self.equals(Fixpoint.NEGATIVE_ONE)

    def __bool__(self) -> bool:
        return not self.is_zero

    # conversions

    def to_rational(self) -> Fraction:
        from cfrac.cf.convert import to_rational
        return to_rational(self)

    def __float__(self) -> float:
        return float(self.to_rational())

    def round(self, precision: int = 24) -> Fraction:
        from cfrac.rounding import round_rational
        return round_rational(self.to_rational(), precision)

    # arithmetic through the bihomographic engine

    def _binary(self, op_symbol: str, other, reflected: bool = False):
        from cfrac.gosper import Operator, apply
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        op = Operator(op_symbol)
        if reflected:
            return apply(op, rhs, self)
        return apply(op, self, rhs)

    def __add__(self, other):
        return self._binary("+", other)

    def __radd__(self, other):
        return self._binary("+", other, reflected=True)

    def __sub__(self, other):
        return self._binary("-", other)

    def __rsub__(self, other):
        return self._binary("-", other, reflected=True)

    def __mul__(self, other):
        return self._binary("*", other)

    def __rmul__(self, other):
        return self._binary("*", other, reflected=True)

    def __truediv__(self, other):
        return self._binary("/", other)

    def __rtruediv__(self, other):
        return self._binary("/", other, reflected=True)

    def __neg__(self) -> ContinuedFraction:
        if self.is_zero:
            return self.copy()
        return ContinuedFraction(self.coefficients, not self.negative)

    def __abs__(self) -> ContinuedFraction:
        return ContinuedFraction(self.coefficients, False)

    def __str__(self) -> str:
        from cfrac.cf.pretty import pp
        return pp(self)

    def __repr__(self) -> str:
        return f"ContinuedFraction({list(self.coefficients)}, negative={self.negative})"


def _coerce(value) -> ContinuedFraction | None:
    if isinstance(value, ContinuedFraction):
        return value
    if isinstance(value, numbers.Rational):
        from cfrac.cf.convert import from_rational
        return from_rational(Fraction(value))
    return None
