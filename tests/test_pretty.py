from fractions import Fraction

from cfrac.cf import ContinuedFraction, from_integer, from_rational, pp, pps
from cfrac.gosper import Bihomography, Operator


def test_integer_one():
    assert pp(from_integer(1)) == "[ 1 ]"


def test_zero():
    assert pp(ContinuedFraction()) == "[ 0 ]"
    assert pp(from_rational(0)) == "[ 0 ]"
    assert pp(from_integer(0)) == "[ 0 ]"


def test_terms():
    assert pp(from_rational(Fraction(6, 11))) == "[ 0; 1, 1, 5 ]"
    assert pp(from_rational(Fraction(-14, 55))) == "- [ 0; 3, 1, 13 ]"
    assert str(from_rational(Fraction(74, 55))) == "[ 1; 2, 1, 8, 2 ]"
    assert str(from_integer(-3)) == "- [ 3 ]"


def test_rationals():
    assert pps([Fraction(15, 22), Fraction(-14, 55), 3]) == ["15/22", "-14/55", "3"]


def test_engine_states():
    assert pp(Operator.ADD.initial()) == "(x + y) / (1)"
    assert pp(Operator.SUB.initial()) == "(x - y) / (1)"
    assert pp(Operator.DIV.initial()) == "(x) / (y)"
    assert pp(Bihomography(2, 0, -3, 1, 0, 0, 0, 0)) == "(2 - 3y + xy) / (0)"


def test_repr():
    assert repr(from_rational(Fraction(-3, 2))) == "ContinuedFraction([1, 2], negative=True)"
