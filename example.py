#!/usr/bin/env python3
"""
Example of continued-fraction arithmetic.

This script shows how to:
1. Expand rationals into continued fractions
2. Combine them term by term with Gosper's algorithm
3. Read the results back as rationals, rounded to a bit budget if needed
"""

from fractions import Fraction

from cfrac import from_rational, pp, round_rational, to_rational


def main():
    af, bf = Fraction(6, 11), Fraction(4, 5)
    a, b = from_rational(af), from_rational(bf)

    for symbol, r, rf in [
        ("+", a + b, af + bf),
        ("-", a - b, af - bf),
        ("*", a * b, af * bf),
        ("/", a / b, af / bf),
    ]:
        print(f"{pp(a)} {symbol} {pp(b)} = {pp(r)} = {pp(to_rational(r))}")
        assert to_rational(r) == rf

    q = Fraction(103993, 33102)
    for precision in (4, 8, 16):
        print(f"{pp(q)} in {precision} bits: {pp(round_rational(q, precision))}")


if __name__ == "__main__":
    main()
