# Gosper arithmetic against plain Fraction arithmetic on random operands.
# The engine never builds the intermediate fraction, so its cost follows the
# number of partial quotients rather than the size of numerator and denominator.

import argparse
from fractions import Fraction
import operator
import time

import numpy as np

from cfrac import Operator, apply, from_rational, to_rational


def random_rationals(rng: np.random.Generator, count: int, digits: int) -> list[Fraction]:
    hi = 10**digits
    return [
        Fraction(int(rng.integers(-hi, hi)), int(rng.integers(1, hi)))
        for _ in range(count)
    ]


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--count", type=int, default=500)
    parser.add_argument("--digits", type=int, default=12)
    args = parser.parse_args()

    rng = np.random.default_rng(0)
    xs = random_rationals(rng, args.count, args.digits)
    ys = [y if y != 0 else Fraction(1) for y in random_rationals(rng, args.count, args.digits)]
    cfs = [(from_rational(x), from_rational(y)) for x, y in zip(xs, ys)]

    for op, fn in [
        (Operator.ADD, operator.add),
        (Operator.SUB, operator.sub),
        (Operator.MUL, operator.mul),
        (Operator.DIV, operator.truediv),
    ]:
        start = time.perf_counter()
        results = [apply(op, x, y) for x, y in cfs]
        engine = time.perf_counter() - start

        start = time.perf_counter()
        expected = [fn(x, y) for x, y in zip(xs, ys)]
        plain = time.perf_counter() - start

        assert [to_rational(r) for r in results] == expected
        terms = np.array([len(r) for r in results])
        print(f"{op.name}: {engine * 1e3:.2f} ms gosper, {plain * 1e3:.2f} ms fraction, "
              f"{terms.mean():.1f} terms on average (max {terms.max()})")


if __name__ == "__main__":
    main()
