from __future__ import annotations
import argparse
from fractions import Fraction
import logging
import sys
from typing import List, Optional, Sequence

from cfrac.cf import ContinuedFraction, from_rational, pp, to_rational
from cfrac.gosper import GosperSettings, Operator, apply
from cfrac.rounding import round_rational
from cfrac.util import CFracError

LOG = logging.getLogger(__name__)

_SYMBOLS = {"+": Operator.ADD, "-": Operator.SUB, "*": Operator.MUL, "x": Operator.MUL, "/": Operator.DIV}


def parse_operand(token: str) -> ContinuedFraction:
    try:
        return from_rational(Fraction(token))
    except (ValueError, ZeroDivisionError) as e:
        raise ValueError(f"invalid operand {token!r}") from e


def fold(tokens: Sequence[str], settings: GosperSettings) -> ContinuedFraction:
    """Evaluate ``operand (operator operand)*`` from left to right."""
    if len(tokens) % 2 == 0:
        raise ValueError("expected an operand after every operator")
    result = parse_operand(tokens[0])
    for symbol, operand in zip(tokens[1::2], tokens[2::2]):
        if symbol not in _SYMBOLS:
            raise ValueError(f"unknown operator {symbol!r}")
        result = apply(_SYMBOLS[symbol], result, parse_operand(operand), settings)
        LOG.debug(f"after {symbol} {operand}: {pp(result)}")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cfrac",
        description="Evaluate integer and rational arithmetic through continued fractions. "
        "Put '--' before the expression when an operand starts with '-'.",
    )
    parser.add_argument("expression", nargs="+", help="operands (n or p/q) separated by + - * x /")
    parser.add_argument("--precision", type=int, default=None,
                        help="round the printed rational to this many bits")
    parser.add_argument("--max-iterations", type=int, default=GosperSettings.max_iterations,
                        help="give up on an operation after this many engine steps")
    parser.add_argument("-v", "--verbose", action="store_true", help="log engine steps")
    args = parser.parse_args(argv)
    if args.precision is not None and args.precision < 0:
        parser.error("--precision must be non-negative")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = GosperSettings(max_iterations=args.max_iterations)
        result = fold(args.expression, settings)
    except CFracError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        parser.error(str(e))

    value = to_rational(result)
    if args.precision is not None:
        value = round_rational(value, args.precision)
    print(f"{pp(result)} = {pp(value)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
