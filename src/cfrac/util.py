from __future__ import annotations
from typing import Sequence


class CFracError(ArithmeticError):
    pass


class DivisionByZero(CFracError, ZeroDivisionError):
    """The divisor is zero or the result has no finite value."""


class NonTerminating(CFracError):
    """The bihomographic loop hit its iteration cap before the expansion ended."""

    def __init__(self, iterations: int, partial: Sequence[int]) -> None:
        super().__init__(f"no result after {iterations} iterations ({len(partial)} terms emitted)")
        self.iterations = iterations
        self.partial = tuple(partial)
