from fractions import Fraction
import logging

from cfrac.cf import from_rational, to_rational

__all__ = ["round_rational"]

LOG = logging.getLogger(__name__)


def round_rational(q: Fraction | int, precision: int = 24) -> Fraction:
    """
    Approximate a rational with one whose numerator and denominator fit in ``precision`` bits.

    Args:
        q: The rational to approximate.
        precision: Bit budget for both the numerator magnitude and the denominator.
                   A budget of 0 is treated as 1.

    Returns:
        The longest convergent of ``q`` with ``|numerator| <= 2**precision - 1`` and
        ``denominator <= 2**precision - 1``. Truncating the continued fraction gives
        the best approximation for its denominator, so no other convergent within
        the budget is closer to ``q``.
    """
    if precision < 0:
        raise ValueError("precision must be non-negative")
    bound = (1 << max(precision, 1)) - 1

    cf = from_rational(q)
    approx = to_rational(cf)
    while abs(approx.numerator) > bound or approx.denominator > bound:
        LOG.debug(f"{approx} exceeds {precision} bits, dropping coefficient {cf[-1]}")
        cf = cf.truncate(len(cf) - 1)
        approx = to_rational(cf)
    return approx
