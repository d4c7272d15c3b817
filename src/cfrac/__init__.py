from cfrac.cf import (
    ContinuedFraction,
    Fixpoint,
    convergents,
    from_float,
    from_integer,
    from_rational,
    pp,
    pps,
    to_rational,
)
from cfrac.gosper import DEFAULT_SETTINGS, Bihomography, GosperSettings, Operator, apply
from cfrac.rounding import round_rational
from cfrac.util import CFracError, DivisionByZero, NonTerminating

__all__ = [
    "ContinuedFraction",
    "Fixpoint",
    "convergents",
    "from_float",
    "from_integer",
    "from_rational",
    "pp",
    "pps",
    "to_rational",
    "DEFAULT_SETTINGS",
    "Bihomography",
    "GosperSettings",
    "Operator",
    "apply",
    "round_rational",
    "CFracError",
    "DivisionByZero",
    "NonTerminating",
]
