from .base import *
from .convert import *
from .pretty import pp, pps

__all__ = [
    "ContinuedFraction",
    "Fixpoint",
    "from_integer",
    "from_rational",
    "from_float",
    "to_rational",
    "convergents",
    "pp",
    "pps",
]
