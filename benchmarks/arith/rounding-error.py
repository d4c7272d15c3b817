# Error of round_rational(q, p) against q as the bit budget p grows.
# Each jump in the curve is the next convergent of q entering the budget.

from fractions import Fraction
import math

import matplotlib.pyplot as plt
import numpy as np

from cfrac import round_rational


def main():
    targets = {
        "pi": Fraction(math.pi),
        "e": Fraction(math.e),
        "sqrt(2)": Fraction(math.sqrt(2)),
        "golden ratio": Fraction((1 + math.sqrt(5)) / 2),
    }
    precisions = np.arange(1, 33)

    for name, q in targets.items():
        errors = np.array([abs(float(round_rational(q, int(p)) - q)) for p in precisions])
        # exact hits would vanish on the log scale
        errors = np.maximum(errors, np.finfo(np.float64).tiny)
        plt.semilogy(precisions, errors, marker=".", label=name)

    plt.xlabel("precision (bits)")
    plt.ylabel("|round(q, p) - q|")
    plt.legend()
    plt.savefig("rounding-error.png", dpi=150)
    print("wrote rounding-error.png")


if __name__ == "__main__":
    main()
