from fractions import Fraction

import pytest

from cfrac.cf import from_rational, pp
from cfrac.gosper import GosperSettings
from cfrac.main import fold, main


def test_sum(capsys):
    assert main(["6/11", "+", "4/5"]) == 0
    assert capsys.readouterr().out == "[ 1; 2, 1, 8, 2 ] = 74/55\n"


def test_folds_left_to_right(capsys):
    assert main(["1", "+", "2", "x", "3"]) == 0
    assert capsys.readouterr().out == "[ 9 ] = 9\n"


def test_negative_operand(capsys):
    assert main(["3", "-", "-2"]) == 0
    assert capsys.readouterr().out == "[ 5 ] = 5\n"


def test_negative_rational_after_separator(capsys):
    assert main(["--", "-14/55", "*", "55"]) == 0
    assert capsys.readouterr().out == "- [ 14 ] = -14\n"


def test_precision(capsys):
    assert main(["--precision", "8", "355/113", "*", "1"]) == 0
    assert capsys.readouterr().out == "[ 3; 7, 16 ] = 22/7\n"


def test_division_by_zero(capsys):
    assert main(["1", "/", "0"]) == 1
    assert "error:" in capsys.readouterr().err


def test_iteration_cap(capsys):
    assert main(["--max-iterations", "2", "6/11", "+", "4/5"]) == 1
    assert "iterations" in capsys.readouterr().err


def test_help_describes_every_option(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "give up" in out
    assert "round the" in out


@pytest.mark.parametrize("argv", [
    ["1", "+"],
    ["1", "%", "2"],
    ["one"],
    ["1/0"],
    ["--precision", "-1", "1"],
    ["--max-iterations", "0", "1"],
])
def test_malformed_input(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2


def test_fold():
    result = fold(["6/11", "/", "4/5", "-", "1/2"], GosperSettings())
    assert result == from_rational(Fraction(15, 22) - Fraction(1, 2))
    assert pp(result) == "[ 0; 5, 2 ]"
