import io

import pytest

from oddments.triangle_cli import main, run


def _run(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def test_three_sides():
    code, out = _run("3 4 5\n")
    assert code == 0
    assert "Please note that these values are rounded:" in out
    assert "a: 3.000000000\nb: 4.000000000\nc: 5.000000000\n" in out
    assert "Input angles" not in out


def test_prompts_in_order():
    code, out = _run("3\n4\n5\n")
    assert code == 0
    assert out.index("a: ") < out.index("b: ") < out.index("c: ")


def test_not_a_number():
    code, out = _run("x\n")
    assert code == 1
    assert out.endswith("Needs to be a number\n")


def test_end_of_input():
    code, out = _run("3\n")
    assert code == 1
    assert out.endswith("Needs to be a number\n")


def test_negative_side():
    code, out = _run("-1\n")
    assert code == 2
    assert out.endswith("What?\n")


def test_angle_over_half_turn():
    code, out = _run("5 0 0 200\n")
    assert code == 2
    assert out.endswith("What?\n")


def test_no_sides():
    code, out = _run("0 0 0\n")
    assert code == 8
    assert out.endswith("Not enought information to calculate triangle from.\n")


def test_too_much_angle():
    code, out = _run("5 0 0 100 100\n")
    assert code == 3
    assert out.endswith("Too much angle!\n")


def test_degenerate_three_sides():
    code, out = _run("1 2 3\n")
    assert code == 4
    assert out.endswith("No solution\n")


def test_two_sides_two_solutions():
    code, out = _run("3 4 0 30\n")
    assert code == 0
    assert "Solution nr. 1:" in out
    assert "Solution nr. 2:" in out


def test_two_sides_impossible():
    code, out = _run("1 5 0 30\n")
    assert code == 7
    assert out.endswith("Impossible triangle!\n")


def test_one_side_two_angles():
    code, out = _run("5 0 0 60 60\n")
    assert code == 0
    assert "a: 5.000000000" in out
    assert "A: 60.000000000" in out
    assert "Solution nr." not in out


def test_area_completes_triangle():
    code, out = _run("3 4 0 0 0 0 6\n")
    assert code == 0
    assert "Input area (0 for unknown):" in out
    assert out.count("Solution nr.") == 2


def test_area_impossible():
    code, out = _run("1 1 0 0 0 0 5\n")
    assert code == 9
    assert out.endswith("Impossible triangle!\n")


def test_area_zero_is_insufficient():
    code, out = _run("3 4 0 0 0 0 0\n")
    assert code == 8
    assert out.endswith("Not enought information to calculate triangle from.\n")


def test_one_side_one_angle_without_opposite():
    code, out = _run("5 0 0 40 0 0 0\n")
    assert code == 8
    assert "Area: " in out


def test_too_few_facts():
    code, out = _run("5 0 0 0 0 0\n")
    assert code == 8
    assert out.endswith("Not enought information to calculate triangle from.\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 4 5\n"))
    assert main() == 0
    assert "c: 5.000000000" in capsys.readouterr().out


@pytest.mark.parametrize("text", ["3 4 5", "3\n4\n5", "  3\t4  5  \n"])
def test_whitespace_is_ignored(text):
    code, out = _run(text)
    assert code == 0
    assert "b: 4.000000000" in out