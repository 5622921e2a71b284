import math

import pytest

from oddments.triangle import deg2rad
from oddments.triangle_legacy import (
    ImpossibleTriangleError,
    NotEnoughInformationError,
    Solution,
    complete_with_area,
    format_solution,
    solve_one_side,
    solve_three_sides,
    solve_two_sides,
)


def _law_of_sines_holds(s: Solution) -> bool:
    ratios = [s.a / math.sin(s.A), s.b / math.sin(s.B), s.c / math.sin(s.C)]
    return all(math.isclose(r, ratios[0], rel_tol=1e-9) for r in ratios)


def test_three_sides_right_triangle():
    s = solve_three_sides(3, 4, 5)
    assert (s.a, s.b, s.c) == (3, 4, 5)
    assert math.isclose(s.C, math.pi / 2)
    assert math.isclose(s.A + s.B + s.C, math.pi)
    assert s.number == 0


def test_three_sides_impossible():
    with pytest.raises(ImpossibleTriangleError, match="No solution"):
        solve_three_sides(1, 2, 3)


def test_format_solution_layout():
    text = format_solution(solve_three_sides(3, 4, 5))
    lines = text.splitlines()
    assert lines[0] == "  ---------"
    assert lines[1] == "Sides:"
    assert "a: 3.000000" in lines
    assert "C: 90.000000" in lines
    assert "" in lines and "Angles:" in lines
    assert lines[-1].startswith("Area: ")


def test_format_solution_numbered():
    s = Solution(1.0, 1.0, 1.0, math.pi / 3, math.pi / 3, math.pi / 3, number=2)
    assert format_solution(s).splitlines()[1] == "Solution nr. 2:"


def test_two_sides_ambiguous_case():
    found = solve_two_sides(5, 7, 0, deg2rad(30), 0, 0)
    assert [s.number for s in found] == [1, 2]
    for s in found:
        assert (s.a, s.b) == (5, 7)
        assert math.isclose(s.A, deg2rad(30))
        assert math.isclose(s.A + s.B + s.C, math.pi)
        assert _law_of_sines_holds(s)
    assert found[0].B > math.pi / 2 > found[1].B


def test_two_sides_impossible():
    with pytest.raises(ImpossibleTriangleError):
        solve_two_sides(1, 10, 0, deg2rad(60), 0, 0)


def test_two_sides_single_solution_when_angle_opposite_longer_side():
    found = solve_two_sides(7, 5, 0, deg2rad(30), 0, 0)
    assert len(found) == 1
    assert found[0].number == 0
    assert _law_of_sines_holds(found[0])


def test_two_sides_with_included_angle_rotated():
    found = solve_two_sides(3, 0, 4, 0, deg2rad(60), 0)
    assert len(found) == 1
    s = found[0]
    assert (s.a, s.c) == (3, 4)
    assert math.isclose(s.B, deg2rad(60))
    expected_b = math.sqrt(9 + 16 - 2 * 3 * 4 * math.cos(deg2rad(60)))
    assert math.isclose(s.b, expected_b)
    assert math.isclose(s.A + s.B + s.C, math.pi)


def test_one_side_equilateral():
    s = solve_one_side(1, 0, 0, deg2rad(60), deg2rad(60), 0)
    assert math.isclose(s.C, deg2rad(60))
    assert math.isclose(s.b, 1)
    assert math.isclose(s.c, 1)


def test_one_side_given_c():
    s = solve_one_side(0, 0, 2, deg2rad(50), 0, deg2rad(70))
    assert math.isclose(s.A + s.B + s.C, math.pi)
    assert s.c == 2
    assert _law_of_sines_holds(s)


def test_complete_with_area_finds_side():
    a, b, c, A, B, C = complete_with_area(0, 3, 0, deg2rad(90), 0, 0, 6)
    assert b == 3
    assert math.isclose(0.5 * b * c * math.sin(A), 6)


def test_complete_with_area_finds_angle():
    a, b, c, A, B, C = complete_with_area(0, 3, 4, 0, 0, 0, 6)
    assert math.isclose(0.5 * b * c * math.sin(A), 6)


def test_complete_with_area_rejects_opposite_pair():
    with pytest.raises(NotEnoughInformationError):
        complete_with_area(3, 0, 0, deg2rad(90), 0, 0, 6)


def test_complete_with_area_rejects_non_positive_area():
    with pytest.raises(NotEnoughInformationError):
        complete_with_area(0, 3, 4, 0, 0, 0, 0)