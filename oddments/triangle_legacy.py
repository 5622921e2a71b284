"""The earlier triangle solver.

It reports every solution with a short "Sides / Angles" layout and can
fill in a missing side or angle from the area. Angles are in radians.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from oddments.triangle import deg2rad, rad2deg

__all__ = [
    "Solution",
    "ImpossibleTriangleError",
    "NotEnoughInformationError",
    "format_solution",
    "solve_three_sides",
    "solve_two_sides",
    "solve_one_side",
    "complete_with_area",
]

_HALF_TURN = deg2rad(180)


class ImpossibleTriangleError(ValueError):
    """Raised when the given values describe no triangle."""


class NotEnoughInformationError(ValueError):
    """Raised when too little is known to work a triangle out."""


def _div(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator > 0:
        return math.inf
    if numerator < 0:
        return -math.inf
    return math.nan


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def _asin(value: float) -> float:
    return math.asin(value) if -1.0 <= value <= 1.0 else math.nan


def _acos(value: float) -> float:
    return math.acos(value) if -1.0 <= value <= 1.0 else math.nan


def _rotate(values: list[float], turns: int) -> list[float]:
    turns %= 3
    return values[turns:] + values[:turns]


@dataclass(frozen=True)
class Solution:
    """One solved triangle; ``number`` is 0 when it is the only solution."""

    a: float
    b: float
    c: float
    A: float
    B: float
    C: float
    number: int = 0

    @property
    def area(self) -> float:
        """The area, from sides a and b and the angle C between them."""
        return 0.5 * self.a * self.b * math.sin(self.C)


def format_solution(solution: Solution) -> str:
    """Render a solution as text, with angles in degrees."""
    lines = ["  ---------"]
    if solution.number:
        lines.append(f"Solution nr. {solution.number}:")
    lines += [
        "Sides:",
        f"a: {solution.a:f}",
        f"b: {solution.b:f}",
        f"c: {solution.c:f}",
        "",
        "Angles:",
        f"A: {rad2deg(solution.A):f}",
        f"B: {rad2deg(solution.B):f}",
        f"C: {rad2deg(solution.C):f}",
        f"Area: {solution.area:f}",
    ]
    return "\n".join(lines) + "\n"


def solve_three_sides(a: float, b: float, c: float) -> Solution:
    """Solve a triangle whose three sides are known."""
    if a >= b + c or b >= a + c or c >= a + b:
        raise ImpossibleTriangleError("No solution")
    A = _acos(_div(b * b + c * c - a * a, 2 * b * c))
    B = _acos(_div(a * a + c * c - b * b, 2 * a * c))
    C = _acos(_div(b * b + a * a - c * c, 2 * b * a))
    return Solution(a, b, c, A, B, C)


def solve_two_sides(
    a: float, b: float, c: float, A: float, B: float, C: float
) -> list[Solution]:
    """Solve a triangle from two sides and one angle (unknowns as 0).

    Returns one solution numbered 0, or two numbered 1 and 2 when the
    case is ambiguous.
    """
    rotation = 0
    if A:
        rotation = 0
    if B:
        rotation = 1
    if C:
        rotation = 2

    sa, sb, sc = _rotate([a, b, c], rotation)
    angle = _rotate([A, B, C], rotation)[0]

    def unrotated(sides: list[float], angles: list[float], number: int) -> Solution:
        return Solution(
            *_rotate(sides, -rotation), *_rotate(angles, -rotation), number=number
        )

    if sa and sb:
        ratio = _div(sb * math.sin(angle), sa)
        if ratio > 1 or ratio < -1:
            raise ImpossibleTriangleError("Impossible triangle!")
        acute = _asin(ratio)
        found = []
        if _HALF_TURN - acute + angle < _HALF_TURN:
            other = _HALF_TURN - acute
            third = deg2rad(180 - rad2deg(angle) - rad2deg(other))
            side = _div(sa * math.sin(third), math.sin(angle))
            found.append(unrotated([sa, sb, side], [angle, other, third], 1))
        third = deg2rad(180 - rad2deg(angle) - rad2deg(acute))
        side = _div(sa * math.sin(third), math.sin(angle))
        found.append(unrotated([sa, sb, side], [angle, acute, third], 2 if found else 0))
        return found

    if sa and sc:
        ratio = _div(sc * math.sin(angle), sa)
        if ratio > 1 or ratio < -1:
            raise ImpossibleTriangleError("Impossible triangle!")
        acute = _asin(ratio)
        found = []
        if _HALF_TURN - acute + angle < _HALF_TURN:
            other = _HALF_TURN - acute
            middle = deg2rad(180 - rad2deg(angle) - rad2deg(other))
            side = _div(sa * math.sin(middle), math.sin(angle))
            found.append(unrotated([sa, side, sc], [angle, middle, other], 1))
        middle = deg2rad(180 - rad2deg(angle) - rad2deg(acute))
        side = _div(sa * math.sin(middle), math.sin(angle))
        found.append(unrotated([sa, side, sc], [angle, middle, acute], 2 if found else 0))
        return found

    if sb and sc:
        side = _sqrt(sb * sb + sc * sc - 2 * sb * sc * math.cos(angle))
        ratio = _div(side * side + sc * sc - sb * sb, 2 * side * sc)
        if ratio > 1 or ratio < -1:
            raise ImpossibleTriangleError("Impossible triangle!")
        middle = _acos(ratio)
        third = _HALF_TURN - angle - middle
        return [unrotated([side, sb, sc], [angle, middle, third], 0)]

    raise ImpossibleTriangleError("Impossible triangle!")


def solve_one_side(
    a: float, b: float, c: float, A: float, B: float, C: float
) -> Solution:
    """Solve a triangle from one side and two or three angles (unknowns as 0)."""
    if not A:
        A = _HALF_TURN - B - C
    if not B:
        B = _HALF_TURN - A - C
    if not C:
        C = _HALF_TURN - B - A

    if a:
        b = _div(a * math.sin(B), math.sin(A))
        c = _sqrt(a * a + b * b - 2 * a * b * math.cos(C))
    elif b:
        c = _div(b * math.sin(C), math.sin(B))
        a = _sqrt(b * b + c * c - 2 * b * c * math.cos(A))
    elif c:
        a = _div(c * math.sin(A), math.sin(C))
        b = _sqrt(a * a + c * c - 2 * a * c * math.cos(B))
    return Solution(a, b, c, A, B, C)


def complete_with_area(
    a: float, b: float, c: float, A: float, B: float, C: float, area: float
) -> tuple[float, float, float, float, float, float]:
    """Use the area to find one more side or angle.

    Returns the updated ``(a, b, c, A, B, C)``. Raises
    :class:`NotEnoughInformationError` when a known angle lies opposite a
    known side, or when the area is not positive.
    """
    if (A and a) or (B and b) or (C and c):
        raise NotEnoughInformationError("Not enough information.")
    if area <= 0:
        raise NotEnoughInformationError("Not enough information.")

    if A:
        if b:
            c = _div(area, 0.5 * b * math.sin(A))
        else:
            b = _div(area, 0.5 * c * math.sin(A))
    elif B:
        if a:
            c = _div(area, 0.5 * a * math.sin(B))
        else:
            a = _div(area, 0.5 * c * math.sin(B))
    elif C:
        if a:
            b = _div(area, 0.5 * a * math.sin(C))
        else:
            a = _div(area, 0.5 * b * math.sin(C))
    elif a == 0:
        A = _asin(_div(area, 0.5 * b * c))
    elif b == 0:
        B = _asin(_div(area, 0.5 * a * c))
    elif c == 0:
        C = _asin(_div(area, 0.5 * b * a))
    return a, b, c, A, B, C