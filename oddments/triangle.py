"""Solving triangles from three known sides, angles or the area.

Angles are held in radians. Sides and angles are named the usual way:
side ``a`` lies opposite angle ``A`` and so on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "Side",
    "Triangle",
    "TriangleError",
    "deg2rad",
    "rad2deg",
    "from_three_sides",
    "from_one_side",
    "from_two_sides",
    "format_solution",
]


class TriangleError(ValueError):
    """Raised when the given values describe no triangle."""


class Side(IntEnum):
    """Which side of a triangle a single known length belongs to."""

    A = 1
    B = 2
    C = 3


def deg2rad(deg: float) -> float:
    """Convert degrees to radians."""
    return (math.pi / 180) * deg


def rad2deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180 / math.pi)


_HALF_TURN = deg2rad(180)


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def _asin(value: float) -> float:
    return math.asin(value) if -1.0 <= value <= 1.0 else math.nan


def _acos(value: float) -> float:
    return math.acos(value) if -1.0 <= value <= 1.0 else math.nan


def _div(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator > 0:
        return math.inf
    if numerator < 0:
        return -math.inf
    return math.nan


@dataclass(frozen=True)
class Triangle:
    """A solved triangle: three sides and three angles in radians."""

    a: float
    b: float
    c: float
    A: float
    B: float
    C: float

    @property
    def area(self) -> float:
        """The area, from two sides and the angle between them."""
        return 0.5 * self.a * self.b * math.sin(self.C)


def from_three_sides(a: float, b: float, c: float) -> Triangle:
    """Solve a triangle whose three sides are known."""
    if a >= b + c or b >= a + c or c >= a + b:
        raise TriangleError("No solution")
    return Triangle(
        a,
        b,
        c,
        _acos((a * a - b * b - c * c) / (-2.0 * b * c)),
        _acos((b * b - a * a - c * c) / (-2.0 * a * c)),
        _acos((c * c - a * a - b * b) / (-2.0 * a * b)),
    )


def from_one_side(which: Side | int, side: float, A: float, B: float, C: float) -> Triangle:
    """Solve a triangle from one side and at least two of its angles.

    A missing angle is given as 0. ``which`` names the known side; a value
    that is not a :class:`Side` raises ``ValueError``.
    """
    which = Side(which)
    if not A:
        A = _HALF_TURN - B - C
    if not B:
        B = _HALF_TURN - A - C
    if not C:
        C = _HALF_TURN - A - B

    sin_a, sin_b, sin_c = math.sin(A), math.sin(B), math.sin(C)
    if which is Side.A:
        sides = (side, _div(side * sin_b, sin_a), _div(side * sin_c, sin_a))
    elif which is Side.B:
        sides = (_div(side * sin_a, sin_b), side, _div(side * sin_c, sin_b))
    else:
        sides = (_div(side * sin_a, sin_c), _div(side * sin_b, sin_c), side)
    return Triangle(*sides, A, B, C)


def _rotate_right(values: list[float]) -> list[float]:
    sides, angles = values[:3], values[3:]
    return [sides[2], sides[0], sides[1], angles[2], angles[0], angles[1]]


def from_two_sides(a: float, b: float, c: float, A: float, B: float, C: float) -> list[Triangle]:
    """Solve a triangle from two sides and one angle.

    Unknown values are given as 0. One or two triangles are returned,
    two when the known angle lies opposite the shorter known side.
    """
    if not (A or B or C):
        raise ValueError("an angle must be given")

    sides, angles = [a, b, c], [A, B, C]
    rotations = 0
    while angles[0] == 0.0:
        sides = sides[1:] + sides[:1]
        angles = angles[1:] + angles[:1]
        rotations += 1
    a, b, c = sides
    A = angles[0]

    first = [*sides, *angles]
    second = list(first)
    ambiguous = False

    if a and b:
        ratio = b * math.sin(A) / a
        if ratio > 1.0 or ratio < -1.0:
            raise TriangleError("Impossible triangle!")
        first[4] = _asin(ratio)
        if _HALF_TURN - first[4] + A < _HALF_TURN:
            ambiguous = True
            second[4] = _HALF_TURN - first[4]
            second[5] = _HALF_TURN - second[4] - A
            second[2] = _sqrt(a * a + b * b - 2 * a * b * math.cos(second[5]))
        first[5] = _HALF_TURN - first[4] - A
        first[2] = _sqrt(a * a + b * b - 2 * a * b * math.cos(first[5]))

    if a and c:
        ratio = c * math.sin(A) / a
        if ratio > 1.0 or ratio < -1.0:
            raise TriangleError("Impossible triangle!")
        first[5] = _asin(ratio)
        if _HALF_TURN - first[5] + A < _HALF_TURN:
            ambiguous = True
            second[5] = _HALF_TURN - first[5]
            second[4] = _HALF_TURN - second[5] - A
            second[1] = _sqrt(a * a + c * c - 2 * a * c * math.cos(second[4]))
        first[4] = _HALF_TURN - first[5] - A
        first[1] = _sqrt(a * a + c * c - 2 * a * c * math.cos(second[4]))

    if b and c:
        first[0] = _sqrt(b * b + c * c - 2 * b * c * math.cos(A))
        first[4] = _acos(
            _div(b * b - first[0] * first[0] - c * c, -2 * first[0] * c)
        )
        first[5] = _HALF_TURN - first[4] - A

    for _ in range(rotations):
        first = _rotate_right(first)
        second = _rotate_right(second)

    solutions = [Triangle(*first)]
    if ambiguous:
        solutions.append(Triangle(*second))
    return solutions


def format_solution(triangle: Triangle, number: int = 0) -> str:
    """Render a solved triangle as text, with angles in degrees.

    A non-zero ``number`` adds a heading naming the solution.
    """
    lines = [""]
    if number:
        lines.append(f"Solution nr. {number}:")
    lines += [
        f"a: {triangle.a:.9f}",
        f"b: {triangle.b:.9f}",
        f"c: {triangle.c:.9f}",
        f"A: {rad2deg(triangle.A):.9f}",
        f"B: {rad2deg(triangle.B):.9f}",
        f"C: {rad2deg(triangle.C):.9f}",
        f"Area: {triangle.area:.9f}",
    ]
    return "\n".join(lines) + "\n"