"""Interactive triangle calculator: asks for three facts, prints the rest."""

from __future__ import annotations

import math
import re
import sys
from typing import Iterable, TextIO

from oddments.triangle import (
    Side,
    TriangleError,
    deg2rad,
    format_solution,
    from_one_side,
    from_three_sides,
    from_two_sides,
)

__all__ = ["run", "main"]

_HEADER = (
    "Calculating triangles with sides, angles and area.\n"
    "Tell me 3 things about a triangle, and I give you the rest.\n"
    "\n"
    "Input sides (0 for unknown):\n"
)
_ROUNDED = "\nPlease note that these values are rounded:\n"
_INSUFFICIENT = "Not enought information to calculate triangle from.\n"
_HALF_TURN = deg2rad(180)

# For a missing side, the angle the second solution is taken from.
_SUPPLEMENT_SOURCE = (0, 0, 2)

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class _Exit(Exception):
    def __init__(self, code: int, message: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class _Scanner:
    """Reads numbers one at a time from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._lines = iter(stream)
        self._pending = ""

    def read_number(self) -> float | None:
        while not self._pending.strip():
            line = next(self._lines, None)
            if line is None:
                return None
            self._pending = line
        text = self._pending.lstrip()
        match = _NUMBER.match(text)
        if match is None:
            self._pending = text
            return None
        self._pending = text[match.end():]
        return float(match.group())


def _quotient(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator > 0:
        return math.inf
    if numerator < 0:
        return -math.inf
    return math.nan


def _ask(scanner: _Scanner, out: TextIO, prompt: str, upper: float | None = None) -> float:
    out.write(prompt)
    value = scanner.read_number()
    if value is None:
        raise _Exit(1, "Needs to be a number\n")
    if value < 0 or (upper is not None and value > upper):
        raise _Exit(2, "What?\n")
    return value


def _solve_with_area(sides: list[float], angles: list[float], area: float, out: TextIO) -> None:
    for missing, side in enumerate(sides):
        if side:
            continue
        known = math.prod(s for index, s in enumerate(sides) if index != missing)
        ratio = _quotient(area, 0.5 * known)
        if ratio > 1.0 or ratio < -1.0:
            raise _Exit(9, "Impossible triangle!\n")
        angles[missing] = math.asin(ratio)
        try:
            first = from_two_sides(*sides, *angles)[0]
            out.write(_ROUNDED)
            out.write(format_solution(first, 1))
            angles[missing] = _HALF_TURN - angles[_SUPPLEMENT_SOURCE[missing]]
            second = from_two_sides(*sides, *angles)[0]
        except TriangleError as err:
            raise _Exit(9, f"{err}\n") from err
        out.write(format_solution(second, 2))


def _session(scanner: _Scanner, out: TextIO) -> int:
    out.write(_HEADER)
    a = _ask(scanner, out, "a: ")
    b = _ask(scanner, out, "b: ")
    c = _ask(scanner, out, "c: ")

    known_sides = sum(side > 0 for side in (a, b, c))
    if known_sides == 0:
        raise _Exit(8, _INSUFFICIENT)

    known_angles = 0
    A = B = C = 0.0
    if known_sides + known_angles != 3:
        out.write("\nInput angles in degrees (0 for unknown):\n")
        A = _ask(scanner, out, "A: ", upper=180)
        if A > 0:
            known_angles += 1
    if known_sides + known_angles != 3:
        B = _ask(scanner, out, "B: ")
        if A + B > 180:
            raise _Exit(3, "Too much angle!\n")
        if B > 0:
            known_angles += 1
    if known_sides + known_angles != 3:
        C = _ask(scanner, out, "C: ")
        if A + B + C > 180:
            raise _Exit(3, "Too much angle!\n")
        if C > 0:
            known_angles += 1

    A, B, C = deg2rad(A), deg2rad(B), deg2rad(C)

    if (known_sides, known_angles) in ((2, 0), (1, 1)):
        out.write("\nInput area (0 for unknown):\n")
        area = _ask(scanner, out, "Area: ")
        if area == 0:
            raise _Exit(8, _INSUFFICIENT)
        if known_sides == 1:
            if A and b:
                c = _quotient(area, 0.5 * b * math.sin(A))
            elif A and c:
                b = _quotient(area, 0.5 * c * math.sin(A))
            if B and a:
                c = _quotient(area, 0.5 * a * math.sin(B))
            elif B and c:
                a = _quotient(area, 0.5 * c * math.sin(B))
            if C and a:
                b = _quotient(area, 0.5 * a * math.sin(C))
            elif C and b:
                a = _quotient(area, 0.5 * b * math.sin(C))
        _solve_with_area([a, b, c], [A, B, C], area, out)
        return 0

    if known_sides + known_angles != 3:
        raise _Exit(8, _INSUFFICIENT)

    if known_sides == 3:
        try:
            triangle = from_three_sides(a, b, c)
        except TriangleError as err:
            raise _Exit(4, f"{err}\n") from err
        out.write(_ROUNDED)
        out.write(format_solution(triangle, 0))
    elif known_sides == 2:
        try:
            solutions = from_two_sides(a, b, c, A, B, C)
        except TriangleError as err:
            raise _Exit(7, f"{err}\n") from err
        out.write(_ROUNDED)
        if len(solutions) == 1:
            out.write(format_solution(solutions[0], 0))
        else:
            for number, triangle in enumerate(solutions, start=1):
                out.write(format_solution(triangle, number))
    else:
        which, side = next(
            (which, side) for which, side in zip(Side, (a, b, c)) if side
        )
        out.write(_ROUNDED)
        out.write(format_solution(from_one_side(which, side, A, B, C), 0))
    return 0


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run one calculation reading from ``stdin``; return the exit status."""
    try:
        return _session(_Scanner(stdin), stdout)
    except _Exit as stop:
        stdout.write(stop.message)
        return stop.code


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())