"""Front ends for the earlier triangle solver.

Three ways of running it: all values given as arguments, one round of
prompts, or prompts repeated until the user chooses to stop.
"""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable, Sequence, TextIO

from oddments.triangle import deg2rad
from oddments.triangle_legacy import (
    ImpossibleTriangleError,
    NotEnoughInformationError,
    complete_with_area,
    format_solution,
    solve_one_side,
    solve_three_sides,
    solve_two_sides,
)

__all__ = ["run_arguments", "run_interactive", "run_repeating", "main"]

VERSION = "v. 2.2"

_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT = re.compile(r"[+-]?\d+")

_NEGATIVE = "There is no such thing as a negative lenght!\n"
_NO_SIDE = "You need to give me at least one side\n"
_WRONG_ANGLE = "Wrong angle.\n"
_NOT_ENOUGH = "Not enough information.\n"
_TOO_MANY_ANGLES = (
    "You are giving too many angles, and the sum of them is not 180.\n"
    "I have no idea which of them is wrong, so i'm QUITTING.\n"
)
_HELP = (
    "\nWhen you run this program, you are asked for some things.\n"
    "You give 3 things about a triangle\n"
    "and this program will calculate the rest for you.\n"
    "Try with sides a=3, b=4, c=5\n\n"
)
_MENU = "\nExit program: press 1\nRun program again: press 2\n? "

Completer = Callable[
    [float, float, float, float, float, float],
    "tuple[float, float, float, float, float, float]",
]


def _atof(text: str) -> float:
    match = _FLOAT.match(text.lstrip())
    return float(match.group()) if match else 0.0


class _Scanner:
    """Reads numbers one at a time from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._lines = iter(stream)
        self._pending = ""

    def _fill(self) -> bool:
        while not self._pending.strip():
            line = next(self._lines, None)
            if line is None:
                return False
            self._pending = line
        self._pending = self._pending.lstrip()
        return True

    def _read(self, pattern: re.Pattern[str]) -> str | None:
        if not self._fill():
            return None
        match = pattern.match(self._pending)
        if match is None:
            return None
        self._pending = self._pending[match.end():]
        return match.group()

    def read_float(self) -> float:
        """The next number, or 0 when none can be read."""
        token = self._read(_FLOAT)
        return float(token) if token is not None else 0.0

    def read_int(self) -> int | None:
        token = self._read(_INT)
        return int(token) if token is not None else None

    def discard(self) -> bool:
        """Drop the next word; False when the input is exhausted."""
        if not self._fill():
            return False
        parts = self._pending.split(None, 1)
        self._pending = parts[1] if len(parts) > 1 else ""
        return True


def _count(*values: float) -> int:
    return sum(1 for value in values if value)


def _report_three_sides(a: float, b: float, c: float, out: TextIO) -> int:
    try:
        solution = solve_three_sides(a, b, c)
    except ImpossibleTriangleError as err:
        out.write(f"{err}\n")
        return 1
    out.write(format_solution(solution))
    return 0


def _finish(
    sides: Sequence[float],
    angles_deg: Sequence[float],
    out: TextIO,
    complete: Completer,
    straight_angle: float,
) -> int:
    a, b, c = sides
    A, B, C = (deg2rad(angle) if angle else angle for angle in angles_deg)
    known_sides = _count(a, b, c)
    known_angles = _count(A, B, C)

    if known_sides + known_angles < 3:
        if not ((known_sides == 1 and known_angles == 1) or known_sides == 2):
            out.write(_NOT_ENOUGH)
            return 1
        try:
            a, b, c, A, B, C = complete(a, b, c, A, B, C)
        except NotEnoughInformationError as err:
            out.write(f"{err}\n")
            return 1
        known_sides = _count(a, b, c)
        known_angles = _count(A, B, C)

    if known_angles == 3 and A + B + C != straight_angle:
        out.write(_TOO_MANY_ANGLES)
        return 1

    if known_sides == 2:
        try:
            solutions = solve_two_sides(a, b, c, A, B, C)
        except ImpossibleTriangleError as err:
            out.write(f"{err}\n")
            return 1
        for solution in solutions:
            out.write(format_solution(solution))
        return 0

    if known_sides == 1:
        out.write(format_solution(solve_one_side(a, b, c, A, B, C)))
        return 0

    out.write("Something is wrong...\n")
    return 2


def run_arguments(args: Sequence[str], stdout: TextIO) -> int:
    """Solve from seven arguments: a b c A B C area (0 for unknown)."""
    args = list(args)
    if len(args) != 7:
        stdout.write("Inputerror!\n")
        return 1

    a, b, c = (_atof(text) for text in args[:3])
    if a < 0 or b < 0 or c < 0:
        stdout.write(_NEGATIVE)
        return 1
    known_sides = _count(a, b, c)
    if known_sides == 0:
        stdout.write(_NO_SIDE)
        return 1
    if known_sides == 3:
        return _report_three_sides(a, b, c, stdout)

    angles = [_atof(text) for text in args[3:6]]
    if any(angle < 0 or angle >= 180 for angle in angles):
        stdout.write(_WRONG_ANGLE)
        return 1

    area = _atof(args[6])

    def complete(a, b, c, A, B, C):
        return complete_with_area(a, b, c, A, B, C, area)

    return _finish((a, b, c), angles, stdout, complete, deg2rad(180))


def _session(scanner: _Scanner, out: TextIO, straight_angle: float) -> int:
    out.write("Tell me 3 things about a triangle, and i will tell you the rest!\n")
    out.write("Sides (0 for unknown):\n")
    sides = []
    for name in "abc":
        out.write(f"{name}: ")
        value = scanner.read_float()
        if value < 0:
            out.write(_NEGATIVE)
            return 1
        sides.append(value)

    known_sides = _count(*sides)
    if known_sides == 0:
        out.write(_NO_SIDE)
        return 1
    if known_sides == 3:
        return _report_three_sides(*sides, out)

    out.write("Angles (0 for unknown):\n")
    angles = [0.0, 0.0, 0.0]
    for index, name in enumerate("ABC"):
        if index and known_sides + _count(*angles) >= 3:
            break
        out.write(f"{name}: ")
        value = scanner.read_float()
        if value < 0 or value >= 180:
            out.write(_WRONG_ANGLE)
            return 1
        angles[index] = value

    def complete(a, b, c, A, B, C):
        if (A and a) or (B and b) or (C and c):
            raise NotEnoughInformationError("Not enough information.")
        out.write(
            "I can't calculate the triangle unless you give "
            "me the area of the triangle:\n"
            "Area (0 for unknown): "
        )
        area = scanner.read_float()
        if area <= 0:
            raise NotEnoughInformationError("Ok..")
        return complete_with_area(a, b, c, A, B, C, area)

    return _finish(sides, angles, out, complete, straight_angle)


def run_interactive(stdin: TextIO, stdout: TextIO) -> int:
    """Prompt once for a triangle and solve it; return the exit status."""
    return _session(_Scanner(stdin), stdout, deg2rad(180))


def run_repeating(stdin: TextIO, stdout: TextIO) -> int:
    """Prompt for triangles until the user chooses to exit.

    Returns the status of the last round. Three given angles are compared
    with 180 as this front end always did, so such input is refused.
    """
    scanner = _Scanner(stdin)
    while True:
        status = _session(scanner, stdout, 180.0)
        while True:
            stdout.write(_MENU)
            choice = scanner.read_int()
            if choice is None:
                if not scanner.discard():
                    return status
                continue
            if choice in (1, 2):
                break
        if choice == 1:
            return status


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return run_interactive(sys.stdin, sys.stdout)
    if args == ["--version"]:
        sys.stdout.write(f"Triangle program {VERSION}\nPlease report bugs.\n")
        return 0
    if args == ["--help"]:
        sys.stdout.write(_HELP)
        return 0
    if args == ["--repeat"]:
        return run_repeating(sys.stdin, sys.stdout)
    return run_arguments(args, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())