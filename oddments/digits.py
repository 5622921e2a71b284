"""Draw numbers as large seven-segment digits."""

from __future__ import annotations

import sys
from enum import IntFlag

__all__ = ["segments_for", "render", "main"]


class _Seg(IntFlag):
    A = 0x01
    B = 0x02
    C = 0x04
    D = 0x08
    E = 0x10
    F = 0x20
    G = 0x40


_DIGITS = {
    0: _Seg.A | _Seg.B | _Seg.C | _Seg.D | _Seg.E | _Seg.F,
    1: _Seg.B | _Seg.C,
    2: _Seg.A | _Seg.B | _Seg.D | _Seg.E | _Seg.G,
    3: _Seg.A | _Seg.B | _Seg.C | _Seg.D | _Seg.G,
    4: _Seg.B | _Seg.C | _Seg.F | _Seg.G,
    5: _Seg.A | _Seg.C | _Seg.D | _Seg.F | _Seg.G,
    6: _Seg.A | _Seg.C | _Seg.D | _Seg.E | _Seg.F | _Seg.G,
    7: _Seg.A | _Seg.B | _Seg.C,
    8: _Seg.A | _Seg.B | _Seg.C | _Seg.D | _Seg.E | _Seg.F | _Seg.G,
    9: _Seg.A | _Seg.B | _Seg.C | _Seg.F | _Seg.G,
}

_HBAR = " ---  "
_NOHBAR = "      "
_VLBAR = "|"
_NOVLBAR = " "
_VRBAR = "   | "
_NOVRBAR = "     "


def segments_for(num: int) -> int:
    """The lit segments of digit ``num``; anything else is drawn as 8."""
    return int(_DIGITS.get(num, _DIGITS[8]))


def _horizontal(segments: int, bar: _Seg) -> str:
    return _HBAR if segments & bar else _NOHBAR


def _vertical(segments: int, left: _Seg, right: _Seg) -> str:
    return (_VLBAR if segments & left else _NOVLBAR) + (
        _VRBAR if segments & right else _NOVRBAR
    )


def render(text: str) -> str:
    """Draw each character of ``text`` as a digit, nine lines tall."""
    digits = [segments_for(ord(ch) - 0x30) for ch in text]
    rows = (
        [lambda s: _horizontal(s, _Seg.A)]
        + [lambda s: _vertical(s, _Seg.F, _Seg.B)] * 3
        + [lambda s: _horizontal(s, _Seg.G)]
        + [lambda s: _vertical(s, _Seg.E, _Seg.C)] * 3
        + [lambda s: _horizontal(s, _Seg.D)]
    )
    return "".join("".join(draw(s) for s in digits) + "\n" for draw in rows)


def main(argv: list[str] | None = None) -> int:
    """Draw each argument, or each word of standard input when none are given."""
    args = sys.argv[1:] if argv is None else list(argv)
    words = args if args else sys.stdin.read().split()
    for word in words:
        sys.stdout.write(render(word) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())