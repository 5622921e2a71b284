"""Take up a given amount of memory until the user presses enter."""

from __future__ import annotations

import re
import sys

__all__ = ["parse_amount", "hog", "main"]

_PERIOD = 4679
_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_amount(text: str) -> float:
    """Read a number of megabytes; text without a number reads as 0."""
    match = _LEADING_FLOAT.match(text)
    amount = float(match.group(1)) if match else 0.0
    if amount < 0:
        raise ValueError("Specify a positive amount of memory (in MB) to hog.")
    return amount


def hog(megabytes: float) -> bytearray:
    """Allocate ``megabytes`` of memory and write to every byte of it."""
    size = int(megabytes * 1024 * 1024)
    pattern = bytes(index % 256 for index in range(_PERIOD))
    repeats, rest = divmod(size, _PERIOD)
    return bytearray(pattern * repeats + pattern[:rest])


def main(argv: list[str] | None = None) -> int:
    """Hold the memory named by the single argument until enter is pressed."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Specify amount of memory (in MB) to hog.", file=sys.stderr)
        return 1
    try:
        amount = parse_amount(args[0])
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    print(f"Taking up {amount:.2f} MB of memory...")
    held = hog(amount)
    sys.stdout.write("Press enter to exit.")
    sys.stdout.flush()
    sys.stdin.readline()
    del held
    return 0


if __name__ == "__main__":
    sys.exit(main())