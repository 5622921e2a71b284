"""Sorting by shuffling until the values happen to be in order."""

from __future__ import annotations

import random
import sys
from typing import Iterable

__all__ = ["is_sorted", "shuffle_once", "dumbsort", "main"]


def is_sorted(values: Iterable[int]) -> bool:
    """True when no value is below the one before it.

    The comparison starts from 0, so a list holding a negative number is
    never counted as sorted.
    """
    last = 0
    for value in values:
        if value < last:
            return False
        last = value
    return True


def shuffle_once(values: list[int], rng: random.Random) -> None:
    """Swap every position with a randomly chosen one, in place."""
    size = len(values)
    for index in range(size):
        other = rng.randrange(size)
        values[index], values[other] = values[other], values[index]


def dumbsort(values: Iterable[int], rng: random.Random | None = None) -> list[int]:
    """Return the values sorted by repeated random shuffling.

    Negative values would never count as sorted, so they raise ``ValueError``.
    """
    result = list(values)
    if any(value < 0 for value in result):
        raise ValueError("negative values can never be sorted this way")
    rng = rng if rng is not None else random.Random()
    while not is_sorted(result):
        shuffle_once(result, rng)
    return result


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers from standard input; print them sorted."""
    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
        values = [int(token) for token in tokens[1:count + 1]]
        ordered = dumbsort(values)
    except (IndexError, ValueError) as err:
        print(err or "expected a count", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{value} " for value in ordered) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())