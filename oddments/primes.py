"""Listing prime numbers in a range by testing numbers of the form 6k +/- 1."""

from __future__ import annotations

import re
import sys
from typing import Iterator

__all__ = ["is_prime", "primes_between", "primes_between_long", "main", "main_long"]

_USAGE = (
    "Usage: prime <start> <stop>\n"
    "Finds prime numbers between <start> and <stop>\n"
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def is_prime(num: int) -> bool:
    """Test ``num`` against 2, 3 and the 6k +/- 1 divisors below its root.

    Divisors are tried only while their 6k base squared stays below
    ``num``, so 1 and some small squares such as 25 pass as prime.
    """
    if num % 2 == 0 or num % 3 == 0:
        return False
    base = 6
    while base * base < num:
        if num % (base - 1) == 0 or num % (base + 1) == 0:
            return False
        base += 6
    return True


def _check(start: int, stop: int) -> None:
    if start < 0 or stop < 0:
        raise ValueError("start and stop must not be negative")


def _between(start: int, stop: int) -> Iterator[int]:
    if start < 6:
        if start <= 2:
            yield 2
        if start <= 3:
            yield 3
        if start <= 5:
            yield 5
    a = start if start > 6 else 7
    if a % 6:
        a -= a % 6
        if a < stop and is_prime(a + 1):
            yield a + 1
        a += 6
    while a <= stop + 1:
        if a - 1 <= stop and is_prime(a - 1):
            yield a - 1
        if a + 1 <= stop and is_prime(a + 1):
            yield a + 1
        a += 6


def primes_between(start: int, stop: int) -> Iterator[int]:
    """Yield the primes from ``start`` up to and including ``stop``."""
    _check(start, stop)
    return _between(start, stop)


def _between_long(start: int, stop: int) -> Iterator[int]:
    if start < 5:
        if start <= 2:
            yield 2
        if start <= 3:
            yield 3
    a = max(start, 6)
    while a < stop:
        if is_prime(a - 1):
            yield a - 1
        if is_prime(a + 1):
            yield a + 1
        a += 6


def primes_between_long(start: int, stop: int) -> Iterator[int]:
    """Yield primes around each step of six from ``start`` while below ``stop``.

    The neighbours of every step are tested as they stand, so the last
    value can pass ``stop`` by one.
    """
    _check(start, stop)
    return _between_long(start, stop)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _run(argv: list[str] | None, finder) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stdout.write(_USAGE)
        return 1
    start, stop = (_atoi(text) for text in args)
    try:
        primes = finder(start, stop)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    for prime in primes:
        print(prime)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Print the primes between two numbers given as arguments."""
    return _run(argv, primes_between)


def main_long(argv: list[str] | None = None) -> int:
    """Print primes with the stepping of :func:`primes_between_long`."""
    return _run(argv, primes_between_long)


if __name__ == "__main__":
    sys.exit(main())