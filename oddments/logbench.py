"""Two ways of writing log records: appending with writes, or through mmap."""

from __future__ import annotations

import itertools
import mmap
import os
import re
import sys
from typing import Sequence

__all__ = [
    "parse_record_size",
    "append_records",
    "fill_mapped",
    "main_fwrite",
    "main_mmap",
]

DEFAULT_RECORD_SIZE = 100
LOG_PATH = "test.log"
LOG_SIZE = 100 * 1024 * 1024 * 1024
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_record_size(argv: Sequence[str]) -> int:
    """The record size: the single argument if there is one, else 100."""
    if len(argv) != 1:
        return DEFAULT_RECORD_SIZE
    match = _LEADING_INT.match(argv[0])
    return int(match.group(1)) if match else 0


def _check(record_size: int) -> None:
    if record_size <= 0:
        raise ValueError("record size must be positive")


def append_records(path, record_size: int, count: int | None = None) -> int:
    """Append ``count`` zero-filled records to ``path``; forever when None."""
    _check(record_size)
    record = bytes(record_size)
    written = 0
    rounds = itertools.repeat(None) if count is None else itertools.repeat(None, count)
    with open(path, "ab") as log:
        for _ in rounds:
            log.write(record)
            written += 1
    return written


def fill_mapped(path, record_size: int, size: int = LOG_SIZE) -> int:
    """Size ``path`` to ``size`` bytes and copy zero records over it through mmap.

    Returns the number of records copied.
    """
    _check(record_size)
    if size <= 0:
        raise ValueError("log size must be positive")
    record = bytes(record_size)
    offsets = range(0, size - record_size, record_size)
    fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o660)
    try:
        os.ftruncate(fd, size)
        with mmap.mmap(fd, size) as area:
            for offset in offsets:
                area[offset:offset + record_size] = record
            area.flush()
    finally:
        os.close(fd)
    return len(offsets)


def main_fwrite(argv: list[str] | None = None) -> int:
    """Append records to test.log without end."""
    args = sys.argv[1:] if argv is None else list(argv)
    record_size = parse_record_size(args)
    print(f"Record size: {record_size}")
    append_records(LOG_PATH, record_size)
    return 0


def main_mmap(argv: list[str] | None = None) -> int:
    """Fill a 100 GB test.log with records through a memory map."""
    args = sys.argv[1:] if argv is None else list(argv)
    record_size = parse_record_size(args)
    print(f"Record size: {record_size}")
    fill_mapped(LOG_PATH, record_size, LOG_SIZE)
    return 0


if __name__ == "__main__":
    sys.exit(main_fwrite())