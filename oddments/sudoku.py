"""Brute-force sudoku solver that counts and lists every solution."""

from __future__ import annotations

import sys
from collections import Counter
from typing import Iterable, Iterator

__all__ = ["read_board", "is_promising", "solve", "format_board", "main"]

Board = list[list[int]]


def read_board(text: str) -> Board:
    """Read a 9x9 board from the first 81 digits in ``text``; 0 is empty."""
    digits = [int(ch) for ch in text if "0" <= ch <= "9"]
    if len(digits) < 81:
        raise ValueError(f"expected 81 digits, found {len(digits)}")
    return [digits[row * 9:row * 9 + 9] for row in range(9)]


def _has_repeat(values: Iterable[int]) -> bool:
    counts = Counter(value for value in values if value)
    return any(count > 1 for count in counts.values())


def is_promising(board: Board, x: int, y: int) -> bool:
    """True when the row, column and box through (x, y) hold no repeats."""
    if _has_repeat(board[y]):
        return False
    if _has_repeat(row[x] for row in board):
        return False
    top, left = y - y % 3, x - x % 3
    box = (board[row][col] for row in range(top, top + 3) for col in range(left, left + 3))
    return not _has_repeat(box)


def _search(grid: Board, index: int) -> Iterator[Board]:
    if index == 81:
        yield [row[:] for row in grid]
        return
    y, x = divmod(index, 9)
    if grid[y][x]:
        yield from _search(grid, index + 1)
        return
    for value in range(1, 10):
        grid[y][x] = value
        if is_promising(grid, x, y):
            yield from _search(grid, index + 1)
    grid[y][x] = 0


def solve(board: Board) -> Iterator[Board]:
    """Yield every completion of ``board``; the board itself is left alone."""
    return _search([list(row) for row in board], 0)


def format_board(board: Board) -> str:
    """Render a board as rows of digits followed by a rule."""
    rows = "".join(" ".join(str(value) for value in row) + " \n" for row in board)
    return "\n" + rows + "---------\n"


def main(argv: list[str] | None = None) -> int:
    """Read a board from standard input and print all its solutions."""
    try:
        board = read_board(sys.stdin.read())
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    count = 0
    for solution in solve(board):
        sys.stdout.write(format_board(solution))
        count += 1
    print(f"Solutions: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())