import io
import sys

import pytest

from oddments.sudoku import format_board, is_promising, main, read_board, solve


def _full_grid():
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


def _is_valid(grid):
    full = set(range(1, 10))
    rows = all(set(row) == full for row in grid)
    cols = all({grid[r][c] for r in range(9)} == full for c in range(9))
    boxes = all(
        {grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)} == full
        for br in (0, 3, 6)
        for bc in (0, 3, 6)
    )
    return rows and cols and boxes


def _text(grid):
    return "\n".join(" ".join(str(v) for v in row) for row in grid)


def test_read_board_round_trip():
    grid = _full_grid()
    assert read_board(_text(grid)) == grid


def test_read_board_ignores_other_characters():
    grid = _full_grid()
    noisy = _text(grid).replace(" ", " | x ")
    assert read_board(noisy) == grid


def test_read_board_too_short():
    with pytest.raises(ValueError):
        read_board("123")


def test_format_board_empty():
    board = [[0] * 9 for _ in range(9)]
    assert format_board(board) == "\n" + "0 0 0 0 0 0 0 0 0 \n" * 9 + "---------\n"


def test_format_board_reads_back():
    grid = _full_grid()
    assert read_board(format_board(grid)) == grid


def test_is_promising_detects_row_repeat():
    board = [[0] * 9 for _ in range(9)]
    board[0][0] = board[0][8] = 4
    assert is_promising(board, 0, 0) is False


def test_is_promising_detects_column_repeat():
    board = [[0] * 9 for _ in range(9)]
    board[0][2] = board[8][2] = 6
    assert is_promising(board, 2, 0) is False


def test_is_promising_detects_box_repeat():
    board = [[0] * 9 for _ in range(9)]
    board[3][3] = board[5][5] = 9
    assert is_promising(board, 4, 4) is False


def test_is_promising_full_grid():
    assert is_promising(_full_grid(), 4, 4) is True


def test_solve_full_grid_has_one_solution():
    grid = _full_grid()
    assert list(solve(grid)) == [grid]


def test_solve_missing_row():
    grid = _full_grid()
    puzzle = [row[:] for row in grid]
    puzzle[4] = [0] * 9
    solutions = list(solve(puzzle))
    assert solutions == [grid]
    assert puzzle[4] == [0] * 9


def test_solve_scattered_blanks():
    grid = _full_grid()
    puzzle = [row[:] for row in grid]
    for r, c in [(0, 0), (1, 4), (2, 8), (4, 2), (6, 6), (8, 1), (7, 7)]:
        puzzle[r][c] = 0
    solutions = list(solve(puzzle))
    assert grid in solutions
    assert all(_is_valid(s) for s in solutions)


def test_solve_conflicting_givens():
    grid = _full_grid()
    grid[0][0] = 0
    grid[0][1] = grid[0][2]
    assert list(solve(grid)) == []


def test_main_prints_solution_and_count(monkeypatch, capsys):
    grid = _full_grid()
    puzzle = [row[:] for row in grid]
    puzzle[0] = [0] * 9
    monkeypatch.setattr(sys, "stdin", io.StringIO(_text(puzzle)))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == format_board(grid) + "Solutions: 1\n"