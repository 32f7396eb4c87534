"""Grid problems: Life, three-colour tilings, zeroing rows and columns, Sudoku."""

from __future__ import annotations

from itertools import product

MOD = 10**9 + 7
_DIGITS = "123456789"


def _next_state(cell, live):
    if live < 2 or live > 3:
        return 0
    if live == 3:
        return 1
    return cell


def game_of_life(board):
    """Advance the board one generation of Conway's Life, in place."""
    rows = len(board)
    if not rows:
        return
    cols = len(board[0])

    def live_neighbours(i, j):
        return sum(
            1
            for di, dj in product((-1, 0, 1), repeat=2)
            if (di or dj)
            and 0 <= i + di < rows
            and 0 <= j + dj < cols
            and board[i + di][j + dj] != 0
        )

    updated = [
        [_next_state(cell, live_neighbours(i, j)) for j, cell in enumerate(row)]
        for i, row in enumerate(board)
    ]
    for row, new_row in zip(board, updated):
        row[:] = new_row


def _differ(a, b):
    return all(x != y for x, y in zip(a, b))


def color_the_grid(m, n):
    """Count colourings of an m x n grid in three colours with no equal neighbours, mod 1e9+7."""
    if m < 0 or n < 0:
        raise ValueError("grid sides must not be negative")
    if n == 0:
        return 0
    patterns = [p for p in product(range(3), repeat=m) if _differ(p, p[1:])]
    compatible = {p: [q for q in patterns if _differ(p, q)] for p in patterns}
    counts = dict.fromkeys(patterns, 1)
    for _ in range(n - 1):
        counts = {p: sum(counts[q] for q in compatible[p]) % MOD for p in patterns}
    return sum(counts.values()) % MOD


def set_zeroes(matrix):
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def _can_place(board, row, col, digit):
    top, left = 3 * (row // 3), 3 * (col // 3)
    return all(
        board[k][col] != digit
        and board[row][k] != digit
        and board[top + k // 3][left + k % 3] != digit
        for k in range(9)
    )


def solve_sudoku(board):
    """Fill the '.' cells of a 9x9 board in place by backtracking; return whether it worked.

    If no solution exists the board is left as it was.
    """
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell != ".":
                continue
            for digit in _DIGITS:
                if _can_place(board, i, j, digit):
                    row[j] = digit
                    if solve_sudoku(board):
                        return True
                    row[j] = "."
            return False
    return True


def is_valid_sudoku(board):
    """Tell whether no digit repeats in any row, column or 3x3 box; '.' cells are ignored."""
    seen = set()
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == ".":
                continue
            keys = (("row", i, cell), ("col", j, cell), ("box", i // 3 * 3 + j // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True