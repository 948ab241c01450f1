"""Backtracking searches: queens, knight's tour, mazes, sudoku and enumerations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import combinations
from math import comb, isqrt
from typing import Any, Optional

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def _queen_placements(n: int) -> Iterator[tuple[int, ...]]:
    """Yield, row by row, the column of each queen in every solution."""
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(columns)
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            yield from place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    return place(0)


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("board size must not be negative")


def solve_n_queens(n: int) -> Optional[list[list[int]]]:
    """Return the first n-queens board found (1 marks a queen), or None."""
    _check_size(n)
    solution = next(_queen_placements(n), None)
    if solution is None:
        return None
    return [[int(col == queen) for col in range(n)] for queen in solution]


def count_n_queens(n: int) -> int:
    """Return the number of ways to place n non-attacking queens on an n x n board."""
    _check_size(n)
    return sum(1 for _ in _queen_placements(n))


def knights_tour(size: int = 8) -> Optional[list[list[int]]]:
    """Return a board numbering the knight's moves of a tour from the top-left corner.

    Returns None when no tour visiting every square exists.
    """
    if size < 1:
        raise ValueError("board size must be positive")
    board = [[-1] * size for _ in range(size)]
    board[0][0] = 0
    total = size * size

    def visit(x: int, y: int, move: int) -> bool:
        if move == total:
            return True
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and board[nx][ny] == -1:
                board[nx][ny] = move
                if visit(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    return board if visit(0, 0, 1) else None


def rat_in_maze(maze: Sequence[Sequence[int]]) -> Optional[list[list[int]]]:
    """Find a path of open cells (1) from the top-left to the bottom-right corner.

    Moves go down first, then right. Returns the path marked with 1s, or None.
    """
    grid = [list(row) for row in maze]
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    path = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> bool:
        if x == n - 1 and y == n - 1 and grid[x][y] == 1:
            path[x][y] = 1
            return True
        if 0 <= x < n and 0 <= y < n and grid[x][y] == 1:
            if path[x][y] == 1:
                return False
            path[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            path[x][y] = 0
        return False

    return path if walk(0, 0) else None


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Optional[list[list[int]]]:
    """Fill the zeros of a sudoku grid; return the solved grid, or None if impossible.

    The grid must be n x n with n a perfect square; the argument is not changed.
    """
    board = [list(row) for row in grid]
    n = len(board)
    box = isqrt(n)
    if box * box != n or any(len(row) != n for row in board):
        raise ValueError("grid must be n x n with n a perfect square")
    if any(not 0 <= value <= n for row in board for value in row):
        raise ValueError(f"cell values must be in 0..{n}")

    def safe(i: int, j: int, number: int) -> bool:
        if any(board[i][k] == number or board[k][j] == number for k in range(n)):
            return False
        top, left = i - i % box, j - j % box
        return all(
            board[x][y] != number
            for x in range(top, top + box)
            for y in range(left, left + box)
        )

    empties = [(i, j) for i in range(n) for j in range(n) if board[i][j] == 0]

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        i, j = empties[position]
        for number in range(1, n + 1):
            if safe(i, j, number):
                board[i][j] = number
                if fill(position + 1):
                    return True
        board[i][j] = 0
        return False

    return board if fill(0) else None


def subsets(text: str) -> list[str]:
    """Return every subset of the characters of text, shortest first, then alphabetically."""
    found = (
        "".join(chosen)
        for size in range(len(text) + 1)
        for chosen in combinations(text, size)
    )
    return sorted(found, key=lambda subset: (len(subset), subset))


def generate_brackets(n: int) -> list[str]:
    """Return every balanced string of n bracket pairs, opening brackets tried first."""
    _check_size(n)
    results: list[str] = []

    def build(prefix: str, opened: int, closed: int) -> None:
        if len(prefix) == 2 * n:
            results.append(prefix)
            return
        if opened < n:
            build(prefix + "(", opened + 1, closed)
        if closed < opened:
            build(prefix + ")", opened, closed + 1)

    build("", 0, 0)
    return results


def grid_ways(rows: int, cols: int) -> int:
    """Count the paths from the top-left to the bottom-right cell moving only down or right."""
    if rows <= 0 or cols <= 0:
        return 0
    return comb(rows + cols - 2, rows - 1)


def _swap_permutations(items: list[Any]) -> Iterator[list[Any]]:
    def permute_from(i: int) -> Iterator[list[Any]]:
        if i == len(items):
            yield list(items)
            return
        for j in range(i, len(items)):
            items[i], items[j] = items[j], items[i]
            yield from permute_from(i + 1)
            items[i], items[j] = items[j], items[i]

    return permute_from(0)


def permutations(text: str) -> list[str]:
    """Return every arrangement of text's characters, in swap order."""
    return ["".join(chars) for chars in _swap_permutations(list(text))]


def permute(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every arrangement of nums, in swap order."""
    return list(_swap_permutations(list(nums)))


def fill_array(n: int) -> tuple[list[int], list[int]]:
    """Fill n slots with 1..n going forward, then negate each slot when backing out.

    Returns the array as it stands when full and as it stands at the end.
    """
    _check_size(n)
    values = [0] * n
    snapshot: list[int] = []

    def fill(i: int, value: int) -> None:
        if i == n:
            snapshot.extend(values)
            return
        values[i] = value
        fill(i + 1, value + 1)
        values[i] = -values[i]

    fill(0, 1)
    return snapshot, values