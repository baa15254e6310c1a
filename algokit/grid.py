"""Grid searches: counting rooms, labyrinth paths and knight distances."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = ["count_rooms", "labyrinth_path", "knight_distance"]

WALL = "#"

_STEPS = (((0, -1), "L"), ((0, 1), "R"), ((-1, 0), "U"), ((1, 0), "D"))

_KNIGHT_MOVES = (
    (-1, 2), (1, 2), (2, 1), (2, -1), (-2, 1), (-2, -1), (-1, -2), (1, -2),
)

_BOARD = 8


def _rows(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all grid rows must have the same length")
    return rows


def _neighbours(rows: list[str], i: int, j: int):
    for (di, dj), letter in _STEPS:
        ni, nj = i + di, j + dj
        if 0 <= ni < len(rows) and 0 <= nj < len(rows[0]) and rows[ni][nj] != WALL:
            yield (ni, nj), letter


def count_rooms(grid: Sequence[str]) -> int:
    """Number of 4-connected regions of non-wall cells; ``'#'`` is a wall."""
    rows = _rows(grid)
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell == WALL or (i, j) in seen:
                continue
            rooms += 1
            seen.add((i, j))
            stack = [(i, j)]
            while stack:
                ci, cj = stack.pop()
                for cell_pos, _ in _neighbours(rows, ci, cj):
                    if cell_pos not in seen:
                        seen.add(cell_pos)
                        stack.append(cell_pos)
    return rooms


def _locate(rows: list[str], mark: str) -> tuple[int, int]:
    for i, row in enumerate(rows):
        j = row.find(mark)
        if j >= 0:
            return i, j
    raise ValueError(f"the grid has no {mark!r} cell")


def labyrinth_path(grid: Sequence[str]) -> str | None:
    """Shortest walk from ``'A'`` to ``'B'`` as a string of ``L``/``R``/``U``/``D``.

    Returns ``None`` when ``'B'`` cannot be reached.
    """
    rows = _rows(grid)
    start = _locate(rows, "A")
    goal = _locate(rows, "B")
    came_from: dict[tuple[int, int], tuple[tuple[int, int], str] | None] = {start: None}
    queue = deque([start])
    while queue and goal not in came_from:
        i, j = queue.popleft()
        for cell_pos, letter in _neighbours(rows, i, j):
            if cell_pos not in came_from:
                came_from[cell_pos] = ((i, j), letter)
                queue.append(cell_pos)
    if goal not in came_from:
        return None
    letters: list[str] = []
    link = came_from[goal]
    while link is not None:
        previous, letter = link
        letters.append(letter)
        link = came_from[previous]
    return "".join(reversed(letters))


def _square(name: str) -> tuple[int, int]:
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"not a chessboard square: {name!r}")
    return ord(name[0]) - ord("a"), ord(name[1]) - ord("1")


def knight_distance(start: str, end: str) -> int:
    """Fewest knight moves between two squares given like ``'a1'``."""
    source = _square(start)
    target = _square(end)
    level = {source: 0}
    queue = deque([source])
    while queue:
        i, j = queue.popleft()
        if (i, j) == target:
            break
        for di, dj in _KNIGHT_MOVES:
            nxt = (i + di, j + dj)
            if 0 <= nxt[0] < _BOARD and 0 <= nxt[1] < _BOARD and nxt not in level:
                level[nxt] = level[(i, j)] + 1
                queue.append(nxt)
    return level[target]