"""Loading and validating ``.ber`` map files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Sequence

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

_FILLED = "F"
_REACHED_EXIT = "X"


class MapError(Exception):
    """Raised when a map file cannot be read or fails validation."""


@dataclass
class GameMap:
    """A rectangular grid of tiles, stored row by row."""

    rows: list[list[str]] = field(default_factory=list)

    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def height(self) -> int:
        return len(self.rows)

    def find(self, tile: str) -> tuple[int, int] | None:
        """Return ``(row, col)`` of the first ``tile`` in reading order."""
        for r, row in enumerate(self.rows):
            for c, cell in enumerate(row):
                if cell == tile:
                    return r, c
        return None

    def count(self, tile: str) -> int:
        return sum(row.count(tile) for row in self.rows)


def split_lines(text: str) -> list[str]:
    """Split on newlines, dropping empty lines."""
    return [line for line in text.split("\n") if line]


def flood_fill(grid: list[list[str]], begin: tuple[int, int]) -> int:
    """Replace the region of equal tiles around ``begin`` with ``'F'``.

    ``begin`` is ``(row, col)``.  The grid is modified in place and the
    number of filled cells is returned.
    """
    r0, c0 = begin
    target = grid[r0][c0]
    if target == _FILLED:
        return 0
    filled = 0
    stack = [(r0, c0)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        if grid[r][c] != target:
            continue
        grid[r][c] = _FILLED
        filled += 1
        stack.extend([(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)])
    return filled


def check_extension(path: str) -> bool:
    return str(path).endswith(".ber")


def check_rectangular(rows: Sequence[Sequence[str]]) -> int:
    """Ensure every row has the length of the first; return that width."""
    if not rows:
        raise MapError("error 3")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("error 4")
    return width


def check_walls(rows: Sequence[Sequence[str]]) -> bool:
    """Whether the map is closed by walls on all four sides."""
    if not rows:
        return False
    if any(cell != WALL for cell in rows[0]):
        return False
    if any(cell != WALL for cell in rows[-1]):
        return False
    last = len(rows[0]) - 1
    for row in rows[1:]:
        if not row or row[0] != WALL or len(row) <= last or row[last] != WALL:
            return False
    return True


def check_elements(rows: Sequence[Sequence[str]]) -> None:
    """Require one player, one exit and at least one collectible."""
    cells = [cell for row in rows for cell in row]
    if cells.count(PLAYER) != 1:
        raise MapError("error p")
    if cells.count(EXIT) != 1:
        raise MapError("error e")
    if COLLECTIBLE not in cells:
        raise MapError("error c")


def _at(grid: list[list[str]], r: int, c: int) -> str:
    if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
        return grid[r][c]
    return WALL


def has_valid_path(rows: Sequence[Sequence[str]]) -> bool:
    """Whether the player can reach every collectible and then the exit.

    The exit blocks movement: cells beyond it do not count as reachable.
    """
    grid = [list(row) for row in rows]
    start = GameMap(grid).find(PLAYER)
    if start is None:
        return False
    stack = [start]
    while stack:
        r, c = stack.pop()
        tile = _at(grid, r, c)
        if tile in (WALL, _FILLED, _REACHED_EXIT):
            continue
        neighbours = [
            _at(grid, r + 1, c),
            _at(grid, r - 1, c),
            _at(grid, r, c - 1),
            _at(grid, r, c + 1),
        ]
        if (
            tile == COLLECTIBLE
            and _REACHED_EXIT in neighbours
            and _FILLED not in neighbours
        ):
            continue
        if tile == EXIT:
            grid[r][c] = _REACHED_EXIT
            continue
        grid[r][c] = _FILLED
        # Pushed in reverse so the up neighbour is explored first.
        stack.extend([(r, c - 1), (r, c + 1), (r + 1, c), (r - 1, c)])
    return not any(cell in (COLLECTIBLE, EXIT) for row in grid for cell in row)


def _parse(text: str, path: str | None = None) -> GameMap:
    text = text.split("\0", 1)[0]
    if not text:
        raise MapError("error 5")
    lines = split_lines(text)
    check_rectangular(lines)
    check_elements(lines)
    if path is not None and not check_extension(path):
        raise MapError("not a .ber")
    if not check_walls(lines) or not has_valid_path(lines):
        raise MapError("error 2")
    return GameMap([list(line) for line in lines])


def parse_map(text: str) -> GameMap:
    """Validate map text and return the map it describes."""
    return _parse(text)


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read, validate and return the map stored at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("error 1") from exc
    return _parse(data.decode("utf-8", errors="replace"), os.fspath(path))