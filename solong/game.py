"""Game state and player movement on a validated map."""

from __future__ import annotations

from enum import Enum, IntEnum

from .format import c_format
from .mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap


class Direction(Enum):
    """A move on the grid as a ``(row, col)`` offset."""

    LEFT = (0, -1)
    UP = (-1, 0)
    DOWN = (1, 0)
    RIGHT = (0, 1)

    @property
    def row_offset(self) -> int:
        return self.value[0]

    @property
    def col_offset(self) -> int:
        return self.value[1]


class Key(IntEnum):
    """Key codes the game reacts to (X11 keysyms)."""

    ESCAPE = 65307
    A = 97
    W = 119
    S = 115
    D = 100


_KEY_DIRECTIONS = {
    Key.A: Direction.LEFT,
    Key.W: Direction.UP,
    Key.S: Direction.DOWN,
    Key.D: Direction.RIGHT,
}


def step_message(steps: int) -> str:
    """The line reported after a move."""
    if steps == 1:
        return "first step "
    return c_format("%d steps ", steps)


class Game:
    """A running game: the map, the step counter and whether play goes on."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.steps = 0
        self.running = True
        self.won = False

    def player(self) -> tuple[int, int] | None:
        """Position ``(row, col)`` of the player, if present."""
        return self.map.find(PLAYER)

    def can_enter(self, row: int, col: int) -> bool:
        """Whether the player may step onto the given cell."""
        tile = self.map.rows[row][col]
        if tile == WALL:
            return False
        if tile == EXIT:
            return self.map.count(COLLECTIBLE) == 0
        return True

    def move(self, direction: Direction) -> bool:
        """Move the player one cell; return True when it changed position.

        Stepping onto the exit once every collectible is taken wins the game
        and stops it without counting a step.
        """
        if not self.running:
            return False
        position = self.player()
        if position is None:
            return False
        row, col = position
        target_row = row + direction.row_offset
        target_col = col + direction.col_offset
        if not self.can_enter(target_row, target_col):
            return False
        if self.map.rows[target_row][target_col] == EXIT:
            self.won = True
            self.running = False
            return False
        self.map.rows[row][col] = FLOOR
        self.map.rows[target_row][target_col] = PLAYER
        self.steps += 1
        return True

    def handle_key(self, key: int) -> str | None:
        """React to a key press and return the message to report, if any."""
        try:
            known = Key(key)
        except ValueError:
            return None
        if known is Key.ESCAPE:
            self.running = False
            return None
        before = self.steps
        self.move(_KEY_DIRECTIONS[known])
        if not self.running:
            return None
        if self.steps == 1:
            return step_message(1)
        if self.steps != before:
            return step_message(self.steps)
        return None