"""Drawing the game in a window and feeding it keyboard events."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from .game import Game, Key, step_message  # noqa: F401  (step_message re-exported for callers)
from .mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError

TILE_SIZE = 32
MAX_WIDTH = 1920
MAX_HEIGHT = 1080
TITLE = "so_long"

_IMAGE_FILES = {
    PLAYER: "player.xpm",
    EXIT: "Exit.xpm",
    COLLECTIBLE: "item.xpm",
    FLOOR: "floor.xpm",
    WALL: "wall.xpm",
}

_KEYMAP = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_a: Key.A,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}


def window_size(game_map: GameMap) -> tuple[int, int]:
    """Pixel size of the window for ``game_map``; raise if it does not fit."""
    width = game_map.width() * TILE_SIZE
    height = game_map.height() * TILE_SIZE
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise MapError("not a good size")
    return width, height


class Renderer:
    """A window showing a game, one image per tile."""

    def __init__(self, game: Game, image_dir: str | os.PathLike[str]) -> None:
        self.game = game
        size = window_size(game.map)
        pygame.display.init()
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)
        directory = Path(image_dir)
        self.images: dict[str, pygame.Surface] = {}
        try:
            for tile, name in _IMAGE_FILES.items():
                self.images[tile] = pygame.image.load(os.fspath(directory / name))
        except (pygame.error, OSError) as exc:
            pygame.display.quit()
            raise RuntimeError("image") from exc

    def draw_tile(self, row: int, col: int) -> bool:
        """Draw one cell; return False if the tile has no image."""
        image = self.images.get(self.game.map.rows[row][col])
        if image is None:
            return False
        self.screen.blit(image, (col * TILE_SIZE, row * TILE_SIZE))
        return True

    def draw(self) -> None:
        """Draw the whole map; an unknown tile stops the game."""
        for r, row in enumerate(self.game.map.rows):
            for c in range(len(row)):
                if not self.draw_tile(r, c):
                    self.game.running = False
                    return
        pygame.display.flip()

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """Apply a pygame event to the game and return any step message."""
        if event.type == pygame.QUIT:
            self.game.running = False
            return None
        if event.type != pygame.KEYDOWN:
            return None
        key = _KEYMAP.get(event.key)
        if key is None:
            return None
        before = self.game.player()
        message = self.game.handle_key(key)
        after = self.game.player()
        if self.game.running and before != after:
            for position in (before, after):
                if position is not None:
                    self.draw_tile(*position)
            pygame.display.flip()
        if message is not None:
            print(message)
        return message

    def run(self) -> int:
        """Run the event loop until the game stops; return the step count."""
        clock = pygame.time.Clock()
        try:
            self.draw()
            while self.game.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                    if not self.game.running:
                        break
                clock.tick(60)
        finally:
            pygame.display.quit()
        return self.game.steps