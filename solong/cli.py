"""Command-line entry point: load a map and play it."""

from __future__ import annotations

import sys
from typing import Sequence

import pygame

from .display import Renderer, window_size
from .format import c_printf
from .game import Game
from .mapfile import MapError, load_map

IMAGE_DIR = "xpm"


def _fail(message: str) -> int:
    c_printf("%s\n", message)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _fail("argument")
    try:
        game_map = load_map(args[0])
        window_size(game_map)
    except MapError as exc:
        return _fail(str(exc))
    try:
        renderer = Renderer(Game(game_map), IMAGE_DIR)
    except (RuntimeError, pygame.error) as exc:
        return _fail(str(exc))
    renderer.run()
    return 0