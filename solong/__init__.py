"""A tile-based puzzle game: load a map, collect every item, reach the exit."""

__version__ = "1.0.0"