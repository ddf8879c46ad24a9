"""A tile-based 2D game: collect every item on the map, then reach the exit."""

__version__ = "0.1.0"