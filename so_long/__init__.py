"""A tile-based 2D game: read and validate a map, then collect every item and reach the exit."""

__version__ = "1.0.0"
__all__ = ["printf", "mapfile", "validation", "game", "app"]