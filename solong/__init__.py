"""A tile-based puzzle game: collect every item, then reach the exit.

Map reading and checks, game rules, XPM image and colour-name decoding,
and a pygame front end.
"""

__version__ = "1.0.0"

__all__ = ["colors", "display", "game", "mapfile", "xpm"]