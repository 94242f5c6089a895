# core/errors.py
from __future__ import annotations


class SnakeError(Exception):
    """Base class for engine construction errors.

    Game over (lost / won) is never an error: it is reported through
    GameStatus by Game.advance().
    """


class CapacityMismatchError(SnakeError, ValueError):
    """Backing storage does not hold exactly width*height items."""

    def __init__(self, what: str, capacity: int, width: int, height: int):
        self.what = what
        self.capacity = capacity
        self.width = width
        self.height = height
        super().__init__(
            f"{what} storage holds {capacity} items but a {width}x{height} board needs {width * height}"
        )


class BoardTooSmallError(SnakeError, ValueError):
    """Board cannot hold a two-segment snake plus a fruit."""
