# core/types.py
from __future__ import annotations
from enum import Enum, IntEnum
from typing import Tuple


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Square(IntEnum):
    """Cell state. Integer-valued so a board packs into numpy storage."""
    EMPTY = 0
    FRUIT = 1
    SNAKE = 2

    @property
    def is_snake(self) -> bool:
        return self is Square.SNAKE


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    LOST = "lost"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


# text layout used by board dumps and tests
SQUARE_CHARS = {Square.SNAKE: "O", Square.FRUIT: "F", Square.EMPTY: " "}
CHAR_SQUARES = {"O": Square.SNAKE, "F": Square.FRUIT}
