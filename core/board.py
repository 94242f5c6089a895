# core/board.py
from __future__ import annotations
from typing import Iterator, List, Sequence, Tuple

from interfaces import Board, FixedArray
from .errors import CapacityMismatchError
from .geometry import Location
from .types import Square, SQUARE_CHARS, CHAR_SQUARES
from .storage import ListArray


class FixedSizeBoard(Board):
    """Row-major width x height grid of Square, index = y*width + x.

    The engine rebuilds one of these on every Game.board() call; nothing else
    should mutate it.
    """

    def __init__(self, width: int, height: int, data: FixedArray):
        if len(data) != width * height:
            raise CapacityMismatchError("board", len(data), width, height)
        self._width = width
        self._height = height
        self._data = data

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def _index(self, location: Location) -> int:
        x, y = location.x, location.y
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"{location} is outside a {self._width}x{self._height} board; wrap it first")
        return y * self._width + x

    def at(self, location: Location) -> Square:
        return self._data[self._index(location)]

    def set_at(self, location: Location, square: Square) -> None:
        self._data[self._index(location)] = square

    def iterate(self) -> Iterator[Tuple[Location, Square]]:
        for y in range(self._height):
            for x in range(self._width):
                loc = Location(x, y)
                yield loc, self.at(loc)

    def __iter__(self):
        return self.iterate()

    def count(self, square: Square) -> int:
        return sum(1 for _, s in self.iterate() if s == square)

    def to_layout(self) -> List[str]:
        return [
            "".join(SQUARE_CHARS[self.at(Location(x, y))] for x in range(self._width))
            for y in range(self._height)
        ]

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> "FixedSizeBoard":
        """Inverse of to_layout(); any char other than O/F is empty."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        board = cls(width, height, ListArray(width * height, Square.EMPTY))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has width {len(row)}, expected {width}")
            for x, ch in enumerate(row):
                board.set_at(Location(x, y), CHAR_SQUARES.get(ch, Square.EMPTY))
        return board


def format_board(board: Board) -> str:
    rows = ["".join(SQUARE_CHARS[board.at(Location(x, y))] for x in range(board.width()))
            for y in range(board.height())]
    return "\n".join(f"|{r}|" for r in rows)
