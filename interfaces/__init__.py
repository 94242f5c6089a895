# interfaces/__init__.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Optional, Iterator, Protocol, TypeVar

from core.geometry import Location
from core.types import Direction, Square, GameStatus

T = TypeVar("T")

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Location, ...]   # tail first, head last
    fruit: Optional[Location]     # None once the game is won
    direction: Direction
    status: GameStatus
    length: int
    width: int
    height: int

    @property
    def head(self) -> Location:
        return self.snake[-1]

class FixedArray(Protocol[T]):
    """Default-filled storage of a fixed capacity; never grows."""
    def __len__(self) -> int: ...
    def __getitem__(self, i: int) -> T: ...
    def __setitem__(self, i: int, value: T) -> None: ...
    def __iter__(self) -> Iterator[T]: ...

class Board(Protocol):
    def width(self) -> int: ...
    def height(self) -> int: ...
    def at(self, location: Location) -> Square: ...
    def set_at(self, location: Location, square: Square) -> None: ...
    def iterate(self) -> Iterator[Tuple[Location, Square]]: ...

class Snake(Protocol):
    """What a front-end holds: any engine variant satisfies it."""
    def advance(self) -> GameStatus: ...
    def set_direction(self, direction: Direction) -> None: ...
    def board(self) -> Board: ...

class RandomSource(Protocol):
    """Successive non-negative integers. Canned sequences make tests reproducible."""
    def next(self) -> int: ...
