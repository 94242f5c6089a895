# core/game.py  (pure rules, no rendering)
from __future__ import annotations
from typing import Callable, Optional, Tuple

from interfaces import Board, FixedArray, RandomSource, Snake, Snapshot
from .board import FixedSizeBoard
from .errors import BoardTooSmallError, CapacityMismatchError
from .fruit import place_new_fruit
from .geometry import Location
from .rng import ScriptedRandom, make_rng
from .storage import array_factory
from .types import Direction, GameStatus, Square


def _check_dimensions(width: int, height: int) -> None:
    if width < 2 or height < 1 or width * height < 3:
        raise BoardTooSmallError(f"a {width}x{height} board has no room for a snake and a fruit")


class Game(Snake):
    """
    One Snake session on a toroidal width x height board.

    Board and snake storage are fixed arrays of exactly width*height items,
    built by the zero-arg factories passed in. The snake can never be longer
    than the board, so growth never runs past the end of its array.

    Drive it with set_direction() (any number of times) and advance() (once per
    tick), then read board(). Not thread-safe; see core.session.GameSession.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: RandomSource,
        board_array: Callable[[], FixedArray],
        snake_array: Callable[[], FixedArray],
    ):
        _check_dimensions(width, height)
        snake = snake_array()
        if len(snake) != width * height:
            raise CapacityMismatchError("snake", len(snake), width, height)
        cells = board_array()
        if len(cells) != width * height:
            raise CapacityMismatchError("board", len(cells), width, height)

        self._width = width
        self._height = height
        self._rng = rng
        self._board_array = board_array

        cx, cy = width // 2, height // 2
        snake[0] = Location(cx - 1, cy)
        snake[1] = Location(cx, cy)
        self._snake = snake
        self._snake_size = 2

        self._current_direction = Direction.RIGHT
        self._next_direction = Direction.RIGHT
        self._status = GameStatus.IN_PROGRESS
        self._board = FixedSizeBoard(width, height, cells)

        fruit = self._place_new_fruit()
        if fruit is None:
            raise BoardTooSmallError(f"no free cell for the first fruit on a {width}x{height} board")
        self._fruit: Optional[Location] = fruit

    # ---- read-only state ----
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def direction(self) -> Direction:
        return self._current_direction

    @property
    def fruit(self) -> Optional[Location]:
        return self._fruit

    @property
    def length(self) -> int:
        return self._snake_size

    @property
    def snake(self) -> Tuple[Location, ...]:
        """Live segments, tail first."""
        return tuple(self._snake[i] for i in range(self._snake_size))

    @property
    def head(self) -> Location:
        return self._snake[self._snake_size - 1]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake,
            fruit=self._fruit,
            direction=self._current_direction,
            status=self._status,
            length=self._snake_size,
            width=self._width,
            height=self._height,
        )

    # ---- Snake protocol ----
    def set_direction(self, direction: Direction) -> None:
        """Takes effect on the next advance(); a later call overrides it."""
        self._next_direction = direction

    def up(self) -> None:
        self.set_direction(Direction.UP)

    def down(self) -> None:
        self.set_direction(Direction.DOWN)

    def left(self) -> None:
        self.set_direction(Direction.LEFT)

    def right(self) -> None:
        self.set_direction(Direction.RIGHT)

    def advance(self) -> GameStatus:
        if self._status is GameStatus.IN_PROGRESS:
            self._status = self._move_snake_and_get_status()
        return self._status

    def board(self) -> Board:
        board = FixedSizeBoard(self._width, self._height, self._board_array())

        if self._status is GameStatus.IN_PROGRESS:
            board.set_at(self._fruit, Square.FRUIT)
            for loc in self.snake:
                board.set_at(loc, Square.SNAKE)
        elif self._status is GameStatus.WON:
            # at this point the snake fills the whole backing array
            for loc in self._snake:
                board.set_at(loc, Square.SNAKE)
        # LOST: cleared board, body kept internally

        self._board = board
        return board

    # ---- helpers ----
    def _place_new_fruit(self) -> Optional[Location]:
        expected = Location(self._rng.next(), self._rng.next()).wrap(self._width, self._height)
        return place_new_fruit(expected, self._width, self._height, self.snake)

    def _change_direction(self) -> None:
        if self._next_direction is not self._current_direction.opposite:
            self._current_direction = self._next_direction

    def _new_head_location(self) -> Location:
        return self.head.move_in(self._current_direction).wrap(self._width, self._height)

    def _eat_the_fruit(self, new_head: Location) -> None:
        self._snake[self._snake_size] = new_head
        self._snake_size += 1

    def _move_snake(self, new_head: Location) -> None:
        for i in range(self._snake_size - 1):
            self._snake[i] = self._snake[i + 1]
        self._snake[self._snake_size - 1] = new_head

    def _move_snake_and_get_status(self) -> GameStatus:
        self._change_direction()
        new_head = self._new_head_location()

        if new_head == self._fruit:
            self._eat_the_fruit(new_head)
            fruit = self._place_new_fruit()
            if fruit is None:
                self._fruit = None
                return GameStatus.WON
            self._fruit = fruit
            return GameStatus.IN_PROGRESS

        if new_head in self.snake:
            return GameStatus.LOST

        self._move_snake(new_head)
        return GameStatus.IN_PROGRESS


def create_game(
    width: int,
    height: int,
    rng: Optional[RandomSource] = None,
    backend: str = "numpy",
) -> Game:
    """Game with both storages sized to width*height on the chosen backend."""
    _check_dimensions(width, height)
    capacity = width * height
    return Game(
        width,
        height,
        rng if rng is not None else ScriptedRandom(),
        board_array=array_factory(backend, capacity, Square.EMPTY),
        snake_array=array_factory(backend, capacity, Location(0, 0)),
    )


def game_from_config(cfg) -> Game:
    return create_game(cfg.grid_w, cfg.grid_h, make_rng(cfg), backend=cfg.storage)
