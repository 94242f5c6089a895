# core/session.py
from __future__ import annotations
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional

from interfaces import Board, Snapshot
from .game import Game
from .types import Direction, GameStatus

TickHook = Callable[[int, int, Snapshot], None]        # (game_index, tick, snapshot)
GameOverHook = Callable[[int, int, Snapshot], None]


class GameSession:
    """
    The one live Game of a process, guarded by a single lock.

    Input handlers call set_direction() from any thread; the scheduler calls
    tick() once per interval; renderers call board(). When a game is lost it
    is replaced wholesale by a fresh one from `factory` (restart_on_lost).
    A won game stays put so its full board keeps rendering.
    """

    def __init__(
        self,
        factory: Callable[[], Game],
        restart_on_lost: bool = True,
        on_tick: Optional[TickHook] = None,
        on_game_over: Optional[GameOverHook] = None,
    ):
        self._factory = factory
        self._lock = threading.Lock()
        self._game = factory()
        self.restart_on_lost = restart_on_lost
        self.on_tick = on_tick
        self.on_game_over = on_game_over
        self.games_played = 1
        self.ticks = 0

    @property
    def game(self) -> Game:
        return self._game

    @contextmanager
    def locked(self) -> Iterator[Game]:
        """Hand the live game to a callback while holding the session lock."""
        with self._lock:
            yield self._game

    def set_direction(self, direction: Direction) -> None:
        with self._lock:
            self._game.set_direction(direction)

    def tick(self) -> GameStatus:
        """Advance once. Hooks run after the lock is released, so they may read the session."""
        with self._lock:
            was_over = self._game.status.is_terminal
            status = self._game.advance()
            self.ticks += 1
            tick, game_index = self.ticks, self.games_played
            snap = self._game.snapshot()
            if status is GameStatus.LOST and self.restart_on_lost:
                self._game = self._factory()
                self.games_played += 1
        if self.on_tick is not None:
            self.on_tick(game_index, tick, snap)
        if status.is_terminal and not was_over and self.on_game_over is not None:
            self.on_game_over(game_index, tick, snap)
        return status

    def board(self) -> Board:
        with self._lock:
            return self._game.board()

    def layout(self) -> List[str]:
        return self.board().to_layout()

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._game.snapshot()


class Ticker:
    """Background thread calling session.tick() at a fixed interval.

    An exception from tick() stops the thread; it is kept in `error` and
    re-raised by close().
    """
    def __init__(self, session: GameSession, interval_s: float = 0.2):
        self._session = session
        self._interval = max(1e-3, float(interval_s))
        self._t: Optional[threading.Thread] = None
        self._stop = threading.Event()
        self._started = False
        self.last_status: Optional[GameStatus] = None
        self.error: Optional[BaseException] = None

    def start(self) -> None:
        if self._started: return
        self._stop.clear()
        self.error = None
        self._t = threading.Thread(target=self._run, name="SnakeTicker", daemon=True)
        self._t.start()
        self._started = True

    def _run(self) -> None:
        # wait() returns True once close() is called
        while not self._stop.wait(self._interval):
            try:
                self.last_status = self._session.tick()
            except Exception as e:
                self.error = e
                return

    @property
    def running(self) -> bool:
        return self._started and self.error is None and self._t is not None and self._t.is_alive()

    def close(self) -> None:
        if not self._started: return
        self._stop.set()
        if self._t is not None:
            self._t.join(timeout=3.0)
        self._started = False
        if self.error is not None:
            raise self.error
