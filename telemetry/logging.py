from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Optional, Callable

from interfaces import Snapshot
from core.types import GameStatus
from .metrics import GameStats

TICK_KEYS = [
    "step",
    # tick
    "tick/game", "tick/status", "tick/length",
    "tick/head_x", "tick/head_y", "tick/fruit_x", "tick/fruit_y", "tick/direction",
    # game over
    "game/index", "game/status", "game/final_length", "game/final_length_ema",
    "game/final_length_mean100", "game/won", "game/lost",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # tick and game rows share one schema
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


class NullLogger:
    """Drops everything."""
    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        pass
    def flush(self) -> None:
        pass
    def close(self) -> None:
        pass


def make_tick_logger(
    logger: Logger,
    log_every: int = 1,
) -> Callable[[int, int, Snapshot], None]:
    """
    Returns the GameSession on_tick hook: logs one row of tick scalars every
    `log_every` ticks, plus every tick that ends a game.
    """
    log_every = max(1, int(log_every))

    def _on_tick(game_index: int, tick: int, snap: Snapshot) -> None:
        if tick % log_every != 0 and not snap.status.is_terminal:
            return
        head = snap.head
        scalars = {
            "tick/game": game_index,
            "tick/status": snap.status.value,
            "tick/length": snap.length,
            "tick/head_x": head.x,
            "tick/head_y": head.y,
            "tick/fruit_x": snap.fruit.x if snap.fruit is not None else None,
            "tick/fruit_y": snap.fruit.y if snap.fruit is not None else None,
            "tick/direction": snap.direction.name.lower(),
        }
        logger.log(tick, scalars)
    return _on_tick

def make_game_logger(
    *,
    logger: Logger,
    stats: GameStats,
    on_summary: Optional[Callable[[Dict[str, Any]], None]] = None,
) -> Callable[[int, int, Snapshot], None]:
    """
    Returns the GameSession on_game_over hook that:
      - records the outcome and final length in `stats`
      - logs the game scalars and flushes
      - optionally forwards the scalars (e.g. to print a console line)
    """
    def _on_game_over(game_index: int, tick: int, snap: Snapshot) -> None:
        stats.record(snap.status, snap.length)

        scalars = {
            "game/index": game_index,
            "game/status": snap.status.value,
            "game/final_length": int(snap.length),
            "game/final_length_ema": stats.length_ema,
            "game/final_length_mean100": stats.length_mean(),
            "game/won": 1.0 if snap.status is GameStatus.WON else 0.0,
            "game/lost": 1.0 if snap.status is GameStatus.LOST else 0.0,
        }
        logger.log(tick, scalars)
        logger.flush()

        if on_summary is not None:
            on_summary(scalars)

    return _on_game_over
