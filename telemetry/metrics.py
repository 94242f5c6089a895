from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Optional

from core.types import GameStatus

class GameStats:
    """Running outcome stats across the games of a session.

    Final snake lengths feed an exponential moving average (`alpha`) and a
    fixed window of the last `window` games; wins, losses and the longest
    snake are counted over the whole session.
    """
    def __init__(self, alpha: float = 0.1, window: int = 100):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self.recent: Deque[int] = deque(maxlen=window)
        self.length_ema: Optional[float] = None
        self.length_max = 0
        self.wins = 0
        self.losses = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses

    def record(self, status: GameStatus, length: int) -> None:
        if status is GameStatus.WON:
            self.wins += 1
        elif status is GameStatus.LOST:
            self.losses += 1
        else:
            raise ValueError(f"cannot record an unfinished game ({status.value})")
        length = int(length)
        self.recent.append(length)
        self.length_max = max(self.length_max, length)
        if self.length_ema is None:
            self.length_ema = float(length)
        else:
            self.length_ema = self.alpha * length + (1 - self.alpha) * self.length_ema

    def length_mean(self) -> float:
        return sum(self.recent) / len(self.recent) if self.recent else 0.0

    def summary(self) -> Dict[str, float]:
        return {
            "games": self.games,
            "wins": self.wins,
            "losses": self.losses,
            "length_mean": self.length_mean(),
            "length_max": self.length_max,
            "length_ema": self.length_ema,
        }
