# policy.py
from __future__ import annotations
from typing import Protocol, Optional, Iterable, List
import numpy as np

from interfaces import Snapshot
from core.types import Direction

class Policy(Protocol):
    """Turns a snapshot into a direction request (None = no input this tick)."""
    def act(self, snap: Snapshot) -> Optional[Direction]: ...

_PERPENDICULAR = {
    Direction.UP: (Direction.LEFT, Direction.RIGHT),
    Direction.DOWN: (Direction.LEFT, Direction.RIGHT),
    Direction.LEFT: (Direction.UP, Direction.DOWN),
    Direction.RIGHT: (Direction.UP, Direction.DOWN),
}

class RandomTurnPolicy:
    """Mostly keeps going; turns left or right with probability `turn_prob`."""
    def __init__(self, turn_prob: float = 0.2, seed: Optional[int] = None):
        if not 0.0 <= turn_prob <= 1.0:
            raise ValueError(f"turn_prob must be in [0, 1], got {turn_prob}")
        self.turn_prob = turn_prob
        self._rng = np.random.default_rng(seed)

    def act(self, snap: Snapshot) -> Optional[Direction]:
        if self._rng.random() >= self.turn_prob:
            return None
        options = _PERPENDICULAR[snap.direction]
        return options[int(self._rng.integers(len(options)))]

class ScriptedPolicy:
    """Replays a fixed list of inputs, then stays silent."""
    def __init__(self, directions: Iterable[Optional[Direction]]):
        self._moves: List[Optional[Direction]] = list(directions)
        self._i = 0

    def act(self, snap: Snapshot) -> Optional[Direction]:
        if self._i >= len(self._moves):
            return None
        d = self._moves[self._i]
        self._i += 1
        return d
