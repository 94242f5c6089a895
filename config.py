# config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 20
    grid_h: int = 20
    storage: Literal["numpy", "list"] = "numpy"

    # randomness
    rng: Literal["numpy", "python", "lcg", "scripted"] = "numpy"
    seed: Optional[int] = None
    rng_script: Tuple[int, ...] = (4, 2, 4, 3, 4, 4)

    # scheduling
    tick_ms: int = 200                   # Ticker interval
    restart_on_lost: bool = True
    max_ticks: int = 1000                # headless runner budget
    turn_prob: float = 0.2               # RandomTurnPolicy

    # telemetry
    log_path: Optional[str] = None       # CSV file, None = no CSV
    log_every: int = 1                   # ticks between CSV rows
    print_board: bool = False

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
