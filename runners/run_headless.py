# runners/run_headless.py
from __future__ import annotations
from typing import Any, Dict, Optional

from config import AppConfig
from core.board import format_board
from core.game import game_from_config
from core.session import GameSession
from core.types import GameStatus
from policy.policy import Policy, RandomTurnPolicy
from telemetry.logging import CSVLogger, Logger, NullLogger, TICK_KEYS, make_game_logger, make_tick_logger
from telemetry.metrics import GameStats


def run(cfg: AppConfig, policy: Optional[Policy] = None, logger: Optional[Logger] = None) -> Dict[str, Any]:
    """
    Drive one GameSession for cfg.max_ticks ticks without any UI.

    Each tick: ask the policy for a direction, forward it, advance. Lost games
    restart (cfg.restart_on_lost); a won game ends the run.
    """
    if policy is None:
        policy = RandomTurnPolicy(turn_prob=cfg.turn_prob, seed=cfg.seed)

    own_logger = logger is None
    if logger is None:
        logger = CSVLogger(cfg.log_path, fieldnames=TICK_KEYS) if cfg.log_path else NullLogger()

    stats = GameStats(alpha=0.1, window=100)

    def _print_game(s: Dict[str, Any]) -> None:
        print(f"[game {s['game/index']}] status={s['game/status']} length={s['game/final_length']}")

    session = GameSession(
        lambda: game_from_config(cfg),
        restart_on_lost=cfg.restart_on_lost,
        on_tick=make_tick_logger(logger, cfg.log_every),
        on_game_over=make_game_logger(
            logger=logger, stats=stats, on_summary=_print_game,
        ),
    )

    status = session.game.status
    try:
        for _ in range(cfg.max_ticks):
            d = policy.act(session.snapshot())
            if d is not None:
                session.set_direction(d)
            status = session.tick()
            if status is GameStatus.WON:
                break
            if status is GameStatus.LOST and not cfg.restart_on_lost:
                break
    finally:
        logger.flush()
        if own_logger:
            logger.close()

    if cfg.print_board:
        print(format_board(session.board()))

    summary = {
        **stats.summary(),
        "ticks": session.ticks,
        "games": session.games_played,
        "final_status": status.value,
    }
    print(
        f"[summary] ticks={summary['ticks']} games={summary['games']} "
        f"wins={summary['wins']} losses={summary['losses']} length_max={summary['length_max']}"
    )
    return summary


def main(cfg: Optional[AppConfig] = None) -> Dict[str, Any]:
    return run(cfg or AppConfig())
