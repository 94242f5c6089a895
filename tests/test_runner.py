# tests/test_runner.py
import csv
import sys

import pytest

from config import AppConfig
from core.types import Direction
from main import config_from_args, main, parse_args
from policy.policy import ScriptedPolicy
from runners.run_headless import run

def _cfg(**kw):
    return AppConfig(grid_w=3, grid_h=3, rng="scripted", **kw)

# inputs that fill the scripted 3x3 board
WIN_SCRIPT = [
    Direction.DOWN, None, Direction.RIGHT, Direction.DOWN, None,
    Direction.RIGHT, Direction.DOWN, None, Direction.RIGHT, Direction.DOWN,
]

def test_run_stops_on_win(capsys):
    summary = run(_cfg(max_ticks=50), policy=ScriptedPolicy(WIN_SCRIPT))
    assert summary["final_status"] == "won"
    assert summary["ticks"] == 10
    assert summary["wins"] == 1 and summary["losses"] == 0
    assert summary["length_max"] == 9
    out = capsys.readouterr().out
    assert "[game 1] status=won length=9" in out

def test_run_restarts_lost_games(capsys):
    script = [Direction.DOWN] * 6
    summary = run(_cfg(max_ticks=6, print_board=True), policy=ScriptedPolicy(script))
    assert summary["games"] == 3
    assert summary["losses"] == 2
    assert summary["final_status"] == "lost"
    assert summary["length_mean"] == 4.0
    out = capsys.readouterr().out
    assert out.count("status=lost") == 2
    assert "|OO |" in out

def test_run_without_restart_stops_at_first_loss():
    summary = run(_cfg(max_ticks=50, restart_on_lost=False), policy=ScriptedPolicy([Direction.DOWN]))
    assert summary["ticks"] == 3
    assert summary["games"] == 1
    assert summary["final_status"] == "lost"

def test_run_writes_csv(tmp_path):
    path = tmp_path / "ticks.csv"
    run(_cfg(max_ticks=3, restart_on_lost=False, log_path=str(path)), policy=ScriptedPolicy([Direction.DOWN]))
    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    # three tick rows plus the game-over row
    assert len(rows) == 4
    assert rows[-1]["game/status"] == "lost"

def test_cli_simulate(capsys):
    assert main(["simulate", "--width", "6", "--height", "5", "--ticks", "40",
                 "--seed", "3", "--storage", "list", "--rng", "python"]) is None
    assert "[summary]" in capsys.readouterr().out

def test_cli_exits_cleanly(capsys):
    # console scripts wrap the entry point in sys.exit(main())
    with pytest.raises(SystemExit) as exc:
        sys.exit(main(["simulate", "--width", "3", "--height", "3", "--ticks", "2", "--rng", "scripted"]))
    assert exc.value.code is None
    assert "ticks=2" in capsys.readouterr().out

def test_cli_args_map_to_config():
    cfg = config_from_args(parse_args(["simulate", "--no-restart", "--log", "x.csv", "--rng", "lcg"]))
    assert cfg.restart_on_lost is False
    assert cfg.log_path == "x.csv"
    assert cfg.rng == "lcg"
    assert cfg.grid_w == AppConfig().grid_w
