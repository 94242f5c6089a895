# tests/test_policy.py
import pytest

from core.game import create_game
from core.types import Direction
from policy.policy import RandomTurnPolicy, ScriptedPolicy

def test_random_turn_policy_only_turns_sideways():
    snap = create_game(5, 5).snapshot()
    p = RandomTurnPolicy(turn_prob=1.0, seed=0)
    moves = {p.act(snap) for _ in range(50)}
    assert moves == {Direction.UP, Direction.DOWN}

def test_random_turn_policy_zero_prob_never_turns():
    snap = create_game(5, 5).snapshot()
    p = RandomTurnPolicy(turn_prob=0.0, seed=0)
    assert all(p.act(snap) is None for _ in range(20))

def test_random_turn_policy_is_seeded():
    snap = create_game(5, 5).snapshot()
    a, b = RandomTurnPolicy(0.5, seed=7), RandomTurnPolicy(0.5, seed=7)
    assert [a.act(snap) for _ in range(30)] == [b.act(snap) for _ in range(30)]

def test_random_turn_policy_rejects_bad_prob():
    with pytest.raises(ValueError):
        RandomTurnPolicy(turn_prob=1.5)

def test_scripted_policy_replays_then_goes_quiet():
    snap = create_game(5, 5).snapshot()
    p = ScriptedPolicy([Direction.UP, None, Direction.LEFT])
    assert [p.act(snap) for _ in range(5)] == [Direction.UP, None, Direction.LEFT, None, None]
