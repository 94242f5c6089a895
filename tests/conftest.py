# tests/conftest.py
import os
import sys

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from core.geometry import Location
from core.types import CHAR_SQUARES, Square

@pytest.fixture(params=["numpy", "list"])
def backend(request):
    return request.param

@pytest.fixture
def make_game(backend):
    from core.game import create_game
    from core.rng import ScriptedRandom
    def make(width=5, height=5, numbers=ScriptedRandom.DEFAULT):
        return create_game(width, height, ScriptedRandom(numbers), backend=backend)
    return make

def _board_errors(board, expected):
    assert board.height() == len(expected), "Invalid height"
    errors = []
    for y, row in enumerate(expected):
        assert board.width() == len(row), "Invalid width"
        for x, ch in enumerate(row):
            want = CHAR_SQUARES.get(ch, Square.EMPTY)
            got = board.at(Location(x, y))
            if got != want:
                errors.append(f"X:{x} Y:{y} should be {want.name} but it's {got.name}")
    return errors

@pytest.fixture
def assert_board():
    def check(board, *expected):
        errors = _board_errors(board, expected)
        if errors:
            actual = "\n".join(f'"{r}"' for r in board.to_layout())
            want = "\n".join(f'"{r}"' for r in expected)
            pytest.fail(f"\nExpected:\n{want}\nActual:\n{actual}\nErrors:\n{errors}")
    return check
