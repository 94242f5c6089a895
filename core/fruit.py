# core/fruit.py
from __future__ import annotations
from typing import Collection, Optional

from .geometry import Location


def place_new_fruit(
    expected: Location,
    width: int,
    height: int,
    taken: Collection[Location],
) -> Optional[Location]:
    """
    First free cell scanning from `expected`: dy outer, dx inner, every
    candidate wrapped onto the board. None when every cell is taken.
    """
    taken = set(taken)
    for dy in range(height):
        for dx in range(width):
            loc = Location(expected.x + dx, expected.y + dy).wrap(width, height)
            if loc not in taken:
                return loc
    return None
