# core/geometry.py  (pure location arithmetic)
from __future__ import annotations
from dataclasses import dataclass

from .types import Direction


def wrap_coord(v: int, n: int) -> int:
    """Toroidal wrap of a single coordinate into [0, n)."""
    if n <= 0:
        raise ValueError(f"wrap bound must be positive, got {n}")
    # python's % already yields a non-negative result for positive n
    return v % n


@dataclass(frozen=True, slots=True)
class Location:
    """Signed grid coordinate. Only valid on a board after wrap()."""
    x: int
    y: int

    def move_in(self, direction: Direction) -> "Location":
        dx, dy = direction.delta
        return Location(self.x + dx, self.y + dy)

    def wrap(self, width: int, height: int) -> "Location":
        return Location(wrap_coord(self.x, width), wrap_coord(self.y, height))

    def as_tuple(self):
        return (self.x, self.y)
