"""Compass poles: wall identifiers and movement directions for grid cells."""

from __future__ import annotations

import enum


class Pole(enum.Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def bit(self) -> int:
        return _BITS[self]

    @property
    def opposite(self) -> Pole:
        return opposite(self)

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) of one step toward this pole. North is the lower row index."""
        return _OFFSETS[self]


_BITS = {Pole.N: 0b0001, Pole.E: 0b0010, Pole.S: 0b0100, Pole.W: 0b1000}
_OPPOSITES = {Pole.N: Pole.S, Pole.S: Pole.N, Pole.E: Pole.W, Pole.W: Pole.E}
_OFFSETS = {Pole.N: (0, -1), Pole.E: (1, 0), Pole.S: (0, 1), Pole.W: (-1, 0)}


def opposite(pole: Pole) -> Pole:
    """N↔S, E↔W."""
    return _OPPOSITES[pole]
