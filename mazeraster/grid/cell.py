"""Cell and its wall state.

Walls are stored as a 4-bit mask of *carved* poles: a set bit means the wall
is open and a passage exists. A fresh cell has every wall closed (mask 0).
"""

from __future__ import annotations

from dataclasses import dataclass

from mazeraster.grid.pole import Pole


@dataclass(frozen=True)
class Walls:
    """Read-only wall state of a single cell."""

    mask: int = 0

    def carved(self, pole: Pole) -> bool:
        return bool(self.mask & pole.bit)

    def closed(self, pole: Pole) -> bool:
        return not self.carved(pole)

    def carved_poles(self) -> set[Pole]:
        return {pole for pole in Pole if self.carved(pole)}

    def _with_carved(self, pole: Pole) -> Walls:
        return Walls(self.mask | pole.bit)

    def __repr__(self) -> str:
        open_ = "".join(p.value for p in Pole if self.carved(p)) or "-"
        return f"Walls(carved={open_})"


class Cell:
    """One maze unit. Wall state is only changed by ``Grid.carve_passage``."""

    __slots__ = ("x", "y", "_walls")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._walls = Walls()

    @property
    def coords(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def walls(self) -> Walls:
        return self._walls

    def _carve(self, pole: Pole) -> None:
        self._walls = self._walls._with_carved(pole)

    def __repr__(self) -> str:
        return f"Cell({self.x}, {self.y}, {self._walls!r})"
