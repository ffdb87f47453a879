"""Grid: fixed-size rectangle of cells with symmetric passage carving.

The grid owns its cells as one flat row-major list. Carving touches exactly
two cells: the wall on ``pole`` at ``coords`` and the wall on
``opposite(pole)`` at the neighbor. Both bounds checks happen before either
write, so a failed carve never leaves the grid half-carved.

Renderers read only each cell's own walls, so they rely on this symmetry.
Do not mutate a grid while it is being rendered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from mazeraster.grid.cell import Cell, Walls
from mazeraster.grid.pole import Pole

logger = logging.getLogger(__name__)

Coords = tuple[int, int]


class OutOfBoundsError(IndexError):
    """A coordinate, or the neighbor toward a pole, falls outside the grid."""

    def __init__(self, coords: Coords, pole: Pole | None = None) -> None:
        self.coords = coords
        self.pole = pole
        if pole is None:
            msg = f"Coordinates {coords} are outside the grid"
        else:
            msg = f"No neighbor {pole.name} of {coords}: passage would leave the grid"
        super().__init__(msg)


class Grid:
    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be >= 1, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells = [Cell(x, y) for y in range(height) for x in range(width)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_within_bounds(self, coords: Coords) -> bool:
        x, y = coords
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, coords: Coords) -> int:
        if not self.is_within_bounds(coords):
            raise OutOfBoundsError(coords)
        x, y = coords
        return y * self._width + x

    def get_cell(self, coords: Coords) -> Cell:
        return self._cells[self._index(coords)]

    def get_walls(self, coords: Coords) -> Walls:
        return self._cells[self._index(coords)].walls

    def is_carved(self, coords: Coords, pole: Pole) -> bool:
        return self.get_walls(coords).carved(pole)

    def neighbor(self, coords: Coords, pole: Pole) -> Coords:
        """Coordinates one step toward ``pole``. Raises if that leaves the grid."""
        self._index(coords)
        dx, dy = pole.offset
        target = (coords[0] + dx, coords[1] + dy)
        if not self.is_within_bounds(target):
            raise OutOfBoundsError(coords, pole)
        return target

    def carve_passage(self, coords: Coords, pole: Pole) -> None:
        """Open the wall between ``coords`` and its neighbor toward ``pole``."""
        here = self._index(coords)
        there = self._index(self.neighbor(coords, pole))

        self._cells[here]._carve(pole)
        self._cells[there]._carve(pole.opposite)
        logger.debug("Carved %s from %s", pole.name, coords)

    def cells(self) -> Iterator[Cell]:
        """All cells, row by row (y outer, x inner)."""
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height})"
