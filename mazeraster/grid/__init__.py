"""Maze grid model: cells, poles and symmetric passage carving."""

from mazeraster.grid.cell import Cell, Walls
from mazeraster.grid.grid import Coords, Grid, OutOfBoundsError
from mazeraster.grid.pole import Pole, opposite

__all__ = [
    "Cell",
    "Coords",
    "Grid",
    "OutOfBoundsError",
    "Pole",
    "Walls",
    "opposite",
]
