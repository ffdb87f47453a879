"""Shared test fixtures."""

from __future__ import annotations

import pytest

from mazeraster.grid import Grid, Pole

# Connected 4×4 maze used for the end-to-end render scenario.
REFERENCE_PASSAGES = [
    ((0, 0), Pole.S),
    ((0, 1), Pole.E),
    ((0, 2), Pole.E),
    ((0, 2), Pole.S),
    ((0, 3), Pole.E),
    ((1, 0), Pole.E),
    ((1, 1), Pole.E),
    ((1, 1), Pole.S),
    ((1, 2), Pole.E),
    ((1, 3), Pole.E),
    ((2, 0), Pole.E),
    ((2, 2), Pole.E),
    ((2, 3), Pole.E),
    ((3, 1), Pole.N),
    ((3, 1), Pole.S),
]


def build_reference_grid() -> Grid:
    grid = Grid(4, 4)
    for coords, pole in REFERENCE_PASSAGES:
        grid.carve_passage(coords, pole)
    return grid


def build_open_grid(width: int, height: int) -> Grid:
    """Every internal wall carved."""
    grid = Grid(width, height)
    for y in range(height):
        for x in range(width):
            if x + 1 < width:
                grid.carve_passage((x, y), Pole.E)
            if y + 1 < height:
                grid.carve_passage((x, y), Pole.S)
    return grid


@pytest.fixture
def reference_grid() -> Grid:
    return build_reference_grid()


@pytest.fixture
def closed_grid() -> Grid:
    return Grid(3, 3)


@pytest.fixture
def open_grid() -> Grid:
    return build_open_grid(3, 3)
