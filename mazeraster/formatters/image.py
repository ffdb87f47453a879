"""Image formatter: rasterizes a grid into an RGB pixel buffer.

Each cell covers the closed local range ``[0, cell_span]`` on both axes,
starting at ``cell * cell_span_without_joint + margin``. Neighboring cells
overlap by one wall thickness. Every local offset falls into one of nine
regions. The regions are tested in the fixed order of ``Region`` and the
first match wins, so on each axis the bands come out as ``[0, wall]``,
``(wall, joint]`` and ``(joint, span]``, where ``joint`` is
``cell_span_without_joint``. A region is painted in the foreground color
unless its skip rule holds. Skipped pixels keep whatever is already there.

A cell only reads its own walls. A shared wall looks consistent only
because ``Grid.carve_passage`` opens both sides together.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from mazeraster.formatters.config import RenderParameters
from mazeraster.formatters.registry import formatter
from mazeraster.grid import Grid, Pole, Walls
from mazeraster.utils.color import Color
from mazeraster.utils.rasterizer import Canvas, new_canvas, paint_mask

logger = logging.getLogger(__name__)

_UNCLASSIFIED = -1


class Region(enum.IntEnum):
    """Cell regions in classification priority order."""

    NW = 0
    N = 1
    NE = 2
    W = 3
    CENTER = 4
    E = 5
    SW = 6
    S = 7
    SE = 8


# A region is left as background when every listed pole is carved.
# CENTER lists none, so it is always skipped.
_SKIP_WHEN: dict[Region, tuple[Pole, ...]] = {
    Region.NW: (Pole.N, Pole.W),
    Region.N: (Pole.N,),
    Region.NE: (Pole.N, Pole.E),
    Region.W: (Pole.W,),
    Region.CENTER: (),
    Region.E: (Pole.E,),
    Region.SW: (Pole.S, Pole.W),
    Region.S: (Pole.S,),
    Region.SE: (Pole.S, Pole.E),
}


def painted_regions(walls: Walls) -> list[Region]:
    """Regions of a cell with these walls that get the foreground color."""
    return [r for r in Region if not all(walls.carved(p) for p in _SKIP_WHEN[r])]


def region_map(params: RenderParameters) -> NDArray[np.int8]:
    """Region of every local offset, indexed ``[oy, ox]`` over ``[0, cell_span]``."""
    wall = params.wall
    joint = params.cell_span_without_joint
    offsets = np.arange(params.cell_span + 1)
    ox = offsets[np.newaxis, :]
    oy = offsets[:, np.newaxis]

    west, mid_x, east = ox <= wall, (ox >= wall) & (ox <= joint), ox >= joint
    north, mid_y, south = oy <= wall, (oy >= wall) & (oy <= joint), oy >= joint

    ranges = [
        (Region.NW, west & north),
        (Region.N, mid_x & north),
        (Region.NE, east & north),
        (Region.W, west & mid_y),
        (Region.CENTER, mid_x & mid_y),
        (Region.E, east & mid_y),
        (Region.SW, west & south),
        (Region.S, mid_x & south),
        (Region.SE, east & south),
    ]

    regions = np.full((offsets.size, offsets.size), _UNCLASSIFIED, dtype=np.int8)
    for region, hit in ranges:
        regions[(regions == _UNCLASSIFIED) & hit] = region
    return regions


@dataclass
class RasterImage:
    """Rendered pixels, ``(height, width, 3)`` uint8 in row-major RGB order."""

    pixels: Canvas

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> Color:
        r, g, b = (int(c) for c in self.pixels[y, x])
        return Color.rgb(r, g, b)

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def to_pil(self) -> Image.Image:
        """Pillow RGB image for a downstream encoder."""
        return Image.fromarray(self.pixels)


@formatter(name="image", description="RGB pixel buffer with walls, passages and margin")
class ImageFormatter:
    def __init__(self, params: RenderParameters | None = None) -> None:
        self.params = params or RenderParameters()

    def maze_size(self, grid: Grid) -> tuple[int, int]:
        # Adjacent cells share a single joint wall, so it is counted once.
        span = self.params.cell_span
        wall = self.params.wall
        maze_width = span * grid.width - (grid.width - 1) * wall
        maze_height = span * grid.height - (grid.height - 1) * wall
        return maze_width, maze_height

    def image_size(self, grid: Grid) -> tuple[int, int]:
        maze_width, maze_height = self.maze_size(grid)
        margin = self.params.margin
        return maze_width + margin * 2, maze_height + margin * 2

    def format(self, grid: Grid) -> RasterImage:
        start = time.perf_counter()
        width, height = self.image_size(grid)

        canvas = new_canvas(width, height, self.params.background)
        self._draw_maze(canvas, grid)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Rendered %dx%d grid to %dx%d image in %.1fms",
            grid.width,
            grid.height,
            width,
            height,
            elapsed,
        )
        return RasterImage(canvas)

    def _draw_maze(self, canvas: Canvas, grid: Grid) -> None:
        regions = region_map(self.params)
        stride = self.params.cell_span_without_joint
        margin = self.params.margin
        masks: dict[int, NDArray[np.bool_]] = {}

        for cell in grid.cells():
            walls = cell.walls
            mask = masks.get(walls.mask)
            if mask is None:
                mask = np.isin(regions, painted_regions(walls))
                masks[walls.mask] = mask

            origin = (cell.x * stride + margin, cell.y * stride + margin)
            paint_mask(canvas, origin, mask, self.params.foreground)
