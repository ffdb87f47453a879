"""Canvas helpers: RGB pixel buffers as ``(height, width, 3)`` uint8 arrays."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from mazeraster.utils.color import Color

Canvas = NDArray[np.uint8]


def new_canvas(width: int, height: int, color: Color) -> Canvas:
    """Allocate a ``height×width`` RGB canvas filled with ``color``."""
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:, :] = color.as_tuple()
    return canvas


def paint_mask(
    canvas: Canvas,
    origin: tuple[int, int],
    mask: NDArray[np.bool_],
    color: Color,
) -> None:
    """Paint ``color`` wherever ``mask`` is True, with the mask's top-left at ``origin``.

    Mask pixels that fall outside the canvas are dropped.
    """
    x0, y0 = origin
    h, w = mask.shape
    target = canvas[y0 : y0 + h, x0 : x0 + w]
    th, tw = target.shape[:2]
    if th == 0 or tw == 0:
        return
    target[mask[:th, :tw]] = color.as_tuple()


def color_mask(canvas: Canvas, color: Color) -> NDArray[np.bool_]:
    """Boolean ``height×width`` mask of pixels exactly equal to ``color``."""
    return np.all(canvas == np.array(color.as_tuple(), dtype=np.uint8), axis=-1)


def color_percentage(
    canvas: Canvas,
    color: Color,
    region: tuple[int, int, int, int] | None = None,
) -> float:
    """Percentage of pixels equal to ``color``, optionally within ``(x0, y0, x1, y1)`` (exclusive end)."""
    mask = color_mask(canvas, color)
    if region is not None:
        x0, y0, x1, y1 = region
        mask = mask[y0:y1, x0:x1]
    total = mask.size
    if total == 0:
        return 0.0
    return float(np.sum(mask) / total * 100)
