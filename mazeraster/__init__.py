"""mazeraster: maze grid model and pixel-exact raster rendering."""

from mazeraster.formatters import ImageFormatter, RasterImage, RenderParameters, get_registry
from mazeraster.grid import Cell, Grid, OutOfBoundsError, Pole, Walls, opposite
from mazeraster.utils.color import Color

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "Color",
    "Grid",
    "ImageFormatter",
    "OutOfBoundsError",
    "Pole",
    "RasterImage",
    "RenderParameters",
    "Walls",
    "get_registry",
    "opposite",
]
