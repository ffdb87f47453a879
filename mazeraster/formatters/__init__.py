"""Output formatters for finished maze grids."""

from mazeraster.formatters.base import Formatter
from mazeraster.formatters.config import RenderParameters
from mazeraster.formatters.registry import FormatterRegistry, FormatterSpec, formatter, get_registry
from mazeraster.formatters.image import ImageFormatter, RasterImage, Region

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "FormatterSpec",
    "ImageFormatter",
    "RasterImage",
    "Region",
    "RenderParameters",
    "formatter",
    "get_registry",
]
