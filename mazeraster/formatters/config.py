"""Render parameters: wall/passage geometry and colors for raster output."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from mazeraster.utils.color import Color

if TYPE_CHECKING:
    from mazeraster.config import Settings


@dataclass(frozen=True)
class RenderParameters:
    """Pixel geometry and colors used by ``ImageFormatter``.

    Sizes may be zero; that only collapses the matching region.
    """

    wall: int = 40
    passage: int = 40
    margin: int = 50
    background: Color = field(default_factory=lambda: Color.rgb(250, 250, 250))
    foreground: Color = field(default_factory=lambda: Color.rgb(0, 0, 0))

    def __post_init__(self) -> None:
        for name in ("wall", "passage", "margin"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @property
    def cell_span(self) -> int:
        """Full extent of one cell: both half-walls plus the passage."""
        return self.wall * 2 + self.passage

    @property
    def cell_span_without_joint(self) -> int:
        """Stride between neighboring cell origins; adjacent cells share one wall."""
        return self.cell_span - self.wall

    def with_changes(self, **changes) -> RenderParameters:
        return replace(self, **changes)

    @classmethod
    def from_settings(cls, settings: Settings) -> RenderParameters:
        return cls(
            wall=settings.wall,
            passage=settings.passage,
            margin=settings.margin,
            background=Color.from_hex(settings.background),
            foreground=Color.from_hex(settings.foreground),
        )
