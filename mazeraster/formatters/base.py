"""Formatter protocol: turns a finished grid into some output artifact."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from mazeraster.grid import Grid

T_co = TypeVar("T_co", covariant=True)


class Formatter(Protocol[T_co]):
    def format(self, grid: Grid) -> T_co:
        """Render ``grid``. Must not mutate it."""
        ...
