"""Formatter registry: output formatters are classes registered via decorator.

Usage:
    @formatter(name="image", description="RGB pixel buffer")
    class ImageFormatter:
        def format(self, grid: Grid) -> RasterImage: ...

    get_registry().create("image", params)

Adding a new output format = creating one module with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from mazeraster.formatters.base import Formatter

logger = logging.getLogger(__name__)


@dataclass
class FormatterSpec:
    name: str
    factory: Callable[..., Formatter[Any]]
    description: str = ""


class FormatterRegistry:
    """Name-keyed registry of formatter factories."""

    def __init__(self) -> None:
        self._formatters: dict[str, FormatterSpec] = {}

    def register(self, spec: FormatterSpec) -> None:
        if spec.name in self._formatters:
            raise ValueError(f"Duplicate formatter name: {spec.name}")
        self._formatters[spec.name] = spec
        logger.debug("Registered formatter %s", spec.name)

    def get(self, name: str) -> FormatterSpec:
        try:
            return self._formatters[name]
        except KeyError:
            raise KeyError(f"Unknown formatter: {name!r} (known: {self.names()})") from None

    def names(self) -> list[str]:
        return sorted(self._formatters)

    def create(self, name: str, *args: Any, **kwargs: Any) -> Formatter[Any]:
        return self.get(name).factory(*args, **kwargs)

    @property
    def count(self) -> int:
        return len(self._formatters)


# Module-level singleton
_registry = FormatterRegistry()


def get_registry() -> FormatterRegistry:
    return _registry


def formatter(*, name: str, description: str = ""):
    """Decorator to register a formatter class (or factory)."""

    def decorator(factory):
        _registry.register(FormatterSpec(name=name, factory=factory, description=description))
        return factory

    return decorator
