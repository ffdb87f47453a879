"""RGB color value."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


class Color(BaseModel):
    """8-bit RGB triple. Equality is exact per channel."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(r=r, g=g, b=b)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` (leading ``#`` optional)."""
        match = _HEX_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = match.group(1)
        return cls(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
