"""Colors and background gradients used by display components."""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from rich.color import Color as RichColor

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{1,8}")


class Color(BaseModel):
    """RGBA color with float channels in the range [0, 1]."""

    model_config = ConfigDict(frozen=True)

    red: float = Field(default=0.0, ge=0.0, le=1.0)
    green: float = Field(default=0.0, ge=0.0, le=1.0)
    blue: float = Field(default=0.0, ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def rgba(cls, red: float, green: float, blue: float, alpha: float) -> "Color":
        return cls(red=red, green=green, blue=blue, alpha=alpha)

    @classmethod
    def transparent(cls) -> "Color":
        return cls(red=0.0, green=0.0, blue=0.0, alpha=0.0)

    @classmethod
    def from_argb_hex(cls, text: str) -> "Color":
        """Parse the ``AARRGGBB`` hex notation stored in layout files.

        Raises:
            ValueError: If the text is not a 32-bit hexadecimal number.
        """
        digits = text.strip()
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"Invalid color value: {text!r}")
        value = int(digits, 16)
        alpha = (value >> 24) & 0xFF
        red = (value >> 16) & 0xFF
        green = (value >> 8) & 0xFF
        blue = value & 0xFF
        return cls(
            red=red / 255.0,
            green=green / 255.0,
            blue=blue / 255.0,
            alpha=alpha / 255.0,
        )

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0.0

    def to_hex(self) -> str:
        """Return the ``#rrggbb`` form, dropping alpha."""
        return "#{:02x}{:02x}{:02x}".format(*self._rgb8())

    def to_rich(self) -> RichColor:
        return RichColor.from_rgb(*self._rgb8())

    def _rgb8(self) -> tuple:
        return tuple(round(channel * 255) for channel in (self.red, self.green, self.blue))


class GradientKind(str, Enum):
    """Shape of a background gradient."""

    TRANSPARENT = "Transparent"
    PLAIN = "Plain"
    VERTICAL = "Vertical"
    HORIZONTAL = "Horizontal"


class Gradient(BaseModel):
    """Background of a component.

    ``first`` is the top or left color and ``second`` the bottom or right one.
    Plain gradients only use ``first``.
    """

    model_config = ConfigDict(frozen=True)

    kind: GradientKind = GradientKind.TRANSPARENT
    first: Optional[Color] = None
    second: Optional[Color] = None

    @model_validator(mode="after")
    def _check_colors(self) -> "Gradient":
        if self.kind == GradientKind.TRANSPARENT:
            if self.first is not None or self.second is not None:
                raise ValueError("transparent gradient takes no colors")
        elif self.kind == GradientKind.PLAIN:
            if self.first is None or self.second is not None:
                raise ValueError("plain gradient takes exactly one color")
        elif self.first is None or self.second is None:
            raise ValueError(f"{self.kind.value.lower()} gradient takes two colors")
        return self

    @classmethod
    def transparent(cls) -> "Gradient":
        return cls(kind=GradientKind.TRANSPARENT)

    @classmethod
    def plain(cls, color: Color) -> "Gradient":
        return cls(kind=GradientKind.PLAIN, first=color)

    @classmethod
    def vertical(cls, top: Color, bottom: Color) -> "Gradient":
        return cls(kind=GradientKind.VERTICAL, first=top, second=bottom)

    @classmethod
    def horizontal(cls, left: Color, right: Color) -> "Gradient":
        return cls(kind=GradientKind.HORIZONTAL, first=left, second=right)

    def primary_color(self) -> Optional[Color]:
        """Color used where only a single background color can be shown."""
        if self.kind == GradientKind.TRANSPARENT:
            return None
        return self.first


DEFAULT_GRADIENT = Gradient.vertical(
    Color.rgba(1.0, 1.0, 1.0, 0.06),
    Color.rgba(1.0, 1.0, 1.0, 0.005),
)
