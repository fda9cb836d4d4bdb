from __future__ import annotations

"""Core color value type used by the swatch library.

:class:`Color` wraps a single packed 32-bit ``0xAARRGGBB`` integer. Every
channel accessor masks/shifts that same integer, so a Color can never hold
a channel outside [0, 255].
"""

from dataclasses import dataclass
from typing import Tuple

from util.color import normalize_color, pack_argb, parse_hex_color_str, to_hex_str

from .engine import relative_luminance


RGBA01 = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Color:
    """Immutable ARGB color.

    Attributes
    ----------
    value:
        Packed ``0xAARRGGBB`` integer. Bits above 32 are discarded.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Color value must be an int, got {type(self.value)!r}.")
        object.__setattr__(self, "value", self.value & 0xFFFFFFFF)

    # --- constructors ---
    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> "Color":
        """Create a Color from four 8-bit components (each masked to 8 bits)."""
        return cls(pack_argb(a, r, g, b))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create an opaque Color from 8-bit red, green and blue."""
        return cls(pack_argb(0xFF, r, g, b))

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Create a Color from "#RRGGBB"/"RRGGBB" (opaque) or an 8-digit ARGB string."""
        return cls(parse_hex_color_str(hex_str))

    @classmethod
    def coerce(cls, value: object) -> "Color":
        """Return ``value`` as a Color (accepts Color, packed int, hex string or RGB(A) tuple)."""
        if isinstance(value, Color):
            return value
        return cls(normalize_color(value))

    # --- channels ---
    @property
    def alpha(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    # --- conversions ---
    def with_alpha(self, alpha: int) -> "Color":
        """Return a copy with the alpha channel replaced."""
        return Color.from_argb(alpha, self.red, self.green, self.blue)

    def to_rgb(self) -> Tuple[int, int, int]:
        """Return (r, g, b) in 0-255."""
        return (self.red, self.green, self.blue)

    def to_rgba01(self) -> RGBA01:
        """Return (r, g, b, a) as floats in [0, 1]."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0, self.alpha / 255.0)

    def to_hex(self, with_alpha: bool = False) -> str:
        """Return "#RRGGBB" (or "#AARRGGBB" when ``with_alpha``)."""
        return to_hex_str(self.value, with_alpha=with_alpha)

    def luminance(self) -> float:
        """W3C relative luminance of the RGB channels (alpha is ignored)."""
        return relative_luminance(self.red, self.green, self.blue)

    def __repr__(self) -> str:
        return f"Color(0x{self.value:08X})"


BLACK = Color(0xFF000000)
WHITE = Color(0xFFFFFFFF)
