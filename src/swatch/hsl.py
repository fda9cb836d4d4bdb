from __future__ import annotations

"""Hue/saturation/lightness value type.

:class:`HSL` is the working space of every swatch and harmony algorithm:
colors are decomposed once, one field is replaced, and the result is
converted back with :meth:`HSL.to_color`.
"""

from dataclasses import dataclass, replace

from .color_types import Color
from .engine import hsl_to_rgb, rgb_to_hsl


@dataclass(frozen=True)
class HSL:
    """Immutable HSL triple.

    Attributes
    ----------
    h:
        Hue in degrees. Normally in [0, 360); values outside are wrapped
        when converting back to a Color.
    s:
        Saturation in [0, 1].
    l:
        Lightness in [0, 1].
    """

    h: float
    s: float
    l: float

    @classmethod
    def from_color(cls, color: Color) -> "HSL":
        """Decompose the RGB channels of ``color`` (alpha is dropped)."""
        h, s, l = rgb_to_hsl(color.red, color.green, color.blue)
        return cls(h, s, l)

    def with_hue(self, hue: float) -> "HSL":
        return replace(self, h=hue)

    def with_saturation(self, saturation: float) -> "HSL":
        return replace(self, s=saturation)

    def with_lightness(self, lightness: float) -> "HSL":
        return replace(self, l=lightness)

    def to_color(self) -> Color:
        """Convert back to an opaque Color."""
        r, g, b = hsl_to_rgb(self.h, self.s, self.l)
        return Color.from_rgb(r, g, b)
