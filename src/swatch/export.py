from __future__ import annotations

"""Helper utilities for handing swatches and schemes to external consumers.

This module exposes label/enum pairs for harmony kinds, brightness and
export formats, and converts :class:`Swatch` / :class:`ColorScheme` objects
into plain values (packed ARGB ints, HEX strings, RGBA tuples or a NumPy
array) that code emitters and UIs can consume directly.
"""

from enum import Enum
from typing import Dict, Iterable, List

import numpy as np

from .color_types import Color
from .config import Brightness
from .harmony import HarmonyKind
from .scheme import ColorScheme
from .tones import Swatch


class ExportFormat(Enum):
    """Supported output formats for exported colors."""

    ARGB = "argb"
    HEX = "hex"
    RGBA_01 = "rgba_01"
    RGBA_255 = "rgba_255"
    ARRAY = "array"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
HARMONY_KIND_OPTIONS: List[tuple[str, HarmonyKind]] = [
    ("Monochromatic", HarmonyKind.MONOCHROMATIC),
    ("Analogous", HarmonyKind.ANALOGOUS),
    ("Complementary", HarmonyKind.COMPLEMENTARY),
]
BRIGHTNESS_OPTIONS: List[tuple[str, Brightness]] = [
    ("Light", Brightness.LIGHT),
    ("Dark", Brightness.DARK),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("ARGB (0xAARRGGBB)", ExportFormat.ARGB),
    ("HEX", ExportFormat.HEX),
    ("RGBA (0-1)", ExportFormat.RGBA_01),
    ("RGBA (0-255)", ExportFormat.RGBA_255),
    ("NumPy array", ExportFormat.ARRAY),
]

HARMONY_KIND_LABEL_MAP: Dict[str, HarmonyKind] = {
    label: value for label, value in HARMONY_KIND_OPTIONS
}
BRIGHTNESS_LABEL_MAP: Dict[str, Brightness] = {
    label: value for label, value in BRIGHTNESS_OPTIONS
}


def _as_format(fmt: ExportFormat | str) -> ExportFormat:
    return fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)


def _convert(color: Color, fmt: ExportFormat) -> object:
    if fmt == ExportFormat.ARGB:
        return color.value
    if fmt == ExportFormat.HEX:
        return color.to_hex()
    if fmt == ExportFormat.RGBA_01:
        return color.to_rgba01()
    if fmt == ExportFormat.RGBA_255:
        return (color.red, color.green, color.blue, color.alpha)
    raise ValueError(f"Unsupported export format: {fmt}")


def export_colors(colors: Iterable[Color], fmt: ExportFormat | str) -> List[object] | np.ndarray:
    """Convert a sequence of colors to the desired format.

    ``ARRAY`` returns a float32 array of shape (N, 4) holding RGBA in [0, 1].
    """
    export_fmt = _as_format(fmt)
    items = list(colors)
    if export_fmt == ExportFormat.ARRAY:
        return np.array([c.to_rgba01() for c in items], dtype=np.float32).reshape(len(items), 4)
    return [_convert(c, export_fmt) for c in items]


def export_swatch(swatch: Swatch, fmt: ExportFormat | str) -> List[object] | np.ndarray:
    """Convert a Swatch's ten tones (50 to 900, in order) to the desired format."""
    return export_colors((color for _, color in swatch.items()), fmt)


def export_scheme(scheme: ColorScheme, fmt: ExportFormat | str) -> Dict[str, object]:
    """Convert a ColorScheme to ``{role_name: value}``.

    ``ARRAY`` is not meaningful per role; each value is then a (4,) float32 array.
    """
    export_fmt = _as_format(fmt)
    if export_fmt == ExportFormat.ARRAY:
        return {
            name: np.asarray(color.to_rgba01(), dtype=np.float32)
            for name, color in scheme.to_dict().items()
        }
    return {name: _convert(color, export_fmt) for name, color in scheme.to_dict().items()}


__all__ = [
    "ExportFormat",
    "HARMONY_KIND_OPTIONS",
    "BRIGHTNESS_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "HARMONY_KIND_LABEL_MAP",
    "BRIGHTNESS_LABEL_MAP",
    "export_colors",
    "export_swatch",
    "export_scheme",
]
