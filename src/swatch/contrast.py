from __future__ import annotations

"""Luminance-based contrast helpers.

The on-color rule used by every ``on_*`` scheme role lives here so that
callers can apply the same threshold outside of scheme generation.
"""

from .color_types import BLACK, WHITE, Color

# strictly above this luminance a background gets black foreground
ON_COLOR_THRESHOLD = 0.5


def compute_luminance(color: Color) -> float:
    """Return the W3C relative luminance of ``color`` in [0, 1]."""
    return color.luminance()


def on_color_for_luminance(luminance: float) -> Color:
    """Return opaque black for luminance > 0.5, opaque white otherwise."""
    return BLACK if luminance > ON_COLOR_THRESHOLD else WHITE


def generate_on_color(color: Color) -> Color:
    """Return the readable foreground (black or white) for a background color."""
    return on_color_for_luminance(compute_luminance(color))


def contrast_ratio(first: Color, second: Color) -> float:
    """Return the WCAG contrast ratio between two colors (1.0 to 21.0)."""
    l1 = compute_luminance(first)
    l2 = compute_luminance(second)
    if l1 < l2:
        l1, l2 = l2, l1
    return (l1 + 0.05) / (l2 + 0.05)


__all__ = [
    "ON_COLOR_THRESHOLD",
    "compute_luminance",
    "on_color_for_luminance",
    "generate_on_color",
    "contrast_ratio",
]
