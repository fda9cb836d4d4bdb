from __future__ import annotations

"""Color conversion engine for HSL and sRGB.

This module holds the numeric core shared by :class:`swatch.hsl.HSL` and
:mod:`swatch.contrast`: RGB <-> HSL conversion, hue normalization and the
W3C relative luminance transform. All functions are pure and operate on
plain floats/ints so they can be tested without the value types.
"""

import math
from typing import Tuple


HSLTuple = Tuple[float, float, float]
RGB255 = Tuple[int, int, int]

# W3C (WCAG 2.0) sRGB linearization threshold
LINEAR_THRESHOLD = 0.03928

LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if x >= 0.0:
        return int(math.floor(x + 0.5))
    return -int(math.floor(-x + 0.5))


def to_u8(x: float) -> int:
    """Round a 0-255 float channel and clamp it into [0, 255]."""
    return max(0, min(255, round_half_up(x)))


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    h_norm = h % 360.0
    # float modulo of a tiny negative value can land exactly on 360.0
    return 0.0 if h_norm >= 360.0 else h_norm


def rgb_to_hsl(r: int, g: int, b: int) -> HSLTuple:
    """Convert 8-bit RGB to (h, s, l) with h in degrees and s, l in [0, 1].

    The dominating channel is checked in the order red, green, blue, which
    fixes the hue branch taken when two channels tie for the maximum.
    """
    rf = r / 255.0
    gf = g / 255.0
    bf = b / 255.0

    c_max = max(rf, gf, bf)
    c_min = min(rf, gf, bf)
    diff = c_max - c_min

    l = (c_max + c_min) / 2.0

    if diff == 0:
        return (0.0, 0.0, l)

    s = diff / (2.0 - c_max - c_min) if l > 0.5 else diff / (c_max + c_min)

    if c_max == rf:
        h = ((gf - bf) / diff + (6.0 if gf < bf else 0.0)) / 6.0
    elif c_max == gf:
        h = ((bf - rf) / diff + 2.0) / 6.0
    else:
        h = ((rf - gf) / diff + 4.0) / 6.0

    return (h * 360.0, s, l)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB255:
    """Convert (h, s, l) back to 8-bit RGB.

    Uses the six 60-degree sector algorithm. A saturation of exactly zero
    short-circuits to a gray computed from lightness alone.
    """
    if s == 0:
        gray = to_u8(l * 255.0)
        return (gray, gray, gray)

    h = normalize_hue(h)
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = l - c / 2.0

    if h < 60.0:
        rp, gp, bp = c, x, 0.0
    elif h < 120.0:
        rp, gp, bp = x, c, 0.0
    elif h < 180.0:
        rp, gp, bp = 0.0, c, x
    elif h < 240.0:
        rp, gp, bp = 0.0, x, c
    elif h < 300.0:
        rp, gp, bp = x, 0.0, c
    else:
        rp, gp, bp = c, 0.0, x

    return (
        to_u8((rp + m) * 255.0),
        to_u8((gp + m) * 255.0),
        to_u8((bp + m) * 255.0),
    )


def srgb_to_linear(c: float) -> float:
    """Linearize one sRGB channel in [0, 1] (W3C piecewise transform)."""
    if c <= LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """Relative luminance in [0, 1] of an 8-bit RGB triple."""
    wr, wg, wb = LUMINANCE_WEIGHTS
    return (
        wr * srgb_to_linear(r / 255.0)
        + wg * srgb_to_linear(g / 255.0)
        + wb * srgb_to_linear(b / 255.0)
    )
