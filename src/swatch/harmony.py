from __future__ import annotations

"""Color harmony palettes.

This module defines :class:`HarmonyKind` and the logic that derives the raw
HSL values of a harmony from a base color. The public helpers
(:func:`monochromatic`, :func:`analogous`, :func:`complementary`) convert
the raw values into :class:`swatch.Color` lists.
"""

from enum import Enum
from typing import List

from .color_types import Color
from .engine import clamp01, normalize_hue
from .hsl import HSL


class HarmonyKind(Enum):
    """Rules for deriving related colors from a base color."""

    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"

    @classmethod
    def from_value(cls, value: "HarmonyKind | str") -> "HarmonyKind":
        if isinstance(value, HarmonyKind):
            return value
        key = str(value).strip().lower()
        for kind in cls:
            if kind.value == key:
                return kind
        valid = ", ".join(k.value for k in cls)
        raise ValueError(f"Unknown harmony kind: {value!r} (expected one of {valid}).")


DEFAULT_MONOCHROMATIC_STEPS = 5
DEFAULT_ANALOGOUS_STEPS = 3
DEFAULT_ANALOGOUS_ANGLE = 30.0

# Monochromatic lightness range: 0.15 + 0.7 * t^2 for t in [0, 1]
MONO_MIN_LIGHTNESS = 0.15
MONO_LIGHTNESS_SPAN = 0.7


def monochromatic_raw(base: HSL, steps: int = DEFAULT_MONOCHROMATIC_STEPS) -> List[HSL]:
    """Raw HSL values of a monochromatic ramp (dark to light).

    Lightness follows a quadratic ease-in so more samples sit at the dark end.
    """
    if steps < 2:
        raise ValueError(f"Monochromatic harmony needs steps >= 2, got {steps}.")
    raw: List[HSL] = []
    for i in range(steps):
        t = i / (steps - 1)
        lightness = clamp01(MONO_MIN_LIGHTNESS + MONO_LIGHTNESS_SPAN * t * t)
        raw.append(base.with_lightness(lightness))
    return raw


def analogous_raw(
    base: HSL,
    steps: int = DEFAULT_ANALOGOUS_STEPS,
    angle: float = DEFAULT_ANALOGOUS_ANGLE,
) -> List[HSL]:
    """Raw HSL values spread symmetrically around the base hue.

    With an odd step count the center element keeps the base hue.
    """
    if steps < 1:
        raise ValueError(f"Analogous harmony needs steps >= 1, got {steps}.")
    mid = (steps - 1) / 2.0
    return [base.with_hue(normalize_hue(base.h + (i - mid) * angle)) for i in range(steps)]


def complement_raw(base: HSL) -> HSL:
    """Opposite hue; lightness pushed away from the base to add contrast."""
    if base.l > 0.5:
        lightness = base.l * 0.8
    else:
        lightness = base.l * 1.2
    return HSL(normalize_hue(base.h + 180.0), base.s, clamp01(lightness))


def generate_raw_colors(
    kind: HarmonyKind,
    base: HSL,
    steps: int,
    angle: float = DEFAULT_ANALOGOUS_ANGLE,
) -> List[HSL]:
    """Generate raw HSL colors for ``kind`` before conversion to Color.

    ``steps`` and ``angle`` are ignored by kinds that do not use them. For
    complementary harmony the first entry is the base itself.
    """
    if kind == HarmonyKind.MONOCHROMATIC:
        return monochromatic_raw(base, steps)
    if kind == HarmonyKind.ANALOGOUS:
        return analogous_raw(base, steps, angle)
    if kind == HarmonyKind.COMPLEMENTARY:
        return [base, complement_raw(base)]

    raise ValueError(f"Unsupported HarmonyKind: {kind}")


def monochromatic(color: Color, steps: int = DEFAULT_MONOCHROMATIC_STEPS) -> List[Color]:
    """Return ``steps`` shades of ``color``'s hue from lightness 0.15 to 0.85."""
    base = HSL.from_color(color)
    return [hsl.to_color() for hsl in monochromatic_raw(base, steps)]


def analogous(
    color: Color,
    steps: int = DEFAULT_ANALOGOUS_STEPS,
    angle: float = DEFAULT_ANALOGOUS_ANGLE,
) -> List[Color]:
    """Return ``steps`` colors whose hues are spaced ``angle`` degrees around ``color``."""
    base = HSL.from_color(color)
    return [hsl.to_color() for hsl in analogous_raw(base, steps, angle)]


def complementary(color: Color) -> List[Color]:
    """Return ``[color, complement]``."""
    return [color, complement_raw(HSL.from_color(color)).to_color()]


def generate_harmony(
    color: Color,
    kind: HarmonyKind | str = HarmonyKind.ANALOGOUS,
    steps: int | None = None,
    angle: float = DEFAULT_ANALOGOUS_ANGLE,
) -> List[Color]:
    """Dispatch to the harmony helper for ``kind``.

    ``steps=None`` uses the kind's default step count.
    """
    kind = HarmonyKind.from_value(kind)
    if kind == HarmonyKind.MONOCHROMATIC:
        return monochromatic(color, DEFAULT_MONOCHROMATIC_STEPS if steps is None else steps)
    if kind == HarmonyKind.ANALOGOUS:
        return analogous(color, DEFAULT_ANALOGOUS_STEPS if steps is None else steps, angle)
    return complementary(color)


__all__ = [
    "HarmonyKind",
    "DEFAULT_MONOCHROMATIC_STEPS",
    "DEFAULT_ANALOGOUS_STEPS",
    "DEFAULT_ANALOGOUS_ANGLE",
    "monochromatic_raw",
    "analogous_raw",
    "complement_raw",
    "generate_raw_colors",
    "monochromatic",
    "analogous",
    "complementary",
    "generate_harmony",
]
