from __future__ import annotations

"""Material tonal swatch generation.

This module defines :class:`Swatch` and :func:`generate_swatch`, which
derives the ten Material tones (50-900) of a base color by replacing its
HSL lightness with a fixed ramp.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from .color_types import Color
from .engine import clamp01
from .hsl import HSL


TONES: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)

# Fixed lightness per tone; 500 is computed by midtone_lightness().
TONE_LIGHTNESS: Mapping[int, float] = MappingProxyType(
    {
        50: 0.95,
        100: 0.88,
        200: 0.80,
        300: 0.70,
        400: 0.60,
        600: 0.40,
        700: 0.30,
        800: 0.20,
        900: 0.12,
    }
)


def _check_tone(tone: int) -> None:
    if tone not in TONES:
        valid = ", ".join(str(t) for t in TONES)
        raise ValueError(f"Invalid tone {tone!r}; expected one of {{{valid}}}.")


def midtone_lightness(base_lightness: float) -> float:
    """Lightness used for tone 500 given the base color's lightness.

    Extreme inputs are pulled into a fixed band so the ramp stays ordered
    light to dark; mid-range inputs keep their own lightness within
    [0.40, 0.59].
    """
    if base_lightness > 0.85:
        return 0.45
    if base_lightness < 0.15:
        return 0.55
    if base_lightness > 0.70:
        return 0.50
    if base_lightness < 0.30:
        return 0.50
    return max(0.40, min(0.59, base_lightness))


def tone_lightness(tone: int, base_lightness: float) -> float:
    """Lightness assigned to ``tone`` for a base color of ``base_lightness``."""
    _check_tone(tone)
    if tone == 500:
        return midtone_lightness(base_lightness)
    return TONE_LIGHTNESS[tone]


@dataclass(frozen=True)
class Swatch:
    """Ten-tone Material swatch.

    Attributes
    ----------
    base_color:
        The color the swatch was generated from, unmodified. This is not
        necessarily equal to ``swatch[500]``.
    tones:
        Read-only mapping tone -> Color for every tone in :data:`TONES`.
    """

    base_color: Color
    tones: Mapping[int, Color] = field(repr=False)

    @property
    def value(self) -> int:
        """Packed ARGB value of the base color."""
        return self.base_color.value

    def shade(self, tone: int) -> Color:
        _check_tone(tone)
        return self.tones[tone]

    def __getitem__(self, tone: int) -> Color:
        return self.shade(tone)

    def __iter__(self) -> Iterator[int]:
        return iter(TONES)

    def __len__(self) -> int:
        return len(TONES)

    def __hash__(self) -> int:
        return hash((self.base_color, tuple(self.tones[t] for t in TONES)))

    def items(self) -> Iterator[Tuple[int, Color]]:
        """Yield (tone, color) pairs from tone 50 to tone 900."""
        for tone in TONES:
            yield tone, self.tones[tone]


def generate_swatch(color: Color) -> Swatch:
    """Generate the 10-tone swatch of ``color``.

    Hue and saturation of the base are kept for every tone; only lightness
    changes.
    """
    base = HSL.from_color(color)
    shades: Dict[int, Color] = {}
    for tone in TONES:
        lightness = clamp01(tone_lightness(tone, base.l))
        shades[tone] = base.with_lightness(lightness).to_color()
    return Swatch(base_color=color, tones=MappingProxyType(shades))


def get_shade(color: Color, tone: int) -> Color:
    """Return a single tone of ``color``'s swatch.

    Raises
    ------
    ValueError
        If ``tone`` is not one of 50, 100, 200, ..., 900.
    """
    _check_tone(tone)
    base = HSL.from_color(color)
    return base.with_lightness(tone_lightness(tone, base.l)).to_color()


__all__ = [
    "TONES",
    "TONE_LIGHTNESS",
    "Swatch",
    "midtone_lightness",
    "tone_lightness",
    "generate_swatch",
    "get_shade",
]
