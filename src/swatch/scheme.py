from __future__ import annotations

"""Material-3 style semantic color schemes.

:func:`generate_color_scheme` combines a primary color's swatch with a
harmony palette to fill every :class:`ColorRole`. Each ``on_*`` role is
picked by the luminance rule of :func:`swatch.contrast.generate_on_color`.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from .color_types import BLACK, WHITE, Color
from .config import Brightness, ColorRole, ThemeConfig
from .contrast import generate_on_color
from .engine import clamp01, round_half_up
from .harmony import generate_harmony
from .hsl import HSL
from .tones import generate_swatch

logger = logging.getLogger(__name__)


ERROR_LIGHT = Color(0xFFB00020)
ERROR_DARK = Color(0xFFCF6679)

# Primary opacity used for inverse_surface
INVERSE_SURFACE_ALPHA = 0.05

SURFACE_CONTAINER_DELTA = 0.05
SURFACE_CONTAINER_GRAY_LIGHT = 0.95
SURFACE_CONTAINER_GRAY_DARK = 0.07

# Primary lightness bounds that switch the surface to a harmony color
DARK_PRIMARY_LIGHTNESS = 0.2
LIGHT_PRIMARY_LIGHTNESS = 0.8


@dataclass(frozen=True)
class ColorScheme:
    """Fixed record of semantic color roles.

    Field names match :class:`ColorRole` values, so ``scheme[role]`` and
    ``getattr(scheme, role.value)`` are equivalent.
    """

    brightness: Brightness
    primary: Color
    on_primary: Color
    primary_container: Color
    on_primary_container: Color
    secondary: Color
    on_secondary: Color
    secondary_container: Color
    on_secondary_container: Color
    tertiary: Color
    on_tertiary: Color
    tertiary_container: Color
    on_tertiary_container: Color
    error: Color
    on_error: Color
    error_container: Color
    on_error_container: Color
    background: Color
    on_background: Color
    surface: Color
    on_surface: Color
    surface_container: Color
    on_surface_variant: Color
    outline: Color
    shadow: Color
    scrim: Color
    inverse_surface: Color
    on_inverse_surface: Color
    inverse_primary: Color

    def __getitem__(self, role: ColorRole | str) -> Color:
        return getattr(self, ColorRole.from_value(role).value)

    def roles(self) -> Iterator[Tuple[ColorRole, Color]]:
        """Yield (role, color) pairs in declaration order."""
        for role in ColorRole:
            yield role, getattr(self, role.value)

    def to_dict(self) -> Dict[str, Color]:
        """Return ``{role_name: Color}`` for every role."""
        return {role.value: color for role, color in self.roles()}


@dataclass(frozen=True)
class ColorSchemePair:
    """Light and dark schemes generated from the same primary and config."""

    light: ColorScheme
    dark: ColorScheme


def blend(foreground: Color, background: Color, alpha: float) -> Color:
    """Composite ``foreground`` at ``alpha`` opacity over ``background`` (opaque result)."""
    a = clamp01(alpha)

    def _mix(f: int, b: int) -> int:
        return max(0, min(255, round_half_up(f * a + b * (1.0 - a))))

    return Color.from_rgb(
        _mix(foreground.red, background.red),
        _mix(foreground.green, background.green),
        _mix(foreground.blue, background.blue),
    )


def _pick(colors: List[Color], index: int, fallback: Color, role: str) -> Color:
    if index < len(colors):
        return colors[index]
    logger.debug("harmony has %d colors; %s uses its fallback", len(colors), role)
    return fallback


def _surface_for(primary: Color, harmonics: List[Color], brightness: Brightness) -> Color:
    lightness = HSL.from_color(primary).l
    if lightness < DARK_PRIMARY_LIGHTNESS:
        return _pick(harmonics, 1, primary, "surface")
    if lightness > LIGHT_PRIMARY_LIGHTNESS:
        return _pick(harmonics, 2, primary, "surface")
    return WHITE if brightness is Brightness.LIGHT else BLACK


def _surface_container_for(surface: Color, brightness: Brightness) -> Color:
    if surface == WHITE or surface == BLACK:
        gray = SURFACE_CONTAINER_GRAY_LIGHT if brightness is Brightness.LIGHT else SURFACE_CONTAINER_GRAY_DARK
        return HSL(0.0, 0.0, gray).to_color()
    hsl = HSL.from_color(surface)
    delta = -SURFACE_CONTAINER_DELTA if brightness is Brightness.LIGHT else SURFACE_CONTAINER_DELTA
    return hsl.with_lightness(clamp01(hsl.l + delta)).to_color()


def generate_color_scheme(primary: Color, config: ThemeConfig | None = None) -> ColorScheme:
    """Generate a full semantic scheme from ``primary``.

    Overrides in ``config`` replace computed roles at the very end; derived
    roles (containers, on-colors, surfaces) are always computed from the
    non-overridden values.
    """
    if config is None:
        config = ThemeConfig()
    brightness = config.brightness
    harmony = config.harmony

    primary_swatch = generate_swatch(primary)
    base_primary = primary_swatch[500]
    primary_container = primary_swatch[700]

    harmonics = generate_harmony(primary, harmony.kind, harmony.steps, harmony.angle)
    secondary = harmonics[1] if len(harmonics) > 1 else harmonics[0]
    tertiary = _pick(harmonics, 2, secondary, "tertiary")
    secondary_container = generate_swatch(secondary)[700]
    tertiary_container = generate_swatch(tertiary)[700]

    surface = _surface_for(primary, harmonics, brightness)
    on_surface = generate_on_color(surface)
    surface_container = _surface_container_for(surface, brightness)
    outline = generate_swatch(surface)[400]

    error = ERROR_LIGHT if brightness is Brightness.LIGHT else ERROR_DARK
    error_container = generate_swatch(error)[700]

    inverse_base = BLACK if brightness is Brightness.LIGHT else WHITE
    inverse_surface = blend(primary, inverse_base, INVERSE_SURFACE_ALPHA)

    computed: Dict[str, Color] = {
        "primary": base_primary,
        "on_primary": generate_on_color(base_primary),
        "primary_container": primary_container,
        "on_primary_container": generate_on_color(primary_container),
        "secondary": secondary,
        "on_secondary": generate_on_color(secondary),
        "secondary_container": secondary_container,
        "on_secondary_container": generate_on_color(secondary_container),
        "tertiary": tertiary,
        "on_tertiary": generate_on_color(tertiary),
        "tertiary_container": tertiary_container,
        "on_tertiary_container": generate_on_color(tertiary_container),
        "error": error,
        "on_error": generate_on_color(error),
        "error_container": error_container,
        "on_error_container": generate_on_color(error_container),
        "background": surface,
        "on_background": on_surface,
        "surface": surface,
        "on_surface": on_surface,
        "surface_container": surface_container,
        "on_surface_variant": generate_on_color(surface_container),
        "outline": outline,
        "shadow": BLACK,
        "scrim": BLACK,
        "inverse_surface": inverse_surface,
        "on_inverse_surface": generate_on_color(inverse_base),
        "inverse_primary": primary_swatch[200],
    }

    for role, color in config.overrides.items():
        computed[role.value] = color

    return ColorScheme(brightness=brightness, **computed)


def generate_color_scheme_pair(primary: Color, config: ThemeConfig | None = None) -> ColorSchemePair:
    """Generate light and dark schemes sharing overrides and harmony config."""
    if config is None:
        config = ThemeConfig()
    light = generate_color_scheme(primary, config.with_brightness(Brightness.LIGHT))
    dark = generate_color_scheme(primary, config.with_brightness(Brightness.DARK))
    return ColorSchemePair(light=light, dark=dark)


__all__ = [
    "ERROR_LIGHT",
    "ERROR_DARK",
    "ColorScheme",
    "ColorSchemePair",
    "blend",
    "generate_color_scheme",
    "generate_color_scheme_pair",
]
