"""Public entrypoint for the swatch library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``swatch`` instead of individual
submodules.
"""

from .color_types import BLACK, WHITE, Color
from .hsl import HSL
from .contrast import compute_luminance, contrast_ratio, generate_on_color
from .tones import TONES, Swatch, generate_swatch, get_shade
from .harmony import HarmonyKind, analogous, complementary, generate_harmony, monochromatic
from .config import Brightness, ColorRole, HarmonyConfig, ThemeConfig, load_theme_config
from .scheme import ColorScheme, ColorSchemePair, generate_color_scheme, generate_color_scheme_pair
from .export import (
    BRIGHTNESS_OPTIONS,
    EXPORT_FORMAT_OPTIONS,
    HARMONY_KIND_OPTIONS,
    ExportFormat,
    export_scheme,
    export_swatch,
)

__all__ = [
    "Color",
    "BLACK",
    "WHITE",
    "HSL",
    "compute_luminance",
    "contrast_ratio",
    "generate_on_color",
    "TONES",
    "Swatch",
    "generate_swatch",
    "get_shade",
    "HarmonyKind",
    "monochromatic",
    "analogous",
    "complementary",
    "generate_harmony",
    "Brightness",
    "ColorRole",
    "HarmonyConfig",
    "ThemeConfig",
    "load_theme_config",
    "ColorScheme",
    "ColorSchemePair",
    "generate_color_scheme",
    "generate_color_scheme_pair",
    "ExportFormat",
    "export_swatch",
    "export_scheme",
    "HARMONY_KIND_OPTIONS",
    "BRIGHTNESS_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
