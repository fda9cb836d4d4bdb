from __future__ import annotations

"""Configuration value objects for scheme generation.

This module defines :class:`Brightness`, :class:`ColorRole`,
:class:`HarmonyConfig` and :class:`ThemeConfig`, plus helpers to build a
ThemeConfig from a plain mapping or a YAML file.
"""

import logging
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from common import settings
from util.utils import load_config

from .color_types import Color
from .harmony import DEFAULT_ANALOGOUS_ANGLE, DEFAULT_ANALOGOUS_STEPS, HarmonyKind

logger = logging.getLogger(__name__)


def _snake_case(name: str) -> str:
    s = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name.strip())
    return s.replace("-", "_").lower()


class Brightness(Enum):
    """Overall brightness of a color scheme."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_value(cls, value: "Brightness | str") -> "Brightness":
        if isinstance(value, Brightness):
            return value
        key = str(value).strip().lower()
        for b in cls:
            if b.value == key:
                return b
        raise ValueError(f"Unknown brightness: {value!r} (expected 'light' or 'dark').")

    @property
    def opposite(self) -> "Brightness":
        return Brightness.DARK if self is Brightness.LIGHT else Brightness.LIGHT


class ColorRole(Enum):
    """Closed set of semantic roles in a :class:`swatch.ColorScheme`.

    Values are the scheme field names. :meth:`from_value` also accepts the
    camelCase spelling used by Material tooling (``onPrimary``).
    """

    PRIMARY = "primary"
    ON_PRIMARY = "on_primary"
    PRIMARY_CONTAINER = "primary_container"
    ON_PRIMARY_CONTAINER = "on_primary_container"
    SECONDARY = "secondary"
    ON_SECONDARY = "on_secondary"
    SECONDARY_CONTAINER = "secondary_container"
    ON_SECONDARY_CONTAINER = "on_secondary_container"
    TERTIARY = "tertiary"
    ON_TERTIARY = "on_tertiary"
    TERTIARY_CONTAINER = "tertiary_container"
    ON_TERTIARY_CONTAINER = "on_tertiary_container"
    ERROR = "error"
    ON_ERROR = "on_error"
    ERROR_CONTAINER = "error_container"
    ON_ERROR_CONTAINER = "on_error_container"
    BACKGROUND = "background"
    ON_BACKGROUND = "on_background"
    SURFACE = "surface"
    ON_SURFACE = "on_surface"
    SURFACE_CONTAINER = "surface_container"
    ON_SURFACE_VARIANT = "on_surface_variant"
    OUTLINE = "outline"
    SHADOW = "shadow"
    SCRIM = "scrim"
    INVERSE_SURFACE = "inverse_surface"
    ON_INVERSE_SURFACE = "on_inverse_surface"
    INVERSE_PRIMARY = "inverse_primary"

    @classmethod
    def from_value(cls, value: "ColorRole | str") -> "ColorRole":
        if isinstance(value, ColorRole):
            return value
        key = _snake_case(str(value))
        for role in cls:
            if role.value == key:
                return role
        raise ValueError(f"Unknown color role: {value!r}.")


@dataclass(frozen=True)
class HarmonyConfig:
    """Harmony used to derive the secondary/tertiary roles.

    Attributes
    ----------
    kind:
        Harmony rule (default analogous).
    angle:
        Hue spacing in degrees; only used by analogous harmony.
    steps:
        Number of harmony colors; ignored by complementary harmony.
    """

    kind: HarmonyKind = HarmonyKind.ANALOGOUS
    angle: float = DEFAULT_ANALOGOUS_ANGLE
    steps: int = DEFAULT_ANALOGOUS_STEPS

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", HarmonyKind.from_value(self.kind))
        object.__setattr__(self, "angle", float(self.angle))
        if isinstance(self.steps, bool) or not isinstance(self.steps, int):
            raise ValueError(f"steps must be an int, got {self.steps!r}.")
        if self.kind == HarmonyKind.MONOCHROMATIC and self.steps < 2:
            raise ValueError(f"Monochromatic harmony needs steps >= 2, got {self.steps}.")
        if self.kind == HarmonyKind.ANALOGOUS and self.steps < 1:
            raise ValueError(f"Analogous harmony needs steps >= 1, got {self.steps}.")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, strict: bool | None = None) -> "HarmonyConfig":
        _check_keys("harmony", data, {"kind", "angle", "steps"}, strict)
        defaults = cls()
        return cls(
            kind=data.get("kind", defaults.kind),
            angle=data.get("angle", defaults.angle),
            steps=data.get("steps", defaults.steps),
        )


def _freeze_overrides(overrides: Mapping[Any, Any] | None) -> Mapping[ColorRole, Color]:
    frozen = {ColorRole.from_value(k): Color.coerce(v) for k, v in (overrides or {}).items()}
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class ThemeConfig:
    """Inputs of :func:`swatch.generate_color_scheme` besides the primary color.

    Attributes
    ----------
    brightness:
        Light or dark scheme.
    overrides:
        Roles whose computed color is replaced verbatim. Keys may be given
        as ColorRole or role names; values as anything :meth:`Color.coerce`
        accepts. Stored as a read-only mapping.
    harmony:
        Harmony used for secondary/tertiary/surface derivation.
    """

    brightness: Brightness = Brightness.LIGHT
    overrides: Mapping[ColorRole, Color] = field(default_factory=dict)
    harmony: HarmonyConfig = field(default_factory=HarmonyConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "brightness", Brightness.from_value(self.brightness))
        object.__setattr__(self, "overrides", _freeze_overrides(self.overrides))
        if not isinstance(self.harmony, HarmonyConfig):
            raise ValueError(f"harmony must be a HarmonyConfig, got {type(self.harmony)!r}.")

    def __hash__(self) -> int:
        items = tuple(sorted(((r.value, c.value) for r, c in self.overrides.items())))
        return hash((self.brightness, items, self.harmony))

    def with_brightness(self, brightness: Brightness | str) -> "ThemeConfig":
        """Return a copy with a different brightness (overrides and harmony shared)."""
        return replace(self, brightness=Brightness.from_value(brightness))

    def with_overrides(self, overrides: Mapping[Any, Any]) -> "ThemeConfig":
        """Return a copy with ``overrides`` merged over the existing ones."""
        merged: dict[Any, Any] = dict(self.overrides)
        merged.update({ColorRole.from_value(k): v for k, v in overrides.items()})
        return replace(self, overrides=merged)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, strict: bool | None = None) -> "ThemeConfig":
        """Build a ThemeConfig from a plain mapping (e.g. parsed YAML).

        Unknown keys raise ``ValueError`` when ``strict`` (default: the
        ``SWG_STRICT_CONFIG`` setting) and are ignored otherwise.
        """
        _check_keys("theme", data, {"brightness", "overrides", "harmony"}, strict)
        harmony_data = data.get("harmony") or {}
        if not isinstance(harmony_data, Mapping):
            raise ValueError(f"harmony must be a mapping, got {type(harmony_data).__name__}.")
        overrides = data.get("overrides") or {}
        if not isinstance(overrides, Mapping):
            raise ValueError(f"overrides must be a mapping, got {type(overrides).__name__}.")
        for role, value in overrides.items():
            _check_override_value(role, value)
        return cls(
            brightness=data.get("brightness", Brightness.LIGHT),
            overrides=overrides,
            harmony=HarmonyConfig.from_dict(harmony_data, strict=strict),
        )


def _check_override_value(role: Any, value: Any) -> None:
    # YAML reads an unquoted all-digit hex such as 123456 as a decimal int
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < 0x01000000:
        raise ValueError(
            f"Override {role} = {value!r} has a zero alpha channel; quote hex colors in config files ('#123456')."
        )


def _check_keys(section: str, data: Mapping[str, Any], allowed: set[str], strict: bool | None) -> None:
    unknown = sorted(str(k) for k in data if k not in allowed)
    if not unknown:
        return
    if strict is None:
        strict = settings.get().STRICT_CONFIG
    if strict:
        raise ValueError(f"Unknown {section} config keys: {', '.join(unknown)}.")
    logger.debug("ignoring unknown %s config keys: %s", section, unknown)


def load_theme_config(path: str | Path | None = None, *, strict: bool | None = None) -> ThemeConfig:
    """Load a ThemeConfig from YAML.

    ``path=None`` falls back to the ``SWG_THEME_CONFIG`` setting; when that is
    unset too, the default ThemeConfig is returned. Unreadable files yield
    the default config (logged as a warning by :func:`util.utils.load_config`).
    """
    if path is None:
        path = settings.get().THEME_CONFIG
        if path is None:
            return ThemeConfig()
    data = load_config(path)
    logger.debug("loaded theme config from %s: %s", path, sorted(data))
    return ThemeConfig.from_dict(data, strict=strict)


__all__ = [
    "Brightness",
    "ColorRole",
    "HarmonyConfig",
    "ThemeConfig",
    "load_theme_config",
]
