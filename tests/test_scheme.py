from __future__ import annotations

"""Semantic color scheme assembly."""

from dataclasses import fields

import pytest

from swatch import (
    BLACK,
    HSL,
    WHITE,
    Brightness,
    Color,
    ColorRole,
    ColorScheme,
    HarmonyConfig,
    HarmonyKind,
    ThemeConfig,
    analogous,
    complementary,
    generate_color_scheme,
    generate_color_scheme_pair,
    generate_on_color,
    generate_swatch,
)
from swatch.scheme import ERROR_DARK, ERROR_LIGHT, blend

DARK = ThemeConfig(brightness=Brightness.DARK)
COMPLEMENTARY = HarmonyConfig(kind=HarmonyKind.COMPLEMENTARY)


def test_every_role_is_a_scheme_field() -> None:
    names = {f.name for f in fields(ColorScheme)} - {"brightness"}
    assert names == {role.value for role in ColorRole}


def test_primary_roles_come_from_swatch(blue: Color) -> None:
    scheme = generate_color_scheme(blue)
    sw = generate_swatch(blue)
    assert scheme.brightness is Brightness.LIGHT
    assert scheme.primary == sw[500]
    assert scheme.primary_container == sw[700]
    assert scheme.inverse_primary == sw[200]
    assert scheme.on_primary == generate_on_color(sw[500])
    assert scheme.on_primary_container == generate_on_color(sw[700])


def test_secondary_and_tertiary_follow_analogous_harmony(blue: Color) -> None:
    scheme = generate_color_scheme(blue)
    harmonics = analogous(blue, 3, 30)
    assert scheme.secondary == harmonics[1]
    assert scheme.tertiary == harmonics[2]
    assert scheme.secondary_container == generate_swatch(harmonics[1])[700]
    assert scheme.tertiary_container == generate_swatch(harmonics[2])[700]
    assert scheme.on_tertiary_container == generate_on_color(scheme.tertiary_container)


def test_tertiary_falls_back_to_secondary_with_two_harmonics(blue: Color) -> None:
    scheme = generate_color_scheme(blue, ThemeConfig(harmony=COMPLEMENTARY))
    comp = complementary(blue)[1]
    assert scheme.secondary == comp
    assert scheme.tertiary == comp


def test_single_harmonic_is_used_for_secondary(blue: Color) -> None:
    cfg = ThemeConfig(harmony=HarmonyConfig(kind=HarmonyKind.ANALOGOUS, steps=1))
    scheme = generate_color_scheme(blue, cfg)
    assert scheme.secondary == blue
    assert scheme.tertiary == blue


def test_mid_lightness_primary_uses_flat_surfaces(blue: Color) -> None:
    light = generate_color_scheme(blue)
    assert light.surface == WHITE
    assert light.background == WHITE
    assert light.on_surface == BLACK
    assert light.on_background == BLACK
    assert light.surface_container == Color(0xFFF2F2F2)
    assert light.outline == Color(0xFF999999)

    dark = generate_color_scheme(blue, DARK)
    assert dark.surface == BLACK
    assert dark.on_surface == WHITE
    assert dark.surface_container == Color(0xFF121212)
    assert dark.on_surface_variant == WHITE


def test_dark_primary_takes_surface_from_second_harmonic(dark_navy: Color) -> None:
    assert HSL.from_color(dark_navy).l < 0.2
    scheme = generate_color_scheme(dark_navy, ThemeConfig(harmony=COMPLEMENTARY))
    comp = complementary(dark_navy)[1]
    assert scheme.surface == comp
    assert scheme.outline == generate_swatch(comp)[400]
    hsl = HSL.from_color(comp)
    assert scheme.surface_container == hsl.with_lightness(hsl.l - 0.05).to_color()


def test_light_primary_falls_back_to_primary_surface(pale_blue: Color) -> None:
    assert HSL.from_color(pale_blue).l > 0.8
    scheme = generate_color_scheme(pale_blue, ThemeConfig(brightness="dark", harmony=COMPLEMENTARY))
    assert scheme.surface == pale_blue
    hsl = HSL.from_color(pale_blue)
    assert scheme.surface_container == hsl.with_lightness(min(1.0, hsl.l + 0.05)).to_color()


def test_light_primary_uses_third_harmonic_when_present(pale_blue: Color) -> None:
    scheme = generate_color_scheme(pale_blue)
    assert scheme.surface == analogous(pale_blue)[2]


def test_error_roles(blue: Color) -> None:
    light = generate_color_scheme(blue)
    assert light.error == ERROR_LIGHT == Color(0xFFB00020)
    assert light.on_error == WHITE
    assert light.error_container == generate_swatch(ERROR_LIGHT)[700]
    assert light.on_error_container == generate_on_color(light.error_container)

    dark = generate_color_scheme(blue, DARK)
    assert dark.error == ERROR_DARK == Color(0xFFCF6679)


def test_inverse_surface_blends_primary(blue: Color) -> None:
    light = generate_color_scheme(blue)
    assert light.inverse_surface == Color(0xFF02080C)
    assert light.on_inverse_surface == WHITE

    dark = generate_color_scheme(blue, DARK)
    assert dark.inverse_surface == Color(0xFFF4FAFE)
    assert dark.on_inverse_surface == BLACK


def test_blend_endpoints(blue: Color) -> None:
    assert blend(blue, BLACK, 1.0) == blue
    assert blend(blue, WHITE, 0.0) == WHITE
    assert blend(blue, WHITE, 7.0) == blue


def test_shadow_and_scrim_are_black(blue: Color) -> None:
    for cfg in (ThemeConfig(), DARK):
        scheme = generate_color_scheme(blue, cfg)
        assert scheme.shadow == BLACK
        assert scheme.scrim == BLACK


def test_overrides_replace_only_the_named_role(blue: Color) -> None:
    yellow = Color(0xFFFFEB3B)
    plain = generate_color_scheme(blue)
    scheme = generate_color_scheme(blue, ThemeConfig(overrides={ColorRole.PRIMARY: yellow, "scrim": "#123456"}))
    assert scheme.primary == yellow
    assert scheme.scrim == Color(0xFF123456)
    # derived roles are not recomputed from the override
    assert scheme.on_primary == plain.on_primary == WHITE
    assert scheme.inverse_primary == plain.inverse_primary
    others = {k: v for k, v in scheme.to_dict().items() if k not in ("primary", "scrim")}
    assert others == {k: v for k, v in plain.to_dict().items() if k not in ("primary", "scrim")}


def test_scheme_is_deterministic(blue: Color) -> None:
    cfg = ThemeConfig(brightness="dark", harmony=HarmonyConfig(kind="monochromatic", steps=4))
    assert generate_color_scheme(blue, cfg) == generate_color_scheme(blue, cfg)


def test_role_lookup(blue: Color) -> None:
    scheme = generate_color_scheme(blue)
    assert scheme[ColorRole.ON_PRIMARY] == scheme.on_primary
    assert scheme["onPrimaryContainer"] == scheme.on_primary_container
    assert [role for role, _ in scheme.roles()] == list(ColorRole)
    with pytest.raises(ValueError):
        scheme["accent"]


def test_pair_shares_overrides_and_harmony(blue: Color) -> None:
    cfg = ThemeConfig(brightness="dark", overrides={"outline": 0xFF00FF00}, harmony=COMPLEMENTARY)
    pair = generate_color_scheme_pair(blue, cfg)
    assert pair.light.brightness is Brightness.LIGHT
    assert pair.dark.brightness is Brightness.DARK
    assert pair.light.outline == pair.dark.outline == Color(0xFF00FF00)
    assert pair.light == generate_color_scheme(blue, cfg.with_brightness("light"))
    assert pair.dark == generate_color_scheme(blue, cfg)
