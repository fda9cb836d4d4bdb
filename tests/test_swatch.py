from __future__ import annotations

"""Tonal swatch generation and the tone-500 lightness policy."""

import pytest

from swatch import HSL, TONES, Color, generate_swatch, get_shade
from swatch.tones import TONE_LIGHTNESS, midtone_lightness, tone_lightness


def _lightness(c: Color) -> float:
    return HSL.from_color(c).l


def test_swatch_has_every_tone_in_order(blue: Color) -> None:
    sw = generate_swatch(blue)
    assert list(sw) == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900]
    assert len(sw) == 10
    assert [tone for tone, _ in sw.items()] == list(TONES)


def test_base_color_is_preserved(pale_blue: Color) -> None:
    sw = generate_swatch(pale_blue)
    assert sw.base_color == pale_blue
    assert sw.value == pale_blue.value
    # extreme inputs are remapped at tone 500
    assert sw[500] != pale_blue


def test_fixed_tones_keep_hue_and_saturation(blue: Color) -> None:
    base = HSL.from_color(blue)
    sw = generate_swatch(blue)
    assert sw[50] == HSL(base.h, base.s, 0.95).to_color()
    for tone, lightness in TONE_LIGHTNESS.items():
        assert sw[tone] == base.with_lightness(lightness).to_color()


def test_tone_900_uses_twelve_percent_lightness() -> None:
    assert TONE_LIGHTNESS[900] == 0.12


def test_material_blue_midtone_stays_in_mid_band(blue: Color) -> None:
    base_l = _lightness(blue)
    assert 0.30 <= base_l <= 0.70
    assert midtone_lightness(base_l) == base_l
    assert 0.40 - 1 / 255 <= _lightness(generate_swatch(blue)[500]) <= 0.59 + 1 / 255


@pytest.mark.parametrize(
    ("base_l", "expected"),
    [
        (1.0, 0.45),
        (0.86, 0.45),
        (0.85, 0.50),
        (0.71, 0.50),
        (0.70, 0.59),
        (0.65, 0.59),
        (0.50, 0.50),
        (0.35, 0.40),
        (0.30, 0.40),
        (0.29, 0.50),
        (0.15, 0.50),
        (0.14, 0.55),
        (0.0, 0.55),
    ],
)
def test_midtone_policy_branches(base_l: float, expected: float) -> None:
    assert midtone_lightness(base_l) == pytest.approx(expected)


def test_tone_lightness_is_non_increasing_for_every_policy_branch() -> None:
    for base_l in (0.0, 0.1, 0.2, 0.35, 0.5, 0.65, 0.75, 0.9, 1.0):
        ramp = [tone_lightness(t, base_l) for t in TONES]
        assert ramp == sorted(ramp, reverse=True)


def test_black_and_white_inputs_produce_gray_ramps() -> None:
    for base in (Color(0xFF000000), Color(0xFFFFFFFF)):
        sw = generate_swatch(base)
        for _, c in sw.items():
            assert c.red == c.green == c.blue


def test_get_shade_matches_swatch(blue: Color) -> None:
    sw = generate_swatch(blue)
    for tone in TONES:
        assert get_shade(blue, tone) == sw[tone]
        assert sw.shade(tone) == sw[tone]


def test_invalid_tone_lists_valid_set(blue: Color) -> None:
    with pytest.raises(ValueError, match="50, 100, 200"):
        get_shade(blue, 999)
    with pytest.raises(ValueError):
        generate_swatch(blue)[550]


def test_swatch_is_immutable(blue: Color) -> None:
    sw = generate_swatch(blue)
    with pytest.raises(TypeError):
        sw.tones[50] = blue  # type: ignore[index]
    assert hash(sw) == hash(generate_swatch(blue))
