"""Shared fixtures.

- frequently used sample colors
- settings snapshot reset around env-dependent tests
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from swatch import Color

MATERIAL_BLUE = 0xFF2196F3


@pytest.fixture()
def blue() -> Color:
    return Color(MATERIAL_BLUE)


@pytest.fixture()
def red() -> Color:
    return Color(0xFFFF0000)


@pytest.fixture()
def dark_navy() -> Color:
    # HSL lightness ~0.11
    return Color(0xFF0D1B2A)


@pytest.fixture()
def pale_blue() -> Color:
    # HSL lightness ~0.94
    return Color(0xFFE3F2FD)


@pytest.fixture()
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Clear SWG_* variables; reload the settings snapshot before and after the test."""
    for name in ("SWG_LOG_LEVEL", "SWG_THEME_CONFIG", "SWG_STRICT_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
