"""
Where: `common.env`
What: lightweight parsing helpers for environment variables.
Why: keep `os.getenv` plus fallback handling in one place instead of scattering it.
"""

from __future__ import annotations

import os
from typing import Optional


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return a stripped string variable (unset or blank gives the default)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip()
    return s if s else default


def env_bool(name: str, default: bool = False) -> bool:
    """Return a boolean variable (accepts 0/1 and true/false style words)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # numbers first
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)
