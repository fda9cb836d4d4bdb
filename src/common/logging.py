"""
Lightweight logging helper for the project.

Notes:
- Library modules only call `logging.getLogger(__name__)`; they never configure handlers.
- Applications that have no logging setup of their own can apply a minimal one once.
"""

from __future__ import annotations

import logging

from . import settings


def setup_default_logging(level: int | str | None = None) -> None:
    """Apply a minimal logging configuration once.

    - No-op when the root logger already has handlers.
    - `level=None` uses `SWG_LOG_LEVEL` from `common.settings`.
    """
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
