"""
Where: `common` package.
What: ambient helpers shared by the `swatch` library (environment settings, logging setup).
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
