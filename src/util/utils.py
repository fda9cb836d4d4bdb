import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("failed to read config %s: %s", path, exc)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is %s, not a mapping", path, type(data).__name__)
        return {}
    return data


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML config file and return it as a dict (fail-soft).

    - A missing file, a parse error or a non-mapping document gives an empty dict.
    - Values are returned as parsed; validation belongs to the caller.
    """
    p = Path(path).expanduser()
    if not p.exists():
        logger.warning("config file not found: %s", p)
        return {}
    return _safe_load_yaml(p)
