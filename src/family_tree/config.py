import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from family_tree.utils.pathing import config_file_path

CONFIG_PATH = config_file_path("family_tree.yml")

DEFAULTS: Dict[str, Any] = {
    "layout": {
        "max_name": 15,
        "gap": 6,
        "min_width": 6,
        "connector": "│",
        "seed_root_children": False,
    },
    "registry": {
        "max_stored_name": 63,
    },
    "unattached_policy": "preserve",
    "logging": {
        "dir": "logs",
        "file": "family_tree.log",
        "level": "INFO",
        "console_level": "WARNING",
        "rotate": False,
        "per_module_files": False,
    },
    "debug": False,
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class TreeConfig:
    def __init__(self, data):
        data = _merge(DEFAULTS, data or {})
        self.layout = data["layout"]
        self.registry = data["registry"]
        self.logging = data["logging"]
        self.unattached_policy = str(data["unattached_policy"])
        self.debug = bool(data["debug"])
        self.source: Optional[Path] = None


def load_config(path: Union[str, Path, None] = None) -> 'TreeConfig':
    """
    Load a YAML config file on top of the built-in defaults.

    An explicit path must exist; the project default file is optional.
    """
    if path is not None:
        cfg_path = Path(path)
        if not cfg_path.exists():
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
    else:
        cfg_path = CONFIG_PATH
        if not cfg_path.exists():
            return TreeConfig({})

    with open(cfg_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    cfg = TreeConfig(data)
    cfg.source = cfg_path
    return cfg


_config_cache = None


def get_config() -> 'TreeConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def set_config(cfg: Optional['TreeConfig']) -> None:
    """Install a config override; ``None`` resets to the project file."""
    global _config_cache
    _config_cache = cfg
