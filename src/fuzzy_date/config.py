import os

import yaml
from pathlib import Path

from fuzzy_date.utils.pathing import resolve_project_path

CONFIG_ENV_VAR = "FUZZY_DATE_CONFIG"
CONFIG_PATH = resolve_project_path(Path("config") / "fuzzy_date.yml")

class FDConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.parsing = data.get("parsing", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def european_order(self) -> bool:
        return bool(self.parsing.get("european_order", False))

def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH

def load_config() -> 'FDConfig':
    path = config_path()
    if not path.exists():
        # Installed without the project tree: defaults, console logging only.
        return FDConfig({"logging": {"file_logging": False}})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FDConfig(data)

_config_cache = None

def get_config() -> 'FDConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def reset_config() -> None:
    global _config_cache
    _config_cache = None
