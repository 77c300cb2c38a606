"""Configuration loader for dictcc.

Loads defaults from dictcc.json (current directory, then home directory),
with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .schema import OutputFormat

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "dict_dir": "~/.dictcc",
    "output_format": "normal",
    "source_format": "dictcc",
    "progress_interval": 1000,
    "quiet": False,
    "verbose": False,
}

CONFIG_FILENAME = "dictcc.json"

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find dictcc.json in the current or home directory."""
    paths = [
        Path.cwd() / CONFIG_FILENAME,
        Path.home() / f".{CONFIG_FILENAME}",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load(reload: bool = False) -> dict[str, Any]:
    """Load configuration from dictcc.json or use fallbacks."""
    global _config
    if _config is not None and not reload:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_dict_dir() -> Path:
    return Path(get_default("dict_dir", FALLBACK_DEFAULTS["dict_dir"])).expanduser()


def default_output_format() -> OutputFormat:
    name = get_default("output_format", FALLBACK_DEFAULTS["output_format"])
    try:
        return OutputFormat.from_name(name)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def default_source_format() -> str:
    return get_default("source_format", FALLBACK_DEFAULTS["source_format"])


def default_progress_interval() -> int:
    return int(get_default("progress_interval", FALLBACK_DEFAULTS["progress_interval"]))
