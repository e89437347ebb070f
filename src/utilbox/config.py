"""Configuration: defaults, constants, and config loading (global + explicit file overrides)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

CONFIG_DIR = ".utilbox"
CONFIG_FILENAME = "config.json"

# Text encoding used when none is given
DEFAULT_ENCODING = "utf-8"

# Resolution context used when a resource lookup names none
DEFAULT_PACKAGE = "utilbox"


def _global_config_dir() -> Path:
    return Path.home() / CONFIG_DIR


def global_config_path() -> Path:
    """Path to global config file (~/.utilbox/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    return {
        "encoding": DEFAULT_ENCODING,
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.utilbox/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.utilbox/config.json) + explicit file.

    The explicit file (e.g. from --config) overrides the global one. A missing or
    malformed file is skipped rather than reported.
    """
    merged = load_global_config()
    if config_path is not None:
        data = _load_json(Path(config_path).expanduser())
        if data is not None:
            _deep_merge(merged, data)
    return merged
