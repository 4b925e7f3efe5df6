"""Configuration loading for the desktop runtime."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "window": {
        "default_position": [100, 80],
        "default_size": [420, 300],
        "titlebar_height": 28,
    },
    "desktop": {"width": 1280, "height": 800},
    "drag": {"clamp_to_desktop": False},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path) -> dict[str, Any]:
    """Merge ``config/default.yaml`` under ``root`` over the built-in defaults."""
    return merge_dicts(DEFAULT_CONFIG, load_yaml(root / "config" / "default.yaml"))


def pair(value: Any, name: str) -> tuple[int, int]:
    """Coerce a two-element config list such as ``[100, 80]``."""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be a two-element list, got {value!r}")
    return int(value[0]), int(value[1])
