"""Configuration: fixed file name and contents, plus config loading (global + project overrides)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# File both programs operate on, relative to the current working directory
TARGET_FILENAME = "simple.txt"

FIRST_SENTENCE = "example of writing to a file."
SECOND_SENTENCE = " Hello World!"
NAMES = ("Leslie", "Ron", "Ann")

CONFIG_DIR = ".simplefile"
CONFIG_FILENAME = "config.json"
DEFAULT_ENCODING = "utf-8"


def _global_config_dir() -> Path:
    return Path.home() / CONFIG_DIR


def global_config_path() -> Path:
    """Path to global config file (~/.simplefile/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.simplefile/config.json)."""
    return project_root / CONFIG_DIR / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    return {
        "encoding": DEFAULT_ENCODING,
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON object from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
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


def _checked_encoding(value: Any) -> str:
    """Return value if it names a known text codec, else DEFAULT_ENCODING."""
    if not isinstance(value, str) or not value:
        return DEFAULT_ENCODING
    try:
        "".encode(value)
    except LookupError:
        return DEFAULT_ENCODING
    return value


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.simplefile/config.json) + project overrides.

    If project_root is None, the current working directory is used for the project-local file.
    """
    merged = default_config()
    global_data = _load_json(global_config_path())
    if global_data is not None:
        _deep_merge(merged, global_data)
    if project_root is None:
        project_root = Path.cwd()
    project_data = _load_json(project_config_path(project_root))
    if project_data is not None:
        _deep_merge(merged, project_data)
    merged["encoding"] = _checked_encoding(merged.get("encoding"))
    return merged


def target_path(cwd: Path | None = None) -> Path:
    """Location of simple.txt: TARGET_FILENAME resolved against cwd (default: process cwd)."""
    return (cwd if cwd is not None else Path.cwd()) / TARGET_FILENAME
