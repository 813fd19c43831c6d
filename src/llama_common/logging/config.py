"""Persisted logging settings for the ``llama-common`` command line.

The settings live in a small JSON document, by default
``~/.llama_common/logging.json``. Only ``log_level`` is read today.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

PathLike = Optional[os.PathLike[str] | str]


def _env_path(key: str) -> Optional[Path]:
    raw = os.environ.get(key)
    if raw and raw.strip():
        return Path(raw).expanduser()
    return None


def config_dir() -> Path:
    """Return the config directory, honoring ``LLAMA_COMMON_CONFIG_DIR``."""

    return _env_path("LLAMA_COMMON_CONFIG_DIR") or Path.home() / ".llama_common"


def config_path(config_file: PathLike = None) -> Path:
    """Return the logging config path.

    An explicit ``config_file`` wins, then ``LLAMA_COMMON_LOG_CONFIG``, then
    ``<config_dir>/logging.json``.
    """

    if config_file is not None:
        return Path(config_file)
    return _env_path("LLAMA_COMMON_LOG_CONFIG") or config_dir() / "logging.json"


def load_config(config_file: PathLike = None) -> Dict[str, Any]:
    """Load the logging configuration.

    A missing, unreadable or non-object file is treated as an empty
    configuration.
    """

    path = config_path(config_file)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: Dict[str, Any], config_file: PathLike = None) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def level_name(level: str | int) -> str:
    """Return the canonical name for ``level``.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """

    if isinstance(level, int):
        name = logging.getLevelName(level)
        return name if isinstance(name, str) and not name.startswith("Level ") else str(level)
    name = str(level).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    raise ValueError(f"Unknown logging level: {level!r}")


def load_log_level(config_file: PathLike = None) -> Optional[int]:
    """Fetch the persisted log level as a number, if one is stored."""

    value = load_config(config_file).get("log_level")
    if isinstance(value, int):
        return value
    if value is None:
        return None
    candidate = logging.getLevelName(str(value).upper())
    return candidate if isinstance(candidate, int) else None


def save_log_level(level: str | int, config_file: PathLike = None) -> Path:
    """Persist ``level`` and return the config path."""

    config = load_config(config_file)
    config["log_level"] = level_name(level)
    return save_config(config, config_file)


__all__ = [
    "config_dir",
    "config_path",
    "level_name",
    "load_config",
    "save_config",
    "load_log_level",
    "save_log_level",
]
