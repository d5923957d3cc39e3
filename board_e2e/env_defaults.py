"""Read workspace defaults from a `.env` file.

Environment variables always win; the `.env` file at the repository root only
fills in values that are not exported. The file uses plain `KEY=value` lines,
optionally quoted, with `#` comments.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

ENV_FILE_VARIABLE = "BOARD_ENV_FILE"


def _env_file() -> Path:
    override = os.getenv(ENV_FILE_VARIABLE)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[1] / ".env"


def parse_env_lines(text: str) -> Dict[str, str]:
    defaults: Dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export "):].strip()
        value = value.strip()
        if len(value) >= 2 and value[0] in ('"', "'") and value[-1] == value[0]:
            value = value[1:-1]
        defaults[key] = value
    return defaults


@lru_cache(maxsize=1)
def _load_env_defaults() -> Dict[str, str]:
    env_file = _env_file()
    if not env_file.exists():
        return {}
    return parse_env_lines(env_file.read_text(encoding="utf-8"))


def get_env_default(key: str) -> str | None:
    return _load_env_defaults().get(key)


def getenv(key: str, default: str | None = None) -> str | None:
    """Environment variable, then `.env` default, then `default`."""
    value = os.getenv(key)
    if value is not None and value != "":
        return value
    file_value = get_env_default(key)
    if file_value is not None and file_value != "":
        return file_value
    return default


def reset_cache() -> None:
    _load_env_defaults.cache_clear()
