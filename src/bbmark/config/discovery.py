"""Config file discovery and loading.

Walk-up finder locates bbmark.toml, similar to how git finds .git/.
Supports BBMARK_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "bbmark.toml"
CONFIG_ENV_VAR = "BBMARK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for bbmark.toml.

    Returns the path to the config file, or None if not found.
    Checks BBMARK_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML and return the raw section tables.

    Validation is left to the settings models so env vars can still
    override individual keys.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
    return data
