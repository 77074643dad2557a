"""
Where workfetch keeps its files.
"""

import logging
import os
import sys
from pathlib import Path
from typing import NamedTuple

from workfetch.errors import StorageError

log = logging.getLogger(__name__)

APP_NAME = "workfetch"
HOME_ENV = "WORKFETCH_HOME"

STATE_FILE = "last_session.json"
CONFIG_FILE = "config.toml"
FALLBACK_STATE_FILE = "work_session.json"
FALLBACK_CONFIG_FILE = "config.toml"


class StoragePaths(NamedTuple):
    state: Path
    config: Path


def data_dir() -> Path:
    """Return the per-user directory suitable for the platform."""
    override = os.environ.get(HOME_ENV)
    if override:
        return Path(override).expanduser()
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
        return Path(base) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME


def resolve_paths() -> StoragePaths:
    """Locate the state and config files, falling back to the working directory."""
    try:
        directory = data_dir()
        directory.mkdir(parents=True, exist_ok=True)
        return StoragePaths(directory / STATE_FILE, directory / CONFIG_FILE)
    except (OSError, RuntimeError, KeyError) as e:
        log.warning("No usable data directory (%s), using the working directory", e)

    try:
        cwd = Path.cwd()
    except OSError as e:
        raise StorageError(f"No writable location for workfetch files: {e}") from e
    return StoragePaths(cwd / FALLBACK_STATE_FILE, cwd / FALLBACK_CONFIG_FILE)
