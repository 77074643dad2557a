"""On-disk state and configuration."""

from workfetch.storage.config import load_or_create_config, write_config
from workfetch.storage.paths import StoragePaths, data_dir, resolve_paths
from workfetch.storage.state import SessionStore

__all__ = [
    "StoragePaths",
    "SessionStore",
    "data_dir",
    "resolve_paths",
    "load_or_create_config",
    "write_config",
]
