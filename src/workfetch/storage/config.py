"""
TOML configuration file: loaded on every run, created with defaults when missing.
"""

import logging
import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from workfetch.errors import ConfigError
from workfetch.models import UserConfig

log = logging.getLogger(__name__)


def write_config(path: Path, config: UserConfig) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(tomli_w.dumps(config.model_dump(mode="json")).encode("utf-8"))


def _write_defaults(path: Path) -> UserConfig:
    config = UserConfig()
    try:
        write_config(path, config)
        log.info("Wrote default configuration to %s", path)
    except OSError as e:
        log.warning("Could not write default configuration to %s: %s", path, e)
    return config


def load_or_create_config(path: Path) -> UserConfig:
    """Load the user configuration, substituting (and writing) defaults if the file is unusable.

    A readable file with values that cannot be used raises ConfigError and is
    left untouched.
    """
    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        log.debug("No configuration at %s", path)
        return _write_defaults(path)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        log.warning("Unreadable configuration %s (%s), using defaults", path, e)
        return _write_defaults(path)

    try:
        return UserConfig.model_validate(document)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ConfigError(
            f"Invalid configuration in {path}: {', '.join(fields)}",
            details={"path": str(path), "fields": fields},
        ) from e
