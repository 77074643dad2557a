"""
Single-record session store, kept as a small JSON file.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from workfetch.errors import StateError
from workfetch.models import SessionRecord

log = logging.getLogger(__name__)


class SessionStore:
    """Reads and writes the one SessionRecord workfetch remembers between runs."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[SessionRecord]:
        """Return the stored record, or None when there is nothing usable on disk."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.debug("No session record at %s", self.path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Could not read session record %s: %s", self.path, e)
            return None

        try:
            return SessionRecord.model_validate_json(raw)
        except ValidationError as e:
            log.warning("Ignoring unreadable session record %s: %s", self.path, e.errors()[0]["msg"])
            return None

    def save(self, record: SessionRecord) -> None:
        """Atomically replace the stored record."""
        payload = record.model_dump_json()
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".session-", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StateError(f"Failed to write session record {self.path}: {e}") from e
        log.debug("Saved session record %s to %s", payload, self.path)

    def clear(self) -> bool:
        """Forget the stored record. Returns True if there was one."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StateError(f"Failed to remove session record {self.path}: {e}") from e
        return True
