"""
workfetch error types.
"""

from typing import Any, Optional


class WorkFetchError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConfigError(WorkFetchError):
    def __init__(self, message: str, code: str = "config_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class StateError(WorkFetchError):
    def __init__(self, message: str, code: str = "state_error"):
        super().__init__(code, message)


class ClockError(WorkFetchError):
    def __init__(self, message: str):
        super().__init__("clock_error", message)


class StorageError(WorkFetchError):
    def __init__(self, message: str):
        super().__init__("storage_error", message)
