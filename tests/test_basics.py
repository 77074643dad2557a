"""Basic unit tests for the workfetch package."""

from workfetch import (
    ClockError,
    ConfigError,
    StateError,
    StorageError,
    WorkDay,
    WorkFetchError,
    __version__,
    resolve,
    compute,
)
from workfetch.models import SameDayPolicy, UserConfig


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert WorkDay is not None
    assert callable(resolve)
    assert callable(compute)


def test_error_hierarchy():
    assert issubclass(ConfigError, WorkFetchError)
    assert issubclass(StateError, WorkFetchError)
    assert issubclass(ClockError, WorkFetchError)
    assert issubclass(StorageError, WorkFetchError)


def test_error_attributes():
    err = WorkFetchError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    cfg_err = ConfigError("bad config", details={"fields": ["work_minutes"]})
    assert cfg_err.code == "config_error"
    assert cfg_err.details == {"fields": ["work_minutes"]}

    assert StateError("x").code == "state_error"
    assert ClockError("x").code == "clock_error"
    assert StorageError("x").code == "storage_error"


def test_config_defaults():
    cfg = UserConfig()
    assert cfg.work_minutes == 480
    assert cfg.break_minutes == 45
    assert cfg.rounding_minutes == 15
    assert cfg.same_day_policy is SameDayPolicy.EARLIEST_WINS
