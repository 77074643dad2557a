"""
User configuration model.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_WORK_MINUTES = 480
DEFAULT_BREAK_MINUTES = 45
DEFAULT_ROUNDING_MINUTES = 15


class SameDayPolicy(str, Enum):
    """How a same-day rerun treats the recorded start versus the current boot time."""

    EARLIEST_WINS = "earliest"
    KEEP_RECORDED = "recorded"


class UserConfig(BaseModel):
    """Planned durations for the day, in minutes.

    Durations are deliberately not range-checked: zero or negative values flow
    straight into the schedule arithmetic.
    """

    model_config = ConfigDict(extra="ignore")

    work_minutes: int = DEFAULT_WORK_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES
    rounding_minutes: int = DEFAULT_ROUNDING_MINUTES
    same_day_policy: SameDayPolicy = SameDayPolicy.EARLIEST_WINS

    @field_validator("rounding_minutes")
    @classmethod
    def _check_rounding(cls, value: int) -> int:
        if value <= 0 or 60 % value != 0:
            raise ValueError("rounding_minutes must be a positive divisor of 60")
        return value
