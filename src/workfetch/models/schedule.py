"""
Derived schedule values. Recomputed on every run, never persisted.
"""

from datetime import datetime

from pydantic import BaseModel, computed_field


class ScheduleResult(BaseModel):
    effective_start: datetime
    rounded_start: datetime
    work_minutes: int
    break_minutes: int
    target_total_minutes: int
    end_of_day: datetime
    remaining_minutes: int  # negative once the target is exceeded

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_done(self) -> bool:
        return self.remaining_minutes <= 0
