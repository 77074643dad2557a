"""
Persisted session record.
"""

import datetime as dt
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, model_validator


class SessionRecord(BaseModel):
    """The single record kept on disk: which day it belongs to and when work began."""

    model_config = ConfigDict(extra="ignore")

    date: dt.date
    start_time: AwareDatetime

    @model_validator(mode="before")
    @classmethod
    def _derive_date(cls, data: Any) -> Any:
        # Older files only carried start_time.
        if isinstance(data, dict) and "date" not in data and "start_time" in data:
            start = data["start_time"]
            if isinstance(start, str):
                try:
                    start = dt.datetime.fromisoformat(start)
                except ValueError:
                    return data
            if isinstance(start, dt.datetime):
                return {**data, "date": start.date()}
        return data
