from workfetch.models.config import SameDayPolicy, UserConfig
from workfetch.models.schedule import ScheduleResult
from workfetch.models.session import SessionRecord

__all__ = ["SameDayPolicy", "UserConfig", "ScheduleResult", "SessionRecord"]
