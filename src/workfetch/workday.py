"""
WorkDay: one invocation's worth of work-time status.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from workfetch.clock import Clock, SystemClock
from workfetch.errors import StateError
from workfetch.models import ScheduleResult, UserConfig
from workfetch.resolver import SessionStartResolver, StartSource
from workfetch.schedule import ScheduleCalculator
from workfetch.storage import SessionStore, StoragePaths, load_or_create_config, resolve_paths

log = logging.getLogger(__name__)


class WorkDayStatus(BaseModel):
    source: StartSource
    schedule: ScheduleResult
    config: UserConfig
    persisted: bool
    state_path: Path
    config_path: Path


class WorkDay:
    """Loads config and state, resolves today's start and computes the schedule."""

    def __init__(
        self,
        paths: Optional[StoragePaths] = None,
        clock: Optional[Clock] = None,
        config: Optional[UserConfig] = None,
        store: Optional[SessionStore] = None,
    ):
        self.paths = paths or resolve_paths()
        self.clock = clock or SystemClock()
        self._config = config
        self.store = store or SessionStore(self.paths.state)

    @property
    def config(self) -> UserConfig:
        if self._config is None:
            self._config = load_or_create_config(self.paths.config)
        return self._config

    def status(self) -> WorkDayStatus:
        config = self.config
        now = self.clock.now()
        boot_time = self.clock.boot_time()

        resolution = SessionStartResolver(config.same_day_policy).resolve(
            now.date(), boot_time, self.store.load()
        )

        persisted = True
        if resolution.write_required:
            try:
                self.store.save(resolution.record)
            except StateError as e:
                # This run's start is still valid; only continuity with the next run is at risk.
                log.warning("%s", e)
                persisted = False

        schedule = ScheduleCalculator(config.rounding_minutes).compute(
            resolution.effective_start, config.work_minutes, config.break_minutes, now
        )
        return WorkDayStatus(
            source=resolution.source,
            schedule=schedule,
            config=config,
            persisted=persisted,
            state_path=self.paths.state,
            config_path=self.paths.config,
        )

    def reset(self) -> bool:
        """Forget the stored session so the next run starts from boot time."""
        return self.store.clear()
