from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..core.constants import LATE_WHEN_HOURS_MISSING
from ..directory.model import WorkingHours
from .strategies.base import ClassificationStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy
from .strategies.sign_out_strategy import SignOutStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_sign_in(
        self,
        *,
        timestamp: datetime,
        working_hours: Optional[WorkingHours],
        grace_minutes: int,
    ) -> ClassificationStrategy:
        if working_hours is None:
            # Fail-open: incomplete directory data must not mark people late.
            return LateStrategy() if LATE_WHEN_HOURS_MISSING else OnTimeStrategy()

        scheduled_start = datetime.combine(timestamp.date(), working_hours.start)
        if timestamp.tzinfo is not None:
            scheduled_start = scheduled_start.replace(tzinfo=timestamp.tzinfo)

        if timestamp <= scheduled_start + timedelta(minutes=grace_minutes):
            return OnTimeStrategy()
        return LateStrategy()

    def for_sign_out(self) -> ClassificationStrategy:
        return SignOutStrategy()
