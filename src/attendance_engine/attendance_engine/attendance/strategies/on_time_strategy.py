from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import ClassificationStrategy, StatusDecision


class OnTimeStrategy(ClassificationStrategy):
    """Sign-in at or before the grace threshold, or no schedule known."""

    def decide(self, *, timestamp: datetime) -> StatusDecision:
        return StatusDecision(is_late=False, status=AttendanceStatus.ON_TIME)
