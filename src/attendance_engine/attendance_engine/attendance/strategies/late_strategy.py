from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import ClassificationStrategy, StatusDecision


class LateStrategy(ClassificationStrategy):
    """Late sign-in."""

    def decide(self, *, timestamp: datetime) -> StatusDecision:
        return StatusDecision(is_late=True, status=AttendanceStatus.LATE)
