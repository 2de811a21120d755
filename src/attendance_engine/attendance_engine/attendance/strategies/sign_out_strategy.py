from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import ClassificationStrategy, StatusDecision


class SignOutStrategy(ClassificationStrategy):
    """Sign-outs are never late."""

    def decide(self, *, timestamp: datetime) -> StatusDecision:
        return StatusDecision(is_late=False, status=AttendanceStatus.ON_TIME)
