from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    is_late: bool
    status: AttendanceStatus


class ClassificationStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an event's status."""

    @abstractmethod
    def decide(self, *, timestamp: datetime) -> StatusDecision:
        raise NotImplementedError
