from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    """Loại sự kiện chấm công."""

    SIGN_IN = "sign-in"
    SIGN_OUT = "sign-out"


class VerificationMethod(str, Enum):
    """How the employee proved identity at the terminal."""

    FACE = "face"
    FINGERPRINT = "fingerprint"
    MANUAL = "manual"


class AttendanceStatus(str, Enum):
    """Trạng thái của một bản ghi đã phân loại."""

    ON_TIME = "on-time"
    LATE = "late"


class DailyStatus(str, Enum):
    """Trạng thái theo ngày. ABSENT marks a day with a sign-out but no sign-in."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"


class SessionState(str, Enum):
    """Vòng đời phiên check-in. EXPIRED is derived, never stored."""

    ACTIVE = "active"
    EXPIRED = "expired"
    DEACTIVATED = "deactivated"


class TrendGranularity(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
