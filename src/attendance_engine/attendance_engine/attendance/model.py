from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from ..core.enums import AttendanceStatus, EventType, VerificationMethod

T = TypeVar("T")


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class AttendanceEvent:
    """Thực thể miền (domain): Sự kiện chấm công thô (sign-in / sign-out)."""

    employee_id: str
    organization_id: str
    type: EventType
    timestamp: datetime
    location: Optional[Location] = None
    verification_method: VerificationMethod = VerificationMethod.MANUAL
    notes: str = ""
    session_id: Optional[str] = None
    ip_address: Optional[str] = None


@dataclass(frozen=True)
class ClassifiedRecord:
    """Bản ghi chấm công đã phân loại. Lateness is fixed at creation."""

    employee_id: str
    organization_id: str
    type: EventType
    timestamp: datetime
    is_late: bool
    status: AttendanceStatus
    location: Optional[Location] = None
    verification_method: VerificationMethod = VerificationMethod.MANUAL
    notes: str = ""
    session_id: Optional[str] = None
    ip_address: Optional[str] = None

    @property
    def is_sign_in(self) -> bool:
        return self.type == EventType.SIGN_IN


@dataclass(frozen=True)
class SkippedRecord:
    """Diagnostic for a record left out of a batch."""

    index: int
    item: Any
    reason: str


@dataclass(frozen=True)
class BatchResult(Generic[T]):
    value: T
    skipped: list[SkippedRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped
