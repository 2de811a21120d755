"""Event classification: lateness stamping and duration arithmetic.

Everything here is a pure function of its inputs. The clock is only read by
``build_event`` and only when the caller does not supply a timestamp.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_coordinate, require_non_empty
from ..core.constants import DEFAULT_LATE_GRACE_MINUTES
from ..core.enums import EventType, VerificationMethod
from ..core.exceptions import InvalidEvent
from ..core.lookup import Found, Lookup
from ..directory.model import WorkingHours
from .factory import ClassificationStrategyFactory
from .model import AttendanceEvent, BatchResult, ClassifiedRecord, Location, SkippedRecord

logger = logging.getLogger(__name__)

HoursLookup = Callable[[AttendanceEvent], "Lookup[WorkingHours]"]


def compute_duration(sign_in: datetime, sign_out: datetime) -> int:
    """Whole minutes between sign-in and sign-out.

    Zero and negative values (out-of-order clocks) are returned as is.
    """
    return int(round((sign_out - sign_in).total_seconds() / 60))


def _require_timestamp(event: AttendanceEvent) -> None:
    if not isinstance(event.timestamp, datetime):
        raise InvalidEvent("Event timestamp is missing")


def _coerce_type(value) -> EventType:
    try:
        return EventType(value)
    except ValueError:
        raise InvalidEvent(f"Unknown event type: {value!r}") from None


def _coerce_method(value) -> VerificationMethod:
    if value is None:
        return VerificationMethod.MANUAL
    try:
        return VerificationMethod(value)
    except ValueError:
        raise InvalidEvent(f"Unknown verification method: {value!r}") from None


def build_event(
    *,
    employee_id: str,
    organization_id: str,
    type: str,
    timestamp: Optional[datetime] = None,
    location: Optional[tuple[float, float]] = None,
    verification_method: Optional[str] = None,
    notes: str = "",
    session_id: Optional[str] = None,
    ip_address: Optional[str] = None,
    clock: Callable[[], datetime] = now_local,
) -> AttendanceEvent:
    """Create an AttendanceEvent, stamping ``clock()`` when no timestamp is given."""
    loc = None
    if location is not None:
        lat, lon = location
        loc = Location(
            latitude=require_coordinate(lat, "latitude", 90),
            longitude=require_coordinate(lon, "longitude", 180),
        )

    return AttendanceEvent(
        employee_id=require_non_empty(employee_id, "employee_id"),
        organization_id=require_non_empty(organization_id, "organization_id"),
        type=_coerce_type(type),
        timestamp=timestamp if timestamp is not None else clock(),
        location=loc,
        verification_method=_coerce_method(verification_method),
        notes=notes or "",
        session_id=session_id or None,
        ip_address=ip_address,
    )


class EventClassifier:
    def __init__(
        self,
        *,
        grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
        strategy_factory: Optional[ClassificationStrategyFactory] = None,
    ):
        self._grace_minutes = int(grace_minutes)
        self._factory = strategy_factory or ClassificationStrategyFactory()

    @property
    def grace_minutes(self) -> int:
        return self._grace_minutes

    def classify(self, event: AttendanceEvent, working_hours: Optional[WorkingHours]) -> ClassifiedRecord:
        _require_timestamp(event)
        event_type = _coerce_type(event.type)

        if event_type == EventType.SIGN_IN:
            strategy = self._factory.for_sign_in(
                timestamp=event.timestamp,
                working_hours=working_hours,
                grace_minutes=self._grace_minutes,
            )
        else:
            strategy = self._factory.for_sign_out()
        decision = strategy.decide(timestamp=event.timestamp)

        if decision.is_late:
            logger.debug("Late sign-in: employee=%s at %s", event.employee_id, event.timestamp)

        return ClassifiedRecord(
            employee_id=event.employee_id,
            organization_id=event.organization_id,
            type=event_type,
            timestamp=event.timestamp,
            is_late=decision.is_late,
            status=decision.status,
            location=event.location,
            verification_method=event.verification_method,
            notes=event.notes,
            session_id=event.session_id,
            ip_address=event.ip_address,
        )

    def classify_batch(
        self,
        events: Iterable[AttendanceEvent],
        hours_lookup: HoursLookup,
    ) -> BatchResult[list[ClassifiedRecord]]:
        """Classify every event; malformed ones are reported, not raised."""
        records: list[ClassifiedRecord] = []
        skipped: list[SkippedRecord] = []

        for index, event in enumerate(events):
            try:
                _require_timestamp(event)
                hours = hours_lookup(event)
                working_hours = hours.value if isinstance(hours, Found) else None
                records.append(self.classify(event, working_hours))
            except InvalidEvent as exc:
                logger.warning("Skipping event #%d: %s", index, exc)
                skipped.append(SkippedRecord(index=index, item=event, reason=str(exc)))

        return BatchResult(value=records, skipped=skipped)
