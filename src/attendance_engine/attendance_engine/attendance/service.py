from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..core.exceptions import InvalidEvent, SessionRejected
from ..core.lookup import Found
from ..directory.repository import DirectoryProvider
from ..sessions.service import SessionManager
from .classifier import EventClassifier
from .model import AttendanceEvent, BatchResult, ClassifiedRecord, SkippedRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Intake pipeline: session gate -> working hours -> classify -> store."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        directory: DirectoryProvider,
        sessions: SessionManager,
        *,
        classifier: Optional[EventClassifier] = None,
    ):
        self._attendance = attendance
        self._directory = directory
        self._sessions = sessions
        self._classifier = classifier or EventClassifier()

    def classify(self, event: AttendanceEvent) -> ClassifiedRecord:
        """Gate and classify without storing."""
        if event.session_id is not None and not self._sessions.validate(event.session_id):
            raise SessionRejected("Invalid or expired check-in session")

        if not isinstance(event.timestamp, datetime):
            raise InvalidEvent("Event timestamp is missing")

        hours = self._directory.working_hours_for(event.employee_id, event.timestamp.date())
        working_hours = hours.value if isinstance(hours, Found) else None
        return self._classifier.classify(event, working_hours)

    def record(self, event: AttendanceEvent) -> ClassifiedRecord:
        record = self.classify(event)
        self._attendance.add(record)
        logger.info(
            "Recorded %s for employee %s (%s)",
            record.type.value,
            record.employee_id,
            record.status.value,
        )
        return record

    def record_batch(self, events: Iterable[AttendanceEvent]) -> BatchResult[list[ClassifiedRecord]]:
        """Record every acceptable event; rejected ones come back as diagnostics."""
        stored: list[ClassifiedRecord] = []
        skipped: list[SkippedRecord] = []

        for index, event in enumerate(events):
            try:
                stored.append(self.record(event))
            except InvalidEvent as exc:
                logger.warning("Rejected event #%d: %s", index, exc)
                skipped.append(SkippedRecord(index=index, item=event, reason=str(exc)))

        return BatchResult(value=stored, skipped=skipped)
