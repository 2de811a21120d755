from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import date, time
from typing import Any, Optional

from ..common.datetime_utils import parse_hhmm
from ..core.constants import DEFAULT_WORK_START
from ..core.lookup import NOT_FOUND, Found, Lookup

logger = logging.getLogger(__name__)

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_START_RE = re.compile(r"""start["']?\s*:\s*["']?(\d{1,2}:\d{2})["']?""")


@dataclass(frozen=True)
class WorkingHours:
    """Giờ làm việc (organization-local wall clock)."""

    start: time
    end: Optional[time] = None

    @classmethod
    def from_strings(cls, start: str, end: Optional[str] = None) -> "WorkingHours":
        return cls(start=parse_hhmm(start), end=parse_hhmm(end) if end else None)


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên, as materialized from the directory."""

    employee_id: str
    name: str
    department: Optional[str] = None
    working_hours: Optional[WorkingHours] = None
    schedule: Any = None
    is_active: bool = True


def _start_from_mapping(schedule: dict, on: date) -> Optional[str]:
    day = schedule.get(_WEEKDAYS[on.weekday()])
    if isinstance(day, dict) and day.get("start"):
        return day["start"]

    hours = schedule.get("hours")
    if schedule.get("days") and isinstance(hours, dict) and hours.get("start"):
        return hours["start"]

    return schedule.get("start") or None


def parse_work_schedule(schedule: Any, on: date) -> Lookup[WorkingHours]:
    """Resolve the working hours that apply on ``on`` from a stored schedule.

    Accepted shapes (dicts or their JSON text):
    - per weekday: ``{"monday": {"start": "09:00", "end": "17:00"}, ...}``
    - ``{"days": ["monday", ...], "hours": {"start": "09:00"}}``
    - ``{"start": "09:00", "end": "17:00"}``

    Text that is not valid JSON is scanned for a ``start: HH:MM`` fragment.
    Only a missing schedule is NOT_FOUND (never late); a schedule that is
    present but has no usable start time falls back to 09:00.
    """
    if schedule is None or schedule == "":
        return NOT_FOUND
    if isinstance(schedule, WorkingHours):
        return Found(schedule)

    start: Optional[str] = None
    end: Optional[str] = None
    if isinstance(schedule, str):
        try:
            schedule = json.loads(schedule)
        except ValueError:
            match = _START_RE.search(schedule)
            if match:
                start = match.group(1)

    if start is None and isinstance(schedule, dict):
        start = _start_from_mapping(schedule, on)
        day = schedule.get(_WEEKDAYS[on.weekday()])
        if isinstance(day, dict):
            end = day.get("end")
        elif isinstance(schedule.get("hours"), dict):
            end = schedule["hours"].get("end")
        else:
            end = schedule.get("end")

    try:
        start_time = parse_hhmm(start) if start else None
    except (TypeError, ValueError):
        start_time = None
    if start_time is None:
        logger.warning("No usable start time in work schedule %r, using %s", schedule, DEFAULT_WORK_START)
        start_time = parse_hhmm(DEFAULT_WORK_START)

    try:
        end_time = parse_hhmm(end) if end else None
    except (TypeError, ValueError):
        end_time = None

    return Found(WorkingHours(start=start_time, end=end_time))
