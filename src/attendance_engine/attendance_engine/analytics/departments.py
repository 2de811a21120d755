from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Union

from ..attendance.model import BatchResult, ClassifiedRecord
from ..common.datetime_utils import format_minutes_of_day
from ..core.constants import UNKNOWN_DEPARTMENT
from ..core.enums import EventType
from ..core.lookup import Found
from ..directory.repository import DirectoryProvider
from ._records import timestamped

EmployeeDirectory = Union[DirectoryProvider, Mapping[str, str]]


def _rate(part: int, total: int) -> float:
    return part / total * 100 if total > 0 else 0.0


@dataclass
class DepartmentStat:
    department: str
    total_days: int = 0
    present_days: int = 0
    late_days: int = 0
    minute_total: int = 0

    @property
    def attendance_rate(self) -> float:
        return _rate(self.present_days, self.total_days)

    @property
    def late_arrival_rate(self) -> float:
        return _rate(self.late_days, self.total_days)

    @property
    def punctuality_rate(self) -> float:
        return _rate(self.present_days - self.late_days, self.present_days)

    @property
    def average_arrival_time(self) -> str:
        if self.total_days == 0:
            return "00:00"
        return format_minutes_of_day(self.minute_total / self.total_days)


def _department_name(value) -> str:
    # Mapping values may be ids or other non-str labels
    return "" if value is None else str(value).strip()


def _resolver(directory: EmployeeDirectory):
    if isinstance(directory, Mapping):
        def resolve(employee_id: str) -> str:
            dept = directory.get(employee_id)
            if dept is None:
                dept = directory.get(str(employee_id))
            return _department_name(dept) or UNKNOWN_DEPARTMENT

        known = [_department_name(d) for d in directory.values()]
        return resolve, [d for d in known if d]

    def resolve(employee_id: str) -> str:
        found = directory.department_for(employee_id)
        return found.value if isinstance(found, Found) else UNKNOWN_DEPARTMENT

    return resolve, list(directory.departments())


def analyze_departments(
    records: Iterable[ClassifiedRecord],
    employee_directory: EmployeeDirectory,
) -> BatchResult[list[DepartmentStat]]:
    """Per-department sign-in statistics.

    Employees missing from the directory count toward "Unknown". Output
    follows the directory's department order, then departments first seen
    in the records; departments without sign-ins are omitted.
    """
    resolve, known = _resolver(employee_directory)

    stats: dict[str, DepartmentStat] = {}
    for name in known:
        stats.setdefault(name, DepartmentStat(department=name))

    good, skipped = timestamped(records)
    for record, ts in good:
        if record.type != EventType.SIGN_IN:
            continue
        dept = resolve(record.employee_id)
        stat = stats.setdefault(dept, DepartmentStat(department=dept))
        stat.total_days += 1
        stat.present_days += 1
        stat.late_days += 1 if record.is_late else 0
        stat.minute_total += ts.hour * 60 + ts.minute

    return BatchResult(value=[s for s in stats.values() if s.total_days > 0], skipped=skipped)
