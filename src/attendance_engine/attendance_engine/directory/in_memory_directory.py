from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..core.lookup import NOT_FOUND, Found, Lookup
from .model import Employee, WorkingHours, parse_work_schedule
from .repository import DirectoryProvider


class InMemoryDirectory(DirectoryProvider):
    """Directory materialized before a batch run.

    Working hours resolve from the employee first, then from the
    department defaults.
    """

    def __init__(
        self,
        employees: Iterable[Employee],
        *,
        department_hours: Optional[Mapping[str, WorkingHours]] = None,
    ):
        self._employees: dict[str, Employee] = {}
        for emp in employees:
            self._employees[str(emp.employee_id)] = emp
        self._department_hours = dict(department_hours or {})

    @classmethod
    def from_mapping(cls, departments: Mapping[str, str]) -> "InMemoryDirectory":
        return cls(Employee(employee_id=k, name=k, department=v) for k, v in departments.items())

    def get(self, employee_id: str) -> Lookup[Employee]:
        emp = self._employees.get(str(employee_id))
        return Found(emp) if emp else NOT_FOUND

    def department_for(self, employee_id: str) -> Lookup[str]:
        emp = self._employees.get(str(employee_id))
        if not emp or not emp.department or not emp.department.strip():
            return NOT_FOUND
        return Found(emp.department.strip())

    def working_hours_for(self, employee_id: str, on: date) -> Lookup[WorkingHours]:
        emp = self._employees.get(str(employee_id))
        if not emp:
            return NOT_FOUND

        if emp.working_hours:
            return Found(emp.working_hours)
        if emp.schedule is not None:
            found = parse_work_schedule(emp.schedule, on)
            if isinstance(found, Found):
                return found

        hours = self._department_hours.get(emp.department or "")
        return Found(hours) if hours else NOT_FOUND

    def departments(self) -> Sequence[str]:
        names: list[str] = []
        for emp in self._employees.values():
            dept = (emp.department or "").strip()
            if dept and dept not in names:
                names.append(dept)
        return names

    def active_count(self) -> int:
        return sum(1 for e in self._employees.values() if e.is_active)
