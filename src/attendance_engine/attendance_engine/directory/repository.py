from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.lookup import Lookup
from .model import WorkingHours


class DirectoryProvider(Protocol):
    """Read-only view of the organization directory."""

    def department_for(self, employee_id: str) -> Lookup[str]:
        raise NotImplementedError

    def working_hours_for(self, employee_id: str, on: date) -> Lookup[WorkingHours]:
        raise NotImplementedError

    def departments(self) -> Sequence[str]:
        """Department names in the directory's natural enumeration order."""

        raise NotImplementedError
