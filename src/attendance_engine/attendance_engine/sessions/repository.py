from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Session


class SessionRepository(Protocol):
    """Durable session store.

    Implementations serialize ``check_valid`` and ``deactivate`` per session
    value and make ``insert_if_absent`` an atomic check-and-insert.
    """

    def insert_if_absent(self, session: Session) -> bool:
        """Store ``session``; False if the value is already taken."""

        raise NotImplementedError

    def get(self, value: str) -> Optional[Session]:
        raise NotImplementedError

    def check_valid(self, value: str, now: datetime) -> bool:
        raise NotImplementedError

    def deactivate(self, value: str) -> bool:
        """Returns True only when an active session was switched off."""

        raise NotImplementedError

    def list_active(self, now: datetime) -> Sequence[Session]:
        raise NotImplementedError

    def list_expired_active(self, now: datetime) -> Sequence[Session]:
        raise NotImplementedError
