from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import (
    DEFAULT_SESSION_HOURS,
    DEFAULT_SESSION_LOCATION,
    SESSION_CREATE_RETRIES,
    SESSION_VALUE_BYTES,
)
from ..core.enums import SessionState
from ..core.exceptions import DuplicateSession
from ..core.lookup import NOT_FOUND, Found, Lookup
from .model import Session, session_state
from .repository import SessionRepository

logger = logging.getLogger(__name__)


def generate_session_value() -> str:
    return secrets.token_hex(SESSION_VALUE_BYTES)


class SessionManager:
    """Issues, validates and revokes time-boxed check-in sessions.

    Expiry is never written back: a session past ``expires_at`` simply stops
    validating. ``validate`` and ``deactivate`` never reveal whether a value
    ever existed.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        value_factory: Callable[[], str] = generate_session_value,
        max_retries: int = SESSION_CREATE_RETRIES,
        default_hours: float = DEFAULT_SESSION_HOURS,
        default_location: str = DEFAULT_SESSION_LOCATION,
    ):
        self._sessions = sessions
        self._clock = clock
        self._value_factory = value_factory
        self._max_retries = int(max_retries)
        self._default_hours = default_hours
        self._default_location = default_location

    def create(
        self,
        location: Optional[str] = None,
        duration_hours: Optional[float] = None,
        *,
        created_by: Optional[str] = None,
    ) -> Session:
        hours = self._default_hours if duration_hours is None else duration_hours
        if hours <= 0:
            raise ValueError("duration_hours must be positive")

        now = self._clock()
        location = (location or "").strip() or self._default_location

        for attempt in range(1, self._max_retries + 1):
            session = Session(
                value=self._value_factory(),
                location=location,
                created_at=now,
                expires_at=now + timedelta(hours=hours),
                is_active=True,
                created_by=created_by,
            )
            if self._sessions.insert_if_absent(session):
                logger.info("Created check-in session for %s (expires %s)", location, session.expires_at)
                return session
            logger.warning("Session value collision (attempt %d/%d)", attempt, self._max_retries)

        raise DuplicateSession(f"Could not allocate a unique session value after {self._max_retries} attempts")

    def validate(self, value: Optional[str]) -> bool:
        if not value:
            return False
        return self._sessions.check_valid(value, self._clock())

    def deactivate(self, value: Optional[str]) -> None:
        if not value:
            return
        if self._sessions.deactivate(value):
            logger.info("Deactivated check-in session %s...", value[:8])

    def state(self, value: str) -> Lookup[SessionState]:
        session = self._sessions.get(value)
        if session is None:
            return NOT_FOUND
        return Found(session_state(is_active=session.is_active, expires_at=session.expires_at, now=self._clock()))

    def list_active(self) -> Sequence[Session]:
        return self._sessions.list_active(self._clock())

    def sweep_expired(self) -> int:
        """Deactivate sessions already past expiry. Optional housekeeping."""
        count = 0
        for session in self._sessions.list_expired_active(self._clock()):
            if self._sessions.deactivate(session.value):
                count += 1
        if count:
            logger.info("Swept %d expired check-in sessions", count)
        return count
