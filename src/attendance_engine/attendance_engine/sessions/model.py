from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import SessionState


@dataclass(frozen=True)
class Session:
    """Phiên check-in (QR) có thời hạn."""

    value: str
    location: str
    created_at: datetime
    expires_at: datetime
    is_active: bool = True
    created_by: Optional[str] = None


def session_state(*, is_active: bool, expires_at: datetime, now: datetime) -> SessionState:
    """Pure expiry predicate; callers evaluate it under the store's key lock."""
    if not is_active:
        return SessionState.DEACTIVATED
    if now >= expires_at:
        return SessionState.EXPIRED
    return SessionState.ACTIVE


def is_valid(session: Optional[Session], now: datetime) -> bool:
    if session is None:
        return False
    return session_state(is_active=session.is_active, expires_at=session.expires_at, now=now) == SessionState.ACTIVE
