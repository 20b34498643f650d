from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_datetime
from ..common.validators import optional_text
from ..core.exceptions import NotFoundError, ValidationError
from .model import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    """Use case: open attendance sessions. Sessions are never edited or removed."""

    def __init__(self, sessions: SessionRepository):
        self._sessions = sessions

    def add_session(self, data: Optional[dict[str, Any]] = None, *, now: Optional[datetime] = None) -> Session:
        data = data or {}
        now = now or now_local()

        when = data.get("date")
        if when is None or when == "":
            when = now
        elif not isinstance(when, datetime):
            try:
                when = parse_iso_datetime(str(when))
            except ValueError:
                raise ValidationError("date is not a valid ISO timestamp") from None

        session = self._sessions.create(name=optional_text(data.get("name")), date=when, created_at=now)
        logger.info("session %s created (%s)", session.id, session.name)
        return session

    def list_sessions(self) -> Sequence[Session]:
        return self._sessions.list_all()

    def get_session(self, session_id: int) -> Session:
        session = self._sessions.get_by_id(int(session_id))
        if not session:
            raise NotFoundError(f"Session {session_id} does not exist")
        return session
