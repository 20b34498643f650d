from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import DEFAULT_SESSION_NAME
from ..database.memory_store import MemoryStore, index_of, next_id, store_read, store_transaction
from .model import Session
from .repository import SessionRepository


class MemorySessionRepository(SessionRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Session]:
        with store_read(self._store) as s:
            return list(s.sessions)

    def get_by_id(self, session_id: int) -> Optional[Session]:
        with store_read(self._store) as s:
            i = index_of(s.sessions, session_id)
            return s.sessions[i] if i >= 0 else None

    def create(self, *, name: Optional[str], date: datetime, created_at: datetime) -> Session:
        with store_transaction(self._store) as s:
            session_id = next_id(s.sessions)
            session = Session(
                id=session_id,
                name=name or DEFAULT_SESSION_NAME.format(id=session_id),
                date=date,
                created_at=created_at,
            )
            s.sessions.append(session)
            return session

    def count(self) -> int:
        with store_read(self._store) as s:
            return len(s.sessions)
