from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Session


class SessionRepository(Protocol):
    def list_all(self) -> Sequence[Session]:
        raise NotImplementedError

    def get_by_id(self, session_id: int) -> Optional[Session]:
        raise NotImplementedError

    def create(self, *, name: Optional[str], date: datetime, created_at: datetime) -> Session:
        """Create a session; a missing name defaults to one derived from the new id."""

        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
