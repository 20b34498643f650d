from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Session:
    """One attendance-taking occasion."""

    id: int
    name: str
    date: datetime
    created_at: datetime


def session_to_json(session: Session) -> dict[str, Any]:
    return {
        "id": session.id,
        "name": session.name,
        "date": session.date.isoformat(),
        "createdAt": session.created_at.isoformat(),
    }
