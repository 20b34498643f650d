from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from ..attendance.model import Attendance
from ..members.model import Member
from ..sessions.model import Session

logger = logging.getLogger(__name__)


@dataclass
class MemoryStore:
    """Authoritative in-memory collections of members, sessions and attendance.

    Repositories hold a reference to one store and never keep their own copies.
    All access goes through `store_transaction` so the store is the single
    serialization point for writers.
    """

    members: list[Member] = field(default_factory=list)
    sessions: list[Session] = field(default_factory=list)
    attendance: list[Attendance] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)


@contextmanager
def store_read(store: MemoryStore) -> Iterator[MemoryStore]:
    """Lock the store for a consistent read; nothing to snapshot or restore."""

    with store.lock:
        yield store


@contextmanager
def store_transaction(store: MemoryStore) -> Iterator[MemoryStore]:
    """Run a block under the store lock; restore every collection on error.

    Entities are immutable, so a shallow copy of each list is a full snapshot.
    """

    with store.lock:
        snapshot = (list(store.members), list(store.sessions), list(store.attendance))
        try:
            yield store
        except Exception:
            store.members[:], store.sessions[:], store.attendance[:] = snapshot
            logger.debug("store transaction rolled back")
            raise


def next_id(items: Sequence, attr: str = "id") -> int:
    """Next identifier: max of existing ids plus one, or 1 when empty."""
    return max((getattr(item, attr) for item in items), default=0) + 1


def index_of(items: Sequence, ident: int) -> int:
    """Position of the item with the given id, or -1."""
    for i, item in enumerate(items):
        if item.id == ident:
            return i
    return -1
