from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.memory_store import MemoryStore, next_id, store_read, store_transaction
from .model import Attendance
from .repository import AttendanceRepository


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Attendance]:
        with store_read(self._store) as s:
            return list(s.attendance)

    def list_for_member(self, member_id: int) -> Sequence[Attendance]:
        with store_read(self._store) as s:
            return [a for a in s.attendance if a.member_id == member_id]

    def get_for_member_and_session(self, member_id: int, session_id: int) -> Optional[Attendance]:
        with store_read(self._store) as s:
            for a in s.attendance:
                if a.member_id == member_id and a.session_id == session_id:
                    return a
            return None

    def upsert(
        self,
        *,
        member_id: int,
        session_id: int,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> Attendance:
        with store_transaction(self._store) as s:
            for i, a in enumerate(s.attendance):
                if a.member_id == member_id and a.session_id == session_id:
                    # Same id and position; a re-mark without notes keeps the old ones.
                    updated = replace(a, status=status, notes=notes if notes is not None else a.notes)
                    s.attendance[i] = updated
                    return updated

            record = Attendance(
                id=next_id(s.attendance),
                member_id=member_id,
                session_id=session_id,
                status=status,
                notes=notes,
            )
            s.attendance.append(record)
            return record

    def delete_for_member(self, member_id: int) -> int:
        with store_transaction(self._store) as s:
            before = len(s.attendance)
            s.attendance[:] = [a for a in s.attendance if a.member_id != member_id]
            return before - len(s.attendance)

    def delete_unless_member(self, member_ids: set[int]) -> int:
        with store_transaction(self._store) as s:
            before = len(s.attendance)
            s.attendance[:] = [a for a in s.attendance if a.member_id in member_ids]
            return before - len(s.attendance)
