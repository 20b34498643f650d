from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import Attendance


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_for_member(self, member_id: int) -> Sequence[Attendance]:
        raise NotImplementedError

    def get_for_member_and_session(self, member_id: int, session_id: int) -> Optional[Attendance]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        member_id: int,
        session_id: int,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> Attendance:
        """Insert, or update in place when the pair already has a record."""

        raise NotImplementedError

    def delete_for_member(self, member_id: int) -> int:
        raise NotImplementedError

    def delete_unless_member(self, member_ids: set[int]) -> int:
        """Drop records whose member is not in `member_ids`."""

        raise NotImplementedError
