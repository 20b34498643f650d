from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext
from typing import Callable, Optional, Sequence

from ..common.validators import optional_text, require_enum, require_positive_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..members.repository import MemberRepository
from ..sessions.repository import SessionRepository
from .model import Attendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark members present/absent per session.

    A (member, session) cell moves Unmarked -> Present|Absent and then flips
    between Present and Absent. There is no way back to Unmarked.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        sessions: SessionRepository,
        *,
        unit_of_work: Optional[Callable[[], AbstractContextManager]] = None,
    ):
        self._attendance = attendance
        self._members = members
        self._sessions = sessions
        self._unit_of_work = unit_of_work or nullcontext

    def mark_attendance(
        self,
        member_id: int,
        session_id: int,
        status: AttendanceStatus | str,
        *,
        notes: Optional[str] = None,
    ) -> Attendance:
        member_id = require_positive_id(member_id, "memberId")
        session_id = require_positive_id(session_id, "sessionId")
        status = require_enum(status, AttendanceStatus, "status")

        # Existence checks and the upsert must see the same snapshot.
        with self._unit_of_work():
            if not self._members.get_by_id(member_id):
                raise ValidationError(f"Member {member_id} does not exist")
            if not self._sessions.get_by_id(session_id):
                raise ValidationError(f"Session {session_id} does not exist")

            record = self._attendance.upsert(
                member_id=member_id,
                session_id=session_id,
                status=status,
                notes=optional_text(notes),
            )

        logger.info("member %s marked %s for session %s", member_id, status.value, session_id)
        return record

    def get_status(self, member_id: int, session_id: int) -> Optional[AttendanceStatus]:
        """Status of the pair, or None when it was never marked (not the same as ABSENT)."""
        record = self._attendance.get_for_member_and_session(int(member_id), int(session_id))
        return record.status if record else None

    def list_for_member(self, member_id: int) -> Sequence[Attendance]:
        if not self._members.get_by_id(int(member_id)):
            raise NotFoundError(f"Member {member_id} does not exist")
        return self._attendance.list_for_member(int(member_id))

    def list_all(self) -> Sequence[Attendance]:
        return self._attendance.list_all()
