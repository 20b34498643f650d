from __future__ import annotations

from datetime import datetime
from functools import partial

import pytest

from workshop_attendance.attendance.memory_attendance_repository import MemoryAttendanceRepository
from workshop_attendance.attendance.service import AttendanceService
from workshop_attendance.database.memory_store import MemoryStore, store_read, store_transaction
from workshop_attendance.members.memory_member_repository import MemoryMemberRepository
from workshop_attendance.members.service import MemberService
from workshop_attendance.reports.service import StatisticsService
from workshop_attendance.sessions.memory_session_repository import MemorySessionRepository
from workshop_attendance.sessions.service import SessionService


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 4, 18, 0, 0)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def repos(store):
    return (
        MemoryMemberRepository(store),
        MemorySessionRepository(store),
        MemoryAttendanceRepository(store),
    )


@pytest.fixture
def member_service(store, repos) -> MemberService:
    members, _, attendance = repos
    return MemberService(members, attendance, unit_of_work=partial(store_transaction, store))


@pytest.fixture
def session_service(repos) -> SessionService:
    return SessionService(repos[1])


@pytest.fixture
def attendance_service(store, repos) -> AttendanceService:
    members, sessions, attendance = repos
    return AttendanceService(attendance, members, sessions, unit_of_work=partial(store_transaction, store))


@pytest.fixture
def statistics_service(store, repos) -> StatisticsService:
    members, sessions, attendance = repos
    return StatisticsService(members, sessions, attendance, unit_of_work=partial(store_read, store))
