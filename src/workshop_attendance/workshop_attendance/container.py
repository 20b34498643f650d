from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any

from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT_SECONDS
from .database.memory_store import MemoryStore, store_read, store_transaction
from .members.memory_member_repository import MemoryMemberRepository
from .members.service import MemberService
from .remote.client import MemberApiClient
from .reports.service import StatisticsService
from .seed.mock_data import get_mock_members
from .sessions.memory_session_repository import MemorySessionRepository
from .sessions.service import SessionService


@dataclass(frozen=True)
class Container:
    store: MemoryStore

    members_repo: MemoryMemberRepository
    sessions_repo: MemorySessionRepository
    attendance_repo: MemoryAttendanceRepository

    api_client: MemberApiClient

    member_service: MemberService
    session_service: SessionService
    attendance_service: AttendanceService
    statistics_service: StatisticsService

    use_remote_source: bool = False


def build_container(*, settings: dict[str, Any], store: MemoryStore | None = None) -> Container:
    store = store or MemoryStore()
    if settings.get("SEED_MOCK_DATA", False) and not store.members:
        store.members.extend(get_mock_members())

    unit_of_work = partial(store_transaction, store)

    members_repo = MemoryMemberRepository(store)
    sessions_repo = MemorySessionRepository(store)
    attendance_repo = MemoryAttendanceRepository(store)

    api_client = MemberApiClient(
        str(settings.get("API_BASE_URL") or DEFAULT_API_BASE_URL),
        timeout=float(settings.get("API_TIMEOUT_SECONDS", DEFAULT_API_TIMEOUT_SECONDS)),
    )

    member_service = MemberService(members_repo, attendance_repo, unit_of_work=unit_of_work)
    session_service = SessionService(sessions_repo)
    attendance_service = AttendanceService(attendance_repo, members_repo, sessions_repo, unit_of_work=unit_of_work)
    statistics_service = StatisticsService(
        members_repo, sessions_repo, attendance_repo, unit_of_work=partial(store_read, store)
    )

    return Container(
        store=store,
        members_repo=members_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        api_client=api_client,
        member_service=member_service,
        session_service=session_service,
        attendance_service=attendance_service,
        statistics_service=statistics_service,
        use_remote_source=bool(settings.get("USE_REMOTE_SOURCE", False)),
    )
