from __future__ import annotations

import pytest

from workshop_attendance.attendance.model import Attendance
from workshop_attendance.core.enums import AttendanceStatus, Rating
from workshop_attendance.core.exceptions import ConsistencyError, NotFoundError
from workshop_attendance.reports.filters import ViewContext
from workshop_attendance.reports.model import MemberStats
from workshop_attendance.reports.service import percentage, rating_for


@pytest.fixture
def workshop(member_service, session_service):
    omar = member_service.add_member({"name": "Omar Ali", "category": "game"})
    noor = member_service.add_member({"name": "Noor Samir", "category": "graphics"})
    sessions = [session_service.add_session({"name": f"S{i}"}) for i in range(1, 4)]
    return omar, noor, sessions


def test_member_stats_scenario(attendance_service, statistics_service, workshop):
    omar, _, sessions = workshop
    attendance_service.mark_attendance(omar.id, sessions[0].id, "present")
    attendance_service.mark_attendance(omar.id, sessions[1].id, "absent")

    assert statistics_service.member_stats(omar.id) == MemberStats(present=1, absent=1, not_marked=1)
    assert statistics_service.attendance_percentage(omar.id) == 50


def test_stats_always_sum_to_session_count(attendance_service, session_service, statistics_service, workshop):
    omar, noor, sessions = workshop
    attendance_service.mark_attendance(omar.id, sessions[2].id, "present")
    session_service.add_session()

    for member in (omar, noor):
        stats = statistics_service.member_stats(member.id)
        assert stats.present + stats.absent + stats.not_marked == 4


def test_percentage_is_zero_without_marks(statistics_service, workshop):
    _, noor, _ = workshop

    assert statistics_service.attendance_percentage(noor.id) == 0


@pytest.mark.parametrize(
    "present, total, expected",
    [(0, 0, 0), (1, 2, 50), (1, 3, 33), (2, 3, 67), (1, 8, 13), (5, 5, 100), (0, 4, 0)],
)
def test_percentage_rounds_half_up(present, total, expected):
    assert percentage(present, total) == expected


@pytest.mark.parametrize("percent, rating", [(100, Rating.GOOD), (80, Rating.GOOD), (79, Rating.WARNING), (60, Rating.WARNING), (59, Rating.POOR), (0, Rating.POOR)])
def test_rating_bands(percent, rating):
    assert rating_for(percent) == rating


def test_duplicate_records_are_reported_not_clamped(store, statistics_service, workshop):
    omar, _, _ = workshop
    store.attendance.extend(
        Attendance(id=i, member_id=omar.id, session_id=1, status=AttendanceStatus.PRESENT) for i in range(1, 5)
    )

    with pytest.raises(ConsistencyError):
        statistics_service.member_stats(omar.id)


def test_stats_for_unknown_member(statistics_service):
    with pytest.raises(NotFoundError):
        statistics_service.member_stats(12)


def test_global_totals_ignore_view_filter(attendance_service, statistics_service, workshop):
    omar, noor, sessions = workshop
    attendance_service.mark_attendance(omar.id, sessions[0].id, "present")
    attendance_service.mark_attendance(noor.id, sessions[0].id, "absent")
    attendance_service.mark_attendance(noor.id, sessions[1].id, "present")

    report = statistics_service.build_report(ViewContext(category="game"))

    assert [row.member.id for row in report.rows] == [omar.id]
    assert report.totals.total_present == 2
    assert report.totals.total_absent == 1
    assert report.totals.member_count == 2
    assert report.totals.session_count == 3
    assert report.totals == statistics_service.global_totals()


def test_report_rows_carry_session_cells(attendance_service, statistics_service, workshop):
    omar, noor, sessions = workshop
    attendance_service.mark_attendance(omar.id, sessions[0].id, "present")
    attendance_service.mark_attendance(omar.id, sessions[2].id, "absent")

    report = statistics_service.build_report()

    first = report.rows[0]
    assert first.position == 1
    assert [c.status for c in first.cells] == [AttendanceStatus.PRESENT, None, AttendanceStatus.ABSENT]
    assert first.percentage == 50
    assert first.rating == Rating.POOR
    assert [c.status for c in report.rows[1].cells] == [None, None, None]
