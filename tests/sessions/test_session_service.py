from __future__ import annotations

from datetime import datetime

import pytest

from workshop_attendance.core.exceptions import NotFoundError, ValidationError


def test_sessions_get_sequential_ids(session_service):
    s1 = session_service.add_session({"name": "S1"})
    s2 = session_service.add_session({"name": "S2"})

    assert (s1.id, s2.id) == (1, 2)
    assert (s1.name, s2.name) == ("S1", "S2")


def test_session_name_defaults_to_id(session_service, fixed_now):
    session_service.add_session({"name": "Kickoff"})
    session = session_service.add_session({"name": "  "}, now=fixed_now)

    assert session.name == "Session 2"
    assert session.date == fixed_now
    assert session.created_at == fixed_now


def test_session_date_is_parsed_from_iso(session_service):
    session = session_service.add_session({"date": "2025-02-01T17:30:00"})

    assert session.date == datetime(2025, 2, 1, 17, 30)


def test_session_rejects_garbage_date(store, session_service):
    with pytest.raises(ValidationError):
        session_service.add_session({"date": "next tuesday"})

    assert store.sessions == []


def test_get_unknown_session_raises(session_service):
    with pytest.raises(NotFoundError):
        session_service.get_session(3)
