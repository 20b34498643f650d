from __future__ import annotations

import pytest

from workshop_attendance.core.exceptions import ValidationError
from workshop_attendance.reports.filters import ViewContext, filter_members
from workshop_attendance.seed.mock_data import get_mock_members


def names(members):
    return [m.name for m in members]


def test_default_view_keeps_everyone():
    members = get_mock_members()

    assert filter_members(members, ViewContext()) == members


def test_category_filter():
    result = filter_members(get_mock_members(), ViewContext(category="graphics"))

    assert names(result) == ["Fatima Mohammed", "Noor Samir", "Layla Karim", "Mona Youssef"]


def test_search_is_case_insensitive_substring():
    result = filter_members(get_mock_members(), ViewContext(search="HASSAN"))

    assert names(result) == ["Ahmed Hassan", "Hassan El-Sayed"]


def test_category_and_search_combine():
    result = filter_members(get_mock_members(), ViewContext(category="graphics", search="hassan"))

    assert result == []


def test_from_args_normalizes_input():
    assert ViewContext.from_args(None, None) == ViewContext()
    assert ViewContext.from_args(" GAME ", "  omar ") == ViewContext(category="game", search="omar")


def test_from_args_rejects_unknown_category():
    with pytest.raises(ValidationError):
        ViewContext.from_args("music", "")


def test_direct_construction_is_normalized():
    view = ViewContext(category="GAME", search="  omar ")

    assert view == ViewContext(category="game", search="omar")
    assert names(filter_members(get_mock_members(), view)) == ["Omar Ali"]


def test_direct_construction_rejects_unknown_category():
    with pytest.raises(ValidationError):
        ViewContext(category="music")
