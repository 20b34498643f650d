from __future__ import annotations

from datetime import datetime

import pytest

from workshop_attendance.core.enums import Category
from workshop_attendance.database.memory_store import MemoryStore, next_id, store_read, store_transaction
from workshop_attendance.members import memory_member_repository as member_repo_module
from workshop_attendance.members.memory_member_repository import MemoryMemberRepository
from workshop_attendance.members.model import Member


def test_next_id_is_max_plus_one():
    members = [
        Member(id=4, name="A", category=Category.GAME, created_at=datetime(2024, 1, 1)),
        Member(id=2, name="B", category=Category.GAME, created_at=datetime(2024, 1, 1)),
    ]

    assert next_id([]) == 1
    assert next_id(members) == 5


def test_transaction_rolls_back_on_error():
    store = MemoryStore()
    store.members.append(Member(id=1, name="A", category=Category.GAME, created_at=datetime(2024, 1, 1)))

    with pytest.raises(RuntimeError):
        with store_transaction(store) as s:
            s.members.clear()
            s.sessions.append("half-applied")
            raise RuntimeError("fail mid-mutation")

    assert [m.id for m in store.members] == [1]
    assert store.sessions == []


def test_read_lock_takes_no_snapshot():
    store = MemoryStore()
    store.members.append(Member(id=1, name="A", category=Category.GAME, created_at=datetime(2024, 1, 1)))

    with pytest.raises(RuntimeError):
        with store_read(store) as s:
            s.members.clear()
            raise RuntimeError("reads have nothing to restore")

    assert store.members == []


def test_repository_reads_do_not_copy_collections(monkeypatch):
    store = MemoryStore()
    repo = MemoryMemberRepository(store)
    repo.create(name="A", category=Category.GAME, created_at=datetime(2024, 1, 1))

    def no_snapshot(_store):
        raise AssertionError("read path took a transaction snapshot")

    monkeypatch.setattr(member_repo_module, "store_transaction", no_snapshot)

    assert repo.get_by_id(1).name == "A"
    assert len(repo.list_all()) == 1
