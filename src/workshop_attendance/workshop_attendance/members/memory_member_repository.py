from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import Category
from ..database.memory_store import MemoryStore, index_of, next_id, store_read, store_transaction
from .model import Member
from .repository import MemberRepository


class MemoryMemberRepository(MemberRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Member]:
        with store_read(self._store) as s:
            return list(s.members)

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with store_read(self._store) as s:
            i = index_of(s.members, member_id)
            return s.members[i] if i >= 0 else None

    def create(
        self,
        *,
        name: str,
        category: Category,
        created_at: datetime,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Member:
        with store_transaction(self._store) as s:
            member = Member(
                id=next_id(s.members),
                name=name,
                category=category,
                created_at=created_at,
                email=email,
                phone=phone,
            )
            s.members.append(member)
            return member

    def save(self, member: Member) -> bool:
        with store_transaction(self._store) as s:
            i = index_of(s.members, member.id)
            if i < 0:
                return False
            s.members[i] = member
            return True

    def delete_by_id(self, member_id: int) -> bool:
        with store_transaction(self._store) as s:
            i = index_of(s.members, member_id)
            if i < 0:
                return False
            del s.members[i]
            return True

    def replace_all(self, members: Sequence[Member]) -> None:
        with store_transaction(self._store) as s:
            s.members[:] = list(members)
