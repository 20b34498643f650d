from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import Category
from .model import Member


class MemberRepository(Protocol):
    """Repository interface for members.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        category: Category,
        created_at: datetime,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Member:
        raise NotImplementedError

    def save(self, member: Member) -> bool:
        """Replace the stored member with the same id."""

        raise NotImplementedError

    def delete_by_id(self, member_id: int) -> bool:
        raise NotImplementedError

    def replace_all(self, members: Sequence[Member]) -> None:
        raise NotImplementedError
