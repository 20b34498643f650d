from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import Category


@dataclass(frozen=True)
class Member:
    """Domain entity: a workshop member.

    Note: plain data object, no store access here.
    """

    id: int
    name: str
    category: Category
    created_at: datetime
    email: Optional[str] = None
    phone: Optional[str] = None


def member_to_json(member: Member) -> dict[str, Any]:
    """Wire shape shared by the HTTP surface and the remote API."""
    return {
        "id": member.id,
        "name": member.name,
        "category": member.category.value,
        "email": member.email,
        "phone": member.phone,
        "createdAt": member.created_at.isoformat(),
    }


def member_from_json(data: dict[str, Any]) -> Member:
    return Member(
        id=int(data["id"]),
        name=str(data["name"]),
        category=Category(data["category"]),
        created_at=parse_iso_datetime(str(data["createdAt"])),
        email=data.get("email") or None,
        phone=data.get("phone") or None,
    )
