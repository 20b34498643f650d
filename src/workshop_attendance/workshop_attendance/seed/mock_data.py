from __future__ import annotations

from datetime import datetime, timezone

from ..core.enums import Category
from ..members.model import Member

_SEED = [
    (1, "Ahmed Hassan", Category.GAME, "ahmed.hassan@example.com", "01001234567", 15),
    (2, "Fatima Mohammed", Category.GRAPHICS, "fatima.mohammed@example.com", "01112345678", 16),
    (3, "Omar Ali", Category.GAME, "omar.ali@example.com", "01223456789", 17),
    (4, "Noor Samir", Category.GRAPHICS, "noor.samir@example.com", "01334567890", 18),
    (5, "Mohamed Ibrahim", Category.GAME, "mohamed.ibrahim@example.com", "01445678901", 19),
    (6, "Layla Karim", Category.GRAPHICS, "layla.karim@example.com", "01556789012", 20),
    (7, "Hassan El-Sayed", Category.GAME, "hassan.elsayed@example.com", "01667890123", 21),
    (8, "Mona Youssef", Category.GRAPHICS, "mona.youssef@example.com", "01778901234", 22),
]


def get_mock_members() -> list[Member]:
    """Fixed demo roster used when no remote source is configured."""
    return [
        Member(
            id=member_id,
            name=name,
            category=category,
            email=email,
            phone=phone,
            created_at=datetime(2024, 1, day, tzinfo=timezone.utc),
        )
        for member_id, name, category, email, phone, day in _SEED
    ]


class MockMemberSource:
    """MemberSource over the fixed demo roster."""

    def get_members(self) -> list[Member]:
        return get_mock_members()
