from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.validators import require_enum
from ..core.constants import ALL_CATEGORIES
from ..core.enums import Category
from ..members.model import Member


@dataclass(frozen=True)
class ViewContext:
    """Category/search selection passed explicitly instead of living in UI state."""

    category: str = ALL_CATEGORIES
    search: str = ""

    def __post_init__(self):
        category = (self.category or ALL_CATEGORIES).strip().lower()
        if category != ALL_CATEGORIES:
            category = require_enum(category, Category, "category").value
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "search", (self.search or "").strip())

    @classmethod
    def from_args(cls, category: Optional[str] = None, search: Optional[str] = None) -> "ViewContext":
        return cls(category=category or ALL_CATEGORIES, search=search or "")


def matches(member: Member, view: ViewContext) -> bool:
    if view.category != ALL_CATEGORIES and member.category.value != view.category:
        return False
    return not view.search or view.search.lower() in member.name.lower()


def filter_members(members: Iterable[Member], view: ViewContext) -> list[Member]:
    return [m for m in members if matches(m, view)]
