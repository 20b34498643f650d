from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Optional, Protocol, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_enum, require_non_empty
from ..core.enums import Category
from ..core.exceptions import NotFoundError, RemoteError
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)

# Fields a caller may change on an existing member; id/createdAt are fixed.
EDITABLE_FIELDS = ("name", "category", "email", "phone")


class MemberSource(Protocol):
    """Anything that can hand over a full roster (remote API, seed data, ...)."""

    def get_members(self) -> Sequence[Member]:
        raise NotImplementedError


class MemberService:
    """Use case: manage the member roster."""

    def __init__(
        self,
        members: MemberRepository,
        attendance: AttendanceRepository,
        *,
        unit_of_work: Optional[Callable[[], AbstractContextManager]] = None,
    ):
        self._members = members
        self._attendance = attendance
        self._unit_of_work = unit_of_work or nullcontext

    def list_members(self) -> Sequence[Member]:
        return self._members.list_all()

    def get_member(self, member_id: int) -> Member:
        member = self._members.get_by_id(int(member_id))
        if not member:
            raise NotFoundError(f"Member {member_id} does not exist")
        return member

    def add_member(self, data: dict[str, Any], *, now: Optional[datetime] = None) -> Member:
        name = require_non_empty(data.get("name"), "name")
        category = require_enum(data.get("category"), Category, "category")

        member = self._members.create(
            name=name,
            category=category,
            created_at=now or now_local(),
            email=optional_text(data.get("email")),
            phone=optional_text(data.get("phone")),
        )
        logger.info("member %s added (%s)", member.id, member.category.value)
        return member

    def update_member(self, member_id: int, patch: dict[str, Any]) -> Member:
        changes: dict[str, Any] = {}
        if "name" in patch:
            changes["name"] = require_non_empty(patch["name"], "name")
        if "category" in patch:
            changes["category"] = require_enum(patch["category"], Category, "category")
        for key in ("email", "phone"):
            if key in patch:
                changes[key] = optional_text(patch[key])

        ignored = set(patch) - set(EDITABLE_FIELDS)
        if ignored:
            logger.debug("update of member %s ignores fields %s", member_id, sorted(ignored))

        with self._unit_of_work():
            current = self.get_member(member_id)
            updated = replace(current, **changes)
            self._members.save(updated)
        return updated

    def delete_member(self, member_id: int) -> None:
        """Remove a member together with every attendance record pointing at it."""
        with self._unit_of_work():
            if not self._members.delete_by_id(int(member_id)):
                raise NotFoundError(f"Member {member_id} does not exist")
            dropped = self._attendance.delete_for_member(int(member_id))
        logger.info("member %s deleted (%s attendance records dropped)", member_id, dropped)

    def load_from(self, source: MemberSource) -> Sequence[Member]:
        """Replace the roster with whatever `source` returns.

        Nothing is applied unless the whole fetch succeeds; a failure surfaces
        as RemoteError and the caller may simply retry.
        """
        try:
            members = list(source.get_members())
        except RemoteError:
            logger.warning("failed to load members from %s", type(source).__name__)
            raise

        ids = [m.id for m in members]
        if len(ids) != len(set(ids)):
            logger.warning("roster from %s repeats member ids", type(source).__name__)
            raise RemoteError("Malformed payload: duplicate member ids in roster")

        with self._unit_of_work():
            self._members.replace_all(members)
            self._attendance.delete_unless_member({m.id for m in members})
        logger.info("roster loaded: %s members", len(members))
        return members
