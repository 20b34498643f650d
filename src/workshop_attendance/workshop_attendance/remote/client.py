"""REST client for the optional members/attendance backend.

Endpoints (relative to the configured base URL):
- GET/POST /members, PUT/DELETE /members/<id>, GET /members/category/<category>
- POST /attendance, GET /attendance/member/<id>, GET /attendance/today

Every transport, HTTP or payload problem is raised as RemoteError; callers
never see a partially decoded result.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.enums import AttendanceStatus, Category
from ..core.exceptions import RemoteError
from ..members.model import Member, member_from_json
from .model import RemoteAttendance, remote_attendance_from_json

logger = logging.getLogger(__name__)


class MemberApiClient:
    """Service for the remote roster API."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = session or requests.Session()

    def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._http.request(method, url, json=json, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise RemoteError(f"Request to {path} failed") from e

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("%s %s returned invalid JSON", method, url)
            raise RemoteError(f"Invalid response from {path}") from e

    def _decode(self, path: str, decoder, payload):
        try:
            return decoder(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteError(f"Unexpected payload from {path}") from e

    def get_members(self) -> Sequence[Member]:
        payload = self._request("GET", "/members")
        return self._decode("/members", lambda p: [member_from_json(m) for m in p], payload)

    def get_members_by_category(self, category: Category) -> Sequence[Member]:
        path = f"/members/category/{Category(category).value}"
        payload = self._request("GET", path)
        return self._decode(path, lambda p: [member_from_json(m) for m in p], payload)

    def add_member(
        self,
        *,
        name: str,
        category: Category,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Member:
        body = {"name": name, "category": Category(category).value, "email": email, "phone": phone}
        payload = self._request("POST", "/members", json=body)
        return self._decode("/members", member_from_json, payload)

    def update_member(self, member_id: int, patch: dict[str, Any]) -> Member:
        path = f"/members/{int(member_id)}"
        body = {k: v for k, v in patch.items() if k not in {"id", "createdAt"}}
        payload = self._request("PUT", path, json=body)
        return self._decode(path, member_from_json, payload)

    def delete_member(self, member_id: int) -> None:
        self._request("DELETE", f"/members/{int(member_id)}")

    def mark_attendance(
        self,
        member_id: int,
        status: AttendanceStatus,
        notes: Optional[str] = None,
        *,
        on: Optional[date] = None,
    ) -> RemoteAttendance:
        body = {
            "memberId": int(member_id),
            "status": AttendanceStatus(status).value,
            "notes": notes,
            "date": (on or date.today()).isoformat(),
        }
        payload = self._request("POST", "/attendance", json=body)
        return self._decode("/attendance", remote_attendance_from_json, payload)

    def get_member_attendance(self, member_id: int) -> Sequence[RemoteAttendance]:
        path = f"/attendance/member/{int(member_id)}"
        payload = self._request("GET", path)
        return self._decode(path, lambda p: [remote_attendance_from_json(a) for a in p], payload)

    def get_today_attendance(self) -> Sequence[RemoteAttendance]:
        payload = self._request("GET", "/attendance/today")
        return self._decode("/attendance/today", lambda p: [remote_attendance_from_json(a) for a in p], payload)
