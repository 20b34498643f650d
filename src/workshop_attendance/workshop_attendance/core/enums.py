from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Workshop track a member belongs to."""

    GAME = "game"
    GRAPHICS = "graphics"


class AttendanceStatus(str, Enum):
    """Explicit mark for a (member, session) pair.

    "Not marked" is not a status: it is the absence of a record.
    """

    PRESENT = "present"
    ABSENT = "absent"


class Rating(str, Enum):
    """Attendance quality band shown next to the percentage."""

    GOOD = "good"
    WARNING = "warning"
    POOR = "poor"
