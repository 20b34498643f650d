"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALL_CATEGORIES = "all"

DEFAULT_SESSION_NAME = "Session {id}"

GOOD_ATTENDANCE_PERCENT = 80
WARNING_ATTENDANCE_PERCENT = 60

DEFAULT_API_BASE_URL = "http://localhost:3001/api"
DEFAULT_API_TIMEOUT_SECONDS = 10
