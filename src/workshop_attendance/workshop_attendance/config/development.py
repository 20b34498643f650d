import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Remote roster API (members/attendance REST backend)
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001/api")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "10"))

# Off by default: the app runs from the seeded in-memory roster.
USE_REMOTE_SOURCE = bool(int(os.getenv("USE_REMOTE_SOURCE", "0")))
SEED_MOCK_DATA = bool(int(os.getenv("SEED_MOCK_DATA", "1")))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
