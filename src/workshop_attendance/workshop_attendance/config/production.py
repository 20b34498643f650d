import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001/api")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "10"))

USE_REMOTE_SOURCE = bool(int(os.getenv("USE_REMOTE_SOURCE", "1")))
SEED_MOCK_DATA = bool(int(os.getenv("SEED_MOCK_DATA", "0")))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
