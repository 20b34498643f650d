SECRET_KEY = "test-secret"

API_BASE_URL = "http://api.test/api"
API_TIMEOUT_SECONDS = 1.0

USE_REMOTE_SOURCE = False
SEED_MOCK_DATA = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
