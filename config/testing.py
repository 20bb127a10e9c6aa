import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "tuition_test_db"),
}

API_PREFIX = "/api"
API_BASE_URL = "http://testserver/api"
API_TIMEOUT = 5.0

DEFAULT_TOTAL_AMOUNT_DUE = 15000.0
MAX_CONTENT_LENGTH = 50 * 1024 * 1024

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTH_REQUIRED = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
