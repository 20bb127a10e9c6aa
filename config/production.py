import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "tuition_db"),
}

API_PREFIX = os.getenv("API_PREFIX", "/api")
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))

DEFAULT_TOTAL_AMOUNT_DUE = float(os.getenv("DEFAULT_TOTAL_AMOUNT_DUE", "15000"))
MAX_CONTENT_LENGTH = 50 * 1024 * 1024

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTH_REQUIRED = bool(int(os.getenv("AUTH_REQUIRED", "1")))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
