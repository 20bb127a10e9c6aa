import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "tuition_db"),
}

# REST routes are mounted under this prefix (the SPA calls `${API_BASE_URL}/students`)
API_PREFIX = os.getenv("API_PREFIX", "/api")

# Used by StudentApiClient (scripts, dashboards running outside the server)
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))

DEFAULT_TOTAL_AMOUNT_DUE = float(os.getenv("DEFAULT_TOTAL_AMOUNT_DUE", "15000"))

# Photos travel as base64 data URIs inside the JSON body
MAX_CONTENT_LENGTH = 50 * 1024 * 1024

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, mutations need an admin session and reads need any session
AUTH_REQUIRED = bool(int(os.getenv("AUTH_REQUIRED", "0")))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo students (scripts/seed_db.py)
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
