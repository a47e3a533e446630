import os

SECRET_KEY = "test-secret"

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

REST_STORE = {
    "url": os.getenv("REST_STORE_URL", "http://localhost:54321"),
    "key": os.getenv("REST_STORE_KEY", "test-key"),
    "timeout": 2.0,
}

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "securehub_test"),
}

IP_SOURCE = "request"
IP_LOOKUP_URL = "https://api.ipify.org?format=json"
IP_LOOKUP_TIMEOUT = 2.0
TRUSTED_PROXIES = 0

NETWORK_RECHECK_SECONDS = 30
SESSION_DAYS = 1

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
ADMIN_BOOTSTRAP_PASSWORD = "admin123"
