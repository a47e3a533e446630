import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "rest" = hosted PostgREST/Supabase table API, "mysql" = self-hosted MySQL
STORE_BACKEND = os.getenv("STORE_BACKEND", "rest")

REST_STORE = {
    "url": os.getenv("REST_STORE_URL", ""),
    "key": os.getenv("REST_STORE_KEY", ""),
    "timeout": float(os.getenv("REST_STORE_TIMEOUT", "10")),
}

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "securehub"),
}

# "lookup" asks IP_LOOKUP_URL for the public address, "request" trusts the HTTP request
IP_SOURCE = os.getenv("IP_SOURCE", "lookup")
IP_LOOKUP_URL = os.getenv("IP_LOOKUP_URL", "https://api.ipify.org?format=json")
IP_LOOKUP_TIMEOUT = float(os.getenv("IP_LOOKUP_TIMEOUT", "5"))
# Reverse proxies in front of the app whose X-Forwarded-For hop is trusted (IP_SOURCE=request)
TRUSTED_PROXIES = int(os.getenv("TRUSTED_PROXIES", "0"))

NETWORK_RECHECK_SECONDS = int(os.getenv("NETWORK_RECHECK_SECONDS", "30"))
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app applies schema.sql on startup (mysql backend only, idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also upsert the reserved admin account on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
ADMIN_BOOTSTRAP_PASSWORD = os.getenv("ADMIN_BOOTSTRAP_PASSWORD", "admin123")
