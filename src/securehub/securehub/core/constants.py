"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

RESERVED_ADMIN_ID = "admin"

USERS_TABLE = "users"
ATTENDANCE_TABLE = "attendance_logs"
NETWORK_CONFIG_TABLE = "network_config"
NETWORK_CONFIG_ROW_ID = 1

DEFAULT_IP_LOOKUP_URL = "https://api.ipify.org?format=json"
DEFAULT_LOOKUP_TIMEOUT = 5
DEFAULT_NETWORK_RECHECK_SECONDS = 30
DEFAULT_SESSION_DAYS = 7

AUTH_STORAGE_KEY = "securehub_auth"
NETWORK_STORAGE_KEY = "securehub_network"

CSV_HEADERS = ("ID", "Name", "Type", "Date", "Time", "IP")
