import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_engine"),
}

# "memory" keeps sessions and records in-process; "mysql" uses DB_CONFIG
SESSION_STORE = os.getenv("SESSION_STORE", "memory")

LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "5"))
SESSION_DURATION_HOURS = float(os.getenv("SESSION_DURATION_HOURS", "24"))
SESSION_LOCATION = os.getenv("SESSION_LOCATION", "Main Office Entrance")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True

# If enabled, the schema is applied on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
