import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "attendance"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_engine"),
}

SESSION_STORE = os.getenv("SESSION_STORE", "mysql")

LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "5"))
SESSION_DURATION_HOURS = float(os.getenv("SESSION_DURATION_HOURS", "24"))
SESSION_LOCATION = os.getenv("SESSION_LOCATION", "Main Office Entrance")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
