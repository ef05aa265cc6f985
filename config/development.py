import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Employees fetched and reconciled in parallel
REPORT_MAX_WORKERS = int(os.getenv("REPORT_MAX_WORKERS", "4"))

# IANA zone used to place aware punch timestamps on local calendar days ('' = host zone)
LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "")
