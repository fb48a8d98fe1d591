import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SHIFT_CONFIG = {
    "version": os.getenv("SHIFT_VERSION", "2024-01"),
    "standard_shift_minutes": int(os.getenv("STANDARD_SHIFT_MINUTES", "480")),
    "tier1_threshold_minutes": int(os.getenv("TIER1_THRESHOLD_MINUTES", "120")),
    "tier2_threshold_minutes": int(os.getenv("TIER2_THRESHOLD_MINUTES", "240")),
    "night_start": os.getenv("NIGHT_START", "22:00"),
    "night_end": os.getenv("NIGHT_END", "06:00"),
    "lunch_window_start": os.getenv("LUNCH_WINDOW_START", "12:00"),
    "lunch_window_end": os.getenv("LUNCH_WINDOW_END", "15:00"),
    "lunch_minutes": int(os.getenv("LUNCH_MINUTES", "60")),
    "shift_start": os.getenv("SHIFT_START", "08:00"),
    "shift_end": os.getenv("SHIFT_END", "17:00"),
    "grace_minutes": int(os.getenv("LATE_GRACE_MINUTES", "5")),
    "rest_weekdays": [int(d) for d in os.getenv("REST_WEEKDAYS", "5,6").split(",") if d.strip()],
    "holidays": [d.strip() for d in os.getenv("HOLIDAYS", "").split(",") if d.strip()],
}

DUPLICATE_THRESHOLD_MINUTES = int(os.getenv("DUPLICATE_THRESHOLD_MINUTES", "5"))
BATCH_CHUNK_SIZE = int(os.getenv("BATCH_CHUNK_SIZE", "500"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")

DEBUG = False
