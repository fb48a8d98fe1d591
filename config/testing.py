SECRET_KEY = "test-secret"

SHIFT_CONFIG = {
    "version": "test",
    "standard_shift_minutes": 480,
    "tier1_threshold_minutes": 120,
    "tier2_threshold_minutes": 240,
    "night_start": "22:00",
    "night_end": "06:00",
    "lunch_window_start": "12:00",
    "lunch_window_end": "15:00",
    "lunch_minutes": 60,
    "shift_start": "08:00",
    "shift_end": "17:00",
    "grace_minutes": 5,
    "rest_weekdays": [5, 6],
    "holidays": [],
}

DUPLICATE_THRESHOLD_MINUTES = 5
BATCH_CHUNK_SIZE = 2

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"

DEBUG = False
TESTING = True
