"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STANDARD_SHIFT_MINUTES = 8 * 60
DEFAULT_TIER1_THRESHOLD_MINUTES = 2 * 60
DEFAULT_TIER2_THRESHOLD_MINUTES = 4 * 60
DEFAULT_ADMINISTRATIVE_MINIMUM_MINUTES = 4 * 60
DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_LUNCH_MINUTES = 60
DEFAULT_DUPLICATE_THRESHOLD_MINUTES = 5
DEFAULT_BATCH_CHUNK_SIZE = 200
DEFAULT_PAGE_LIMIT = 100

# Saturday, Sunday (date.weekday())
DEFAULT_REST_WEEKDAYS = (5, 6)

MAX_PAIRS_PER_DAY = 2
HOURS_PRECISION = 2
