"""Constants for schedule generation."""

# Enumeration cap: maximum schedules the generator may emit
MAX_COMBINATIONS = 50000

# Per-course ceiling used when truncating candidate groups
# The ceiling shrinks from MAX_SECTIONS_PER_COURSE while it stays above
# MIN_SECTIONS_PER_COURSE
MAX_SECTIONS_PER_COURSE = 8
MIN_SECTIONS_PER_COURSE = 2

# Conflict-free schedules collected before ranking stops looking
MAX_VALID_SCHEDULES = 100

# Ranked options returned to the user
MAX_RANKED_RESULTS = 10

# Scoring: (SCORE_DAY_BASE - days) * SCORE_DAY_WEIGHT, plus a bonus when
# the schedule stays within the preferred number of days
SCORE_DAY_BASE = 6
SCORE_DAY_WEIGHT = 100
SCORE_MAX_DAYS_BONUS = 200

# Default filter preferences
DEFAULT_START_TIME = "08:00"
DEFAULT_END_TIME = "18:00"
DEFAULT_MAX_DAYS = 5
DEFAULT_MAX_GAP = 2
