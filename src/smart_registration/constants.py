"""Constants for Smart Registration."""

# Weekday labels as they appear in scanned schedules
WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
DEFAULT_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri"]

# Section status values
STATUS_OPEN = "open"
STATUS_CLOSED = "closed"
STATUS_UNKNOWN = "unknown"

# Scanned record keys
KEY_COURSE_CODE = "courseCode"
KEY_COURSE_NAME = "courseName"
KEY_SECTION_ID = "sectionId"
KEY_STATUS = "status"
KEY_SCHEDULE = "schedule"
KEY_DAY = "day"
KEY_TIME = "time"

# Time format
TIME_PATTERN = r"^(\d{1,2}):(\d{2})$"
TIME_RANGE_SEPARATOR = "-"
MAX_HOUR = 24
MINUTES_PER_HOUR = 60

# Hour rows shown in a weekly timetable grid
TIMETABLE_HOURS = [
    "08:00",
    "09:00",
    "10:00",
    "11:00",
    "12:00",
    "13:00",
    "14:00",
    "15:00",
    "16:00",
    "17:00",
]

# Delay between enroll actions (seconds)
DEFAULT_ENROLL_DELAY = 0.5
