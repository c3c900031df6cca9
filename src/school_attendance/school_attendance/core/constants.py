"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

API_PREFIX = "/api"

IDENTITY_HEADER = "User-Id"

IDENTITIES_COLLECTION = "identities"

MIN_ATTENDANCE_PERCENTAGE = 0.0
MAX_ATTENDANCE_PERCENTAGE = 100.0

ADMISSION_NO_PREFIX = "AMS"
ADMISSION_NO_DIGITS = 3
