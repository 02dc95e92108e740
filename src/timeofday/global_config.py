"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared names and cross-cutting defaults that many modules can import.
"""

# Core Names
PROJECT_NAME = "timeofday"
# Distribution name, as installed (used for the version lookup)
PACKAGE_NAME = "timeofday"

# Zone used by the CLI when --tz is not given
DEFAULT_TZ = "America/New_York"

# Length of the time-of-day wheel, in hours
HOURS_PER_DAY = 24

# Days per "year" bucket in elapsed-time display (no calendar awareness)
DAYS_PER_YEAR = 365
