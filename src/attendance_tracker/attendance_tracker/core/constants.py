"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Minimum attendance percentage a subject needs to stay eligible.
ATTENDANCE_THRESHOLD = 75.0

DEFAULT_HOLIDAY_DESCRIPTION = "Official Holiday"

# Fallback look-back when seeding attendance without a semester start:
# conducted * 7 // days_per_week + SEED_LOOKBACK_PADDING_DAYS.
SEED_LOOKBACK_PADDING_DAYS = 14
