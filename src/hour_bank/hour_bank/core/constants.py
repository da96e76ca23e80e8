"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WEEKDAY_EXPECTED_MINUTES = 480
SATURDAY_EXPECTED_MINUTES = 240

# Overtime starts above these daily baselines.
WEEKDAY_OVERTIME_BASELINE_MINUTES = 480
SATURDAY_OVERTIME_BASELINE_MINUTES = 240

# First two overtime hours go to tier 1, the rest to tier 2.
OVERTIME_TIER1_CAP_MINUTES = 120
OVERTIME_TIER1_FACTOR = 1.5
OVERTIME_TIER2_FACTOR = 2

SHORT_LUNCH_THRESHOLD_MINUTES = 60

MIN_PASSWORD_LENGTH = 6
DEFAULT_SESSION_DAYS = 7

DEFAULT_CATEGORIES = ("Loja", "Galpão", "Desligados")

EMPTY_TIME = "-"
