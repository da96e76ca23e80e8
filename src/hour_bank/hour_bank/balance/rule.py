from __future__ import annotations

import math

from ..core.constants import OVERTIME_TIER1_FACTOR
from .model import MonthlyTotals


def round_half_up(value: float) -> int:
    """Round like the timesheet screen always did: .5 goes up, also for negatives."""
    return int(math.floor(value + 0.5))


def compute_balance(totals: MonthlyTotals) -> int:
    """Signed hour-bank balance for one month.

    When tier-1 overtime exceeds the delay, the difference is weighted at
    1.5x and the already weighted tier 2 is added. Otherwise the raw
    difference is used and tier 2 is left out.
    """

    if totals.total_tier1 > totals.total_delay:
        difference = totals.total_tier1 - totals.total_delay
        return round_half_up(difference * OVERTIME_TIER1_FACTOR) + totals.tier2_scaled
    # tier2_scaled is left out of this branch.
    return round_half_up(totals.total_tier1 - totals.total_delay)
