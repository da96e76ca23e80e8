from __future__ import annotations

import logging

from ...common.time_codec import parse_time
from ...core import constants
from ...core.enums import DayType, PunchField
from ..model import DailyPunchRecord, OvertimeSplit
from .base import HoursCalculator

logger = logging.getLogger(__name__)


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: 8h on weekdays, 4h on Saturday, Sunday free.

    Worked time only comes from three punch patterns: morning only,
    straight shift without lunch, or the full four punches. Anything else
    counts as zero worked minutes.
    """

    def expected_minutes(self, *, is_saturday: bool, is_sunday: bool, day_type: DayType) -> int:
        if is_sunday:
            return 0
        if day_type in (DayType.DAY_OFF, DayType.HOLIDAY):
            return 0
        if is_saturday:
            return constants.SATURDAY_EXPECTED_MINUTES
        # ABSENCE keeps the normal expectation so the day is fully penalised.
        return constants.WEEKDAY_EXPECTED_MINUTES

    def worked_minutes(self, record: DailyPunchRecord) -> int:
        if record.day_type == DayType.DAY_OFF:
            return 0

        clock_in = parse_time(record.clock_in)
        lunch_out = parse_time(record.lunch_out)
        lunch_in = parse_time(record.lunch_in)
        clock_out = parse_time(record.clock_out)

        if clock_in and lunch_out and not lunch_in and not clock_out:
            return lunch_out - clock_in

        if clock_in and clock_out and not lunch_out and not lunch_in:
            return clock_out - clock_in

        if clock_in and lunch_out and lunch_in and clock_out:
            return (lunch_out - clock_in) + (clock_out - lunch_in)

        present = [
            field.value
            for field, minutes in (
                (PunchField.CLOCK_IN, clock_in),
                (PunchField.LUNCH_OUT, lunch_out),
                (PunchField.LUNCH_IN, lunch_in),
                (PunchField.CLOCK_OUT, clock_out),
            )
            if minutes
        ]
        if present:
            logger.warning(
                "unrecognized punch pattern, counting 0 worked minutes",
                extra={
                    "employee_id": record.employee_id,
                    "work_date": record.work_date.isoformat(),
                    "punches": present,
                },
            )
        return 0

    def overtime(self, worked: int, *, is_saturday: bool) -> OvertimeSplit:
        if is_saturday:
            baseline = constants.SATURDAY_OVERTIME_BASELINE_MINUTES
        else:
            baseline = constants.WEEKDAY_OVERTIME_BASELINE_MINUTES

        if worked <= baseline:
            return OvertimeSplit()

        overtime = worked - baseline
        cap = constants.OVERTIME_TIER1_CAP_MINUTES
        return OvertimeSplit(tier1=min(overtime, cap), tier2=max(0, overtime - cap))

    def has_short_lunch(self, record: DailyPunchRecord) -> bool:
        if not record.lunch_out or not record.lunch_in:
            return False
        interval = parse_time(record.lunch_in) - parse_time(record.lunch_out)
        return 0 < interval < constants.SHORT_LUNCH_THRESHOLD_MINUTES
