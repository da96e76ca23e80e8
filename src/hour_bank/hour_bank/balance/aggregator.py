from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..core.constants import OVERTIME_TIER1_FACTOR, OVERTIME_TIER2_FACTOR
from ..core.enums import DayType
from ..timesheet.calculator.base import HoursCalculator
from ..timesheet.calculator.standard_calculator import StandardHoursCalculator
from ..timesheet.model import CalendarDay, DailyComputation, DailyPunchRecord
from .model import MonthlyTotals
from .rule import round_half_up


def compute_month_days(
    days: Sequence[CalendarDay],
    records_by_date: Mapping[date, DailyPunchRecord],
    *,
    employee_id: int = 0,
    calculator: Optional[HoursCalculator] = None,
) -> list[tuple[CalendarDay, DailyPunchRecord, DailyComputation]]:
    """Run the calculator once per calendar day; missing days get an empty record."""

    calculator = calculator or StandardHoursCalculator()
    computed = []
    for day in days:
        record = records_by_date.get(day.date) or DailyPunchRecord.empty(employee_id, day.date)
        daily = calculator.compute(record, is_saturday=day.is_saturday, is_sunday=day.is_sunday)
        computed.append((day, record, daily))
    return computed


def sum_computations(computed: Iterable[tuple[DailyPunchRecord, DailyComputation]]) -> MonthlyTotals:
    """Sum daily computations into MonthlyTotals.

    - holiday: worked time goes to holiday_worked_minutes only
    - day off / absence: the full expected time is delay
    - normal (weekends included): everything accumulates
    """

    totals = MonthlyTotals()
    for record, daily in computed:
        if daily.has_short_lunch:
            totals.short_lunch_days += 1

        if record.day_type == DayType.HOLIDAY:
            totals.holiday_worked_minutes += daily.worked_minutes
        elif record.day_type in (DayType.DAY_OFF, DayType.ABSENCE):
            totals.total_delay += daily.expected_minutes
            totals.total_expected += daily.expected_minutes
        else:
            totals.total_worked += daily.worked_minutes
            totals.total_delay += daily.delay_minutes
            totals.total_expected += daily.expected_minutes
            totals.total_tier1 += daily.overtime_tier1_minutes
            totals.total_tier2 += daily.overtime_tier2_minutes

    totals.tier1_scaled = round_half_up(totals.total_tier1 * OVERTIME_TIER1_FACTOR)
    totals.tier2_scaled = round_half_up(totals.total_tier2 * OVERTIME_TIER2_FACTOR)
    return totals


def aggregate_month(
    days: Sequence[CalendarDay],
    records_by_date: Mapping[date, DailyPunchRecord],
    *,
    employee_id: int = 0,
    calculator: Optional[HoursCalculator] = None,
) -> MonthlyTotals:
    """Sum the daily computations of a month into MonthlyTotals."""

    computed = compute_month_days(days, records_by_date, employee_id=employee_id, calculator=calculator)
    return sum_computations((record, daily) for _, record, daily in computed)
