from datetime import date

from hour_bank.balance.aggregator import aggregate_month
from hour_bank.core.enums import DayType
from hour_bank.timesheet.calendar import generate_month_days
from hour_bank.timesheet.model import DailyPunchRecord

# March 2025: 1st is Saturday, 2nd Sunday, 3rd-7th Monday-Friday.
DAYS = generate_month_days(2025, 2)
WEEKDAYS_IN_MARCH_2025 = 21
SATURDAYS_IN_MARCH_2025 = 5


def _rec(day: int, **kwargs) -> DailyPunchRecord:
    return DailyPunchRecord(employee_id=1, work_date=date(2025, 3, day), **kwargs)


def _full(day: int, clock_out="17:00", **kwargs) -> DailyPunchRecord:
    return _rec(day, clock_in="08:00", lunch_out="12:00", lunch_in="13:00", clock_out=clock_out, **kwargs)


def _by_date(*records):
    return {r.work_date: r for r in records}


def test_empty_month_is_all_delay():
    totals = aggregate_month(DAYS, {})

    expected = WEEKDAYS_IN_MARCH_2025 * 480 + SATURDAYS_IN_MARCH_2025 * 240
    assert totals.total_worked == 0
    assert totals.total_expected == expected
    assert totals.total_delay == expected
    assert totals.total_tier1 == totals.total_tier2 == 0
    assert totals.tier1_scaled == totals.tier2_scaled == 0


def test_normal_day_accumulates_worked_and_overtime():
    totals = aggregate_month(DAYS, _by_date(_full(3, clock_out="19:30")))

    assert totals.total_worked == 630
    assert totals.total_tier1 == 120
    assert totals.total_tier2 == 30
    assert totals.tier1_scaled == 180
    assert totals.tier2_scaled == 60


def test_day_off_on_a_weekday_carries_no_expectation():
    with_day_off = aggregate_month(DAYS, _by_date(_rec(3, day_type=DayType.DAY_OFF)))
    empty = aggregate_month(DAYS, {})

    # a day off expects 0 minutes, so that weekday drops out of delay and expected
    assert with_day_off.total_delay == empty.total_delay - 480
    assert with_day_off.total_expected == empty.total_expected - 480


def test_absence_fully_penalises_even_with_punches():
    totals = aggregate_month(DAYS, _by_date(_full(3, day_type=DayType.ABSENCE)))
    empty = aggregate_month(DAYS, {})

    assert totals.total_worked == 0
    assert totals.total_delay == empty.total_delay
    assert totals.total_expected == empty.total_expected


def test_holiday_work_is_tracked_apart():
    holiday = _full(4, clock_out="20:00", day_type=DayType.HOLIDAY)
    totals = aggregate_month(DAYS, _by_date(holiday))
    empty = aggregate_month(DAYS, {})

    assert totals.holiday_worked_minutes == 660
    assert totals.total_worked == 0
    assert totals.total_tier1 == 0
    assert totals.total_tier2 == 0
    assert totals.total_delay == empty.total_delay - 480
    assert totals.total_expected == empty.total_expected - 480


def test_sunday_work_is_all_overtime_free_expectation():
    sunday = _rec(2, clock_in="08:00", clock_out="18:00")
    totals = aggregate_month(DAYS, _by_date(sunday))

    assert totals.total_worked == 600
    assert totals.total_tier1 == 120
    assert totals.total_tier2 == 0


def test_short_lunch_days_are_counted():
    totals = aggregate_month(
        DAYS,
        _by_date(
            _rec(3, clock_in="08:00", lunch_out="12:00", lunch_in="12:30", clock_out="17:00"),
            _full(4),
        ),
    )
    assert totals.short_lunch_days == 1


def test_records_from_other_months_are_ignored():
    stray = DailyPunchRecord(employee_id=1, work_date=date(2025, 4, 1), clock_in="08:00", clock_out="20:00")
    assert aggregate_month(DAYS, _by_date(stray)) == aggregate_month(DAYS, {})
