import logging
from datetime import date

from hour_bank.core.enums import DayType
from hour_bank.timesheet.calculator.standard_calculator import StandardHoursCalculator
from hour_bank.timesheet.model import DailyPunchRecord

WEEKDAY = date(2025, 3, 5)  # Wednesday
SATURDAY = date(2025, 3, 8)


def _record(work_date=WEEKDAY, **kwargs):
    return DailyPunchRecord(employee_id=1, work_date=work_date, **kwargs)


def test_expected_minutes_rules():
    calc = StandardHoursCalculator()

    for day_type in DayType:
        assert calc.expected_minutes(is_saturday=False, is_sunday=True, day_type=day_type) == 0

    assert calc.expected_minutes(is_saturday=True, is_sunday=False, day_type=DayType.NORMAL) == 240
    assert calc.expected_minutes(is_saturday=False, is_sunday=False, day_type=DayType.NORMAL) == 480
    assert calc.expected_minutes(is_saturday=False, is_sunday=False, day_type=DayType.DAY_OFF) == 0
    assert calc.expected_minutes(is_saturday=False, is_sunday=False, day_type=DayType.HOLIDAY) == 0
    assert calc.expected_minutes(is_saturday=False, is_sunday=False, day_type=DayType.ABSENCE) == 480
    assert calc.expected_minutes(is_saturday=True, is_sunday=False, day_type=DayType.ABSENCE) == 240


def test_full_day_on_weekday():
    calc = StandardHoursCalculator()
    rec = _record(clock_in="08:00", lunch_out="12:00", lunch_in="13:00", clock_out="17:00")

    result = calc.compute(rec, is_saturday=False, is_sunday=False)

    assert result.worked_minutes == 480
    assert result.delay_minutes == 0
    assert result.overtime_tier1_minutes == 0
    assert result.overtime_tier2_minutes == 0


def test_overtime_splits_into_tiers():
    calc = StandardHoursCalculator()
    rec = _record(clock_in="08:00", lunch_out="12:00", lunch_in="13:00", clock_out="19:30")

    result = calc.compute(rec, is_saturday=False, is_sunday=False)

    assert result.worked_minutes == 630
    assert result.overtime_tier1_minutes == 120
    assert result.overtime_tier2_minutes == 30


def test_saturday_at_baseline_has_no_overtime():
    calc = StandardHoursCalculator()
    rec = _record(SATURDAY, clock_in="08:00", clock_out="12:00")

    result = calc.compute(rec, is_saturday=True, is_sunday=False)

    assert result.worked_minutes == 240
    assert result.expected_minutes == 240
    assert result.overtime_tier1_minutes == 0
    assert result.overtime_tier2_minutes == 0


def test_saturday_overtime_above_four_hours():
    calc = StandardHoursCalculator()
    split = calc.overtime(240 + 150, is_saturday=True)

    assert (split.tier1, split.tier2) == (120, 30)


def test_morning_only_pattern():
    calc = StandardHoursCalculator()
    assert calc.worked_minutes(_record(clock_in="08:00", lunch_out="12:00")) == 240


def test_day_off_ignores_punches():
    calc = StandardHoursCalculator()
    rec = _record(clock_in="08:00", clock_out="17:00", day_type=DayType.DAY_OFF)

    result = calc.compute(rec, is_saturday=False, is_sunday=False)

    assert result.worked_minutes == 0
    assert result.expected_minutes == 0


def test_partial_punches_count_zero_and_are_logged(caplog):
    calc = StandardHoursCalculator()
    rec = _record(clock_in="08:00", lunch_out="12:00", lunch_in="13:00")

    with caplog.at_level(logging.WARNING):
        worked = calc.worked_minutes(rec)

    assert worked == 0
    assert any("unrecognized punch pattern" in r.getMessage() for r in caplog.records)


def test_empty_day_is_not_logged(caplog):
    calc = StandardHoursCalculator()

    with caplog.at_level(logging.WARNING):
        assert calc.worked_minutes(_record()) == 0

    assert caplog.records == []


def test_delay_never_negative():
    calc = StandardHoursCalculator()
    assert calc.delay_minutes(600, 480) == 0
    assert calc.delay_minutes(400, 480) == 80


def test_short_lunch():
    calc = StandardHoursCalculator()
    assert calc.has_short_lunch(_record(lunch_out="12:00", lunch_in="12:30")) is True
    assert calc.has_short_lunch(_record(lunch_out="12:00", lunch_in="13:00")) is False
    assert calc.has_short_lunch(_record(lunch_out="12:00")) is False
    assert calc.has_short_lunch(_record(lunch_out="12:00", lunch_in="12:00")) is False


def test_out_of_order_punches_give_negative_worked_time():
    calc = StandardHoursCalculator()
    rec = _record(clock_in="17:00", clock_out="08:00")

    assert calc.worked_minutes(rec) == -540

    result = calc.compute(rec, is_saturday=False, is_sunday=False)
    assert result.worked_minutes == -540
    assert result.delay_minutes == 1020
    assert result.overtime_tier1_minutes == 0
