import pytest

from hour_bank.core.exceptions import ValidationError
from hour_bank.timesheet.calendar import generate_month_days, month_label


def test_february_leap_and_common_year():
    assert len(generate_month_days(2024, 1)) == 29
    assert len(generate_month_days(2025, 1)) == 28
    assert len(generate_month_days(1900, 1)) == 28
    assert len(generate_month_days(2000, 1)) == 29


def test_weekday_classification():
    # March 2025 starts on a Saturday
    days = generate_month_days(2025, 2)

    first, second = days[0], days[1]
    assert first.day_number == 1
    assert first.weekday_name == "Sábado"
    assert first.is_saturday and not first.is_sunday
    assert second.weekday_name == "Domingo"
    assert second.is_sunday and not second.is_saturday
    assert days[2].weekday_name == "Segunda"
    assert len(days) == 31


def test_date_key_uses_zero_based_month():
    days = generate_month_days(2025, 0)

    assert days[0].date_key == "2025-0-1"
    assert days[-1].date_key == "2025-0-31"
    assert days[-1].date.month == 1


def test_generation_is_repeatable():
    assert generate_month_days(2025, 11) == generate_month_days(2025, 11)


@pytest.mark.parametrize("month", [-1, 12])
def test_invalid_month(month):
    with pytest.raises(ValidationError):
        generate_month_days(2025, month)


def test_month_label():
    assert month_label(2025, 2) == "MARÇO/2025"
