from datetime import date

import pytest

from holidaycalendar import CalendarConstructionError, FixedHoliday, FloatingHoliday
from holidaycalendar.us import LABOR_DAY


def test_fixed_holiday_resolves_every_year():
    independence_day = FixedHoliday('Independence Day', 'Fourth of July', 7, 4)
    for year in range(1776, 2101):
        test_value = independence_day.resolve(year)
        assert test_value == date(year, 7, 4), f'Independence Day {year} resolved to {test_value}'


def test_floating_holiday_passes_observance_through():
    labor_day = FloatingHoliday('Labor Day', 'Recognition of American labor', LABOR_DAY)
    assert labor_day.resolve(2021) == date(2021, 9, 6)
    assert labor_day.resolve(1893) is None


def test_holidays_are_equal_by_name():
    fixed = FixedHoliday('Labor Day', '', 9, 1)
    floating = FloatingHoliday('Labor Day', 'Recognition of American labor', LABOR_DAY)
    assert fixed == floating
    assert hash(fixed) == hash(floating)
    assert len({fixed, floating}) == 1

    assert FixedHoliday('labor day', '', 9, 1) != floating


def test_holiday_description_may_be_empty():
    holiday = FixedHoliday("New Year's Day", '', 1, 1)
    assert holiday.description == ''
    assert str(holiday) == "New Year's Day"


@pytest.mark.parametrize('name', ['', None])
def test_holiday_name_is_required(name):
    with pytest.raises(CalendarConstructionError):
        FixedHoliday(name, '', 1, 1)


def test_fixed_holiday_rejects_invalid_month_day():
    with pytest.raises(ValueError):
        FixedHoliday('Nowhere Day', '', 13, 1)
    with pytest.raises(ValueError):
        FixedHoliday('Nowhere Day', '', 4, 31)


def test_floating_holiday_requires_an_observance():
    with pytest.raises(TypeError):
        FloatingHoliday('Labor Day', '', lambda year: date(year, 9, 1))
