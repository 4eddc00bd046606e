from calendar import MONDAY, THURSDAY

from .calendars import HolidayCalendar, STANDARD_WEEKEND
from .date_rolls import ROLL_NEAREST_WEEKDAY
from .holidays import FixedHoliday, FloatingHoliday
from .observances import (EasterObservance, FirstOfObservance, LastWeekdayObservance, MonthDayObservance,
                          OrdinalWeekdayObservance)

# First federal observance years. The Uniform Monday Holiday Act moved several holidays to Mondays from 1971.
LABOR_DAY = OrdinalWeekdayObservance(1, MONDAY, 9, since=1894)
MLK_DAY = OrdinalWeekdayObservance(3, MONDAY, 1, since=1986)
PRESIDENTS_DAY = FirstOfObservance(
    MonthDayObservance(2, 22, since=1885, until=1970),
    OrdinalWeekdayObservance(3, MONDAY, 2, since=1971)
)
MEMORIAL_DAY = FirstOfObservance(
    MonthDayObservance(5, 30, since=1868, until=1970),
    LastWeekdayObservance(MONDAY, 5, since=1971)
)
JUNETEENTH = MonthDayObservance(6, 19, since=2021)
COLUMBUS_DAY = FirstOfObservance(
    MonthDayObservance(10, 12, since=1937, until=1970),
    OrdinalWeekdayObservance(2, MONDAY, 10, since=1971)
)
VETERANS_DAY = FirstOfObservance(
    MonthDayObservance(11, 11, since=1938, until=1970),
    OrdinalWeekdayObservance(4, MONDAY, 10, since=1971, until=1977),
    MonthDayObservance(11, 11, since=1978)
)
THANKSGIVING = FirstOfObservance(
    LastWeekdayObservance(THURSDAY, 11, since=1863, until=1941),
    OrdinalWeekdayObservance(4, THURSDAY, 11, since=1942)
)
GOOD_FRIDAY = EasterObservance(days=-2)


def _us_holidays() -> dict[str, FixedHoliday | FloatingHoliday]:
    us_holidays = [
        FixedHoliday("New Year's Day", '', 1, 1),
        FloatingHoliday('Martin Luther King Jr. Day', "Honor of Martin Luther King Jr's birthday", MLK_DAY),
        FloatingHoliday("Presidents' Day", "Honor of George Washington's birthday", PRESIDENTS_DAY),
        FloatingHoliday('Memorial Day', 'Mourning of fallen US military personnel', MEMORIAL_DAY),
        FloatingHoliday('Juneteenth', 'Juneteenth National Independence Day', JUNETEENTH),
        FixedHoliday('Independence Day', 'Fourth of July', 7, 4),
        FloatingHoliday('Labor Day', 'Recognition of American labor', LABOR_DAY),
        FloatingHoliday('Columbus Day', 'Anniversary of arrival of Columbus in Americas', COLUMBUS_DAY),
        FloatingHoliday('Veterans Day', 'Honor of all US veterans', VETERANS_DAY),
        FloatingHoliday('Thanksgiving Day', 'Day of giving thanks', THANKSGIVING),
        FixedHoliday('Christmas Day', '', 12, 25),
    ]
    return {h.name: h for h in us_holidays}


def get_sifma_us_calendar() -> HolidayCalendar:
    us_holidays = _us_holidays()
    names = ["New Year's Day", 'Martin Luther King Jr. Day', "Presidents' Day", 'Memorial Day', 'Independence Day',
             'Labor Day', 'Columbus Day', 'Veterans Day', 'Thanksgiving Day', 'Christmas Day']
    return HolidayCalendar(
        code='SIFMA',
        name='SIFMA Holiday Recommendations (US)',
        holidays=[us_holidays[name] for name in names],
        weekend_days=STANDARD_WEEKEND,
        date_roll=ROLL_NEAREST_WEEKDAY
    )


def get_us_federal_calendar() -> HolidayCalendar:
    us_holidays = _us_holidays()
    names = ["New Year's Day", 'Martin Luther King Jr. Day', "Presidents' Day", 'Memorial Day', 'Juneteenth',
             'Independence Day', 'Labor Day', 'Columbus Day', 'Veterans Day', 'Thanksgiving Day', 'Christmas Day']
    return HolidayCalendar(
        code='USFED',
        name='US Federal Holidays',
        holidays=[us_holidays[name] for name in names],
        weekend_days=STANDARD_WEEKEND,
        date_roll=ROLL_NEAREST_WEEKDAY
    )
