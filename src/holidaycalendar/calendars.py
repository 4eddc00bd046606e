import calendar
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta, MINYEAR, MAXYEAR
from enum import Enum
import logging
from typing import Any, Self

import numpy as np
import pandas as pd

from .date_rolls import DateRoll, NO_ROLL
from .exceptions import CalendarConstructionError
from .holidays import Holiday
from .instants import to_utc_date
from .views import ReadOnlySet

logger = logging.getLogger(__name__)

STANDARD_WEEKEND = ReadOnlySet((calendar.SATURDAY, calendar.SUNDAY))


class MergeNamePolicy(Enum):
    KEEP_LEFT = 'keep left'
    CONCATENATE = 'concatenate'


@dataclass(frozen=True, slots=True)
class HolidayDate:
    holiday: Holiday
    date: date

    @property
    def name(self) -> str:
        return self.holiday.name

    @property
    def description(self) -> str:
        return self.holiday.description

    def __str__(self) -> str:
        return f'{self.date.isoformat()} {self.holiday.name}'


def _unique_by_name(holidays: Iterable[Holiday], code: str) -> ReadOnlySet[Holiday]:
    unique: dict[str, Holiday] = {}
    for holiday in holidays:
        if not isinstance(holiday, Holiday):
            raise CalendarConstructionError(f'Calendar {code}: holidays must be Holiday objects. Got {type(holiday)}.')
        if holiday.name in unique:
            logger.debug('Calendar %s: dropping duplicate holiday %r.', code, holiday.name)
            continue
        unique[holiday.name] = holiday
    return ReadOnlySet(unique.values())


def _weekend_set(weekend_days: Iterable[int], code: str) -> ReadOnlySet[int]:
    days = set(weekend_days)
    for day in days:
        if not isinstance(day, int) or isinstance(day, bool):
            raise CalendarConstructionError(f'Calendar {code}: weekend days must be ints (Monday=0 ... Sunday=6). Got {day!r}.')
        if not calendar.MONDAY <= day <= calendar.SUNDAY:
            raise CalendarConstructionError(f'Calendar {code}: weekend days must be between {calendar.MONDAY} and {calendar.SUNDAY}. Got {day}.')
    if len(days) == 7:
        raise CalendarConstructionError(f'Calendar {code}: weekend days cannot cover the whole week.')
    return ReadOnlySet(sorted(days))


@dataclass(frozen=True, slots=True)
class HolidayCalendar:
    '''
    Set of holidays plus the weekend days and date roll applied to them.

    Instances are immutable: holidays and weekend_days are read-only views and merge builds a new calendar.
    Holidays are unique by name, the first one given wins.
    '''
    code: str
    name: str
    holidays: ReadOnlySet[Holiday] = field(default=ReadOnlySet())
    weekend_days: ReadOnlySet[int] = field(default=STANDARD_WEEKEND)
    date_roll: DateRoll = field(default=NO_ROLL)

    def __post_init__(self):
        for attr in ('code', 'name'):
            value = getattr(self, attr)
            if not isinstance(value, str) or not value.strip():
                raise CalendarConstructionError(f'HolidayCalendar {attr} must be a non-empty string. Got {value!r}.')
        holidays = () if self.holidays is None else self.holidays
        weekend_days = STANDARD_WEEKEND if self.weekend_days is None else self.weekend_days
        date_roll = NO_ROLL if self.date_roll is None else self.date_roll
        if not isinstance(date_roll, DateRoll):
            raise CalendarConstructionError(f'Calendar {self.code}: date_roll must be a DateRoll. Got {type(date_roll)}.')
        object.__setattr__(self, 'holidays', _unique_by_name(holidays, self.code))
        object.__setattr__(self, 'weekend_days', _weekend_set(weekend_days, self.code))
        object.__setattr__(self, 'date_roll', date_roll)

    @staticmethod
    def builder() -> 'HolidayCalendarBuilder':
        return HolidayCalendarBuilder()

    def calculate(self, year: int) -> list[HolidayDate]:
        '''
        Holidays of year, rolled with date_roll and sorted by date.
        Holidays not observed in year are left out. Ties keep the holidays insertion order.
        '''
        holiday_dates = []
        for holiday in self.holidays:
            t = holiday.resolve(year)
            if t is None:
                logger.debug('Calendar %s: %r not observed in %d.', self.code, holiday.name, year)
                continue
            rolled = self.date_roll.roll(t, self.weekend_days)
            if rolled != t:
                logger.debug('Calendar %s: %r rolled from %s to %s (%s).', self.code, holiday.name, t, rolled, self.date_roll)
            holiday_dates.append(HolidayDate(holiday, rolled))
        holiday_dates.sort(key=lambda hd: hd.date)
        return holiday_dates

    def get_holidays(self, year: int) -> list[date]:
        return [hd.date for hd in self.calculate(year)]

    def get_holiday(self, name: str) -> Holiday | None:
        for holiday in self.holidays:
            if holiday.name == name:
                return holiday
        return None

    def merge(self, other: Self | None, name_policy: MergeNamePolicy=MergeNamePolicy.KEEP_LEFT) -> Self:
        '''
        New calendar holding the holidays of both calendars. This calendar's code goes first in the merged code and
        its weekend days, date roll and holiday definitions (on name collisions) are kept.
        Merging with None or with itself returns this same instance.
        '''
        if other is None or other is self:
            return self
        if name_policy == MergeNamePolicy.KEEP_LEFT:
            name = self.name
        elif name_policy == MergeNamePolicy.CONCATENATE:
            name = f'{self.name}/{other.name}'
        else:
            raise ValueError(f'name_policy {name_policy} not valid.')
        for holiday in other.holidays:
            if holiday in self.holidays:
                logger.debug('Merging %s into %s: keeping %r from %s.', other.code, self.code, holiday.name, self.code)
        return HolidayCalendar(
            code=f'{self.code}/{other.code}',
            name=name,
            holidays=[*self.holidays, *other.holidays],
            weekend_days=self.weekend_days,
            date_roll=self.date_roll
        )

    def __add__(self, other: Self) -> Self:
        return self.merge(other)

    def is_weekend(self, t: date) -> bool:
        return t.weekday() in self.weekend_days

    def is_weekend_utc(self, instant: Any) -> bool | np.ndarray:
        '''
        Whether the UTC calendar date of instant is a weekend day. instant can be a datetime (naive ones are taken
        as UTC), a date, a POSIX timestamp in seconds, a numpy datetime64 or an iterable of those, in which case
        a boolean array is returned.
        '''
        utc_date = to_utc_date(instant)
        if isinstance(utc_date, date):
            return self.is_weekend(utc_date)
        return np.array([self.is_weekend(t) for t in utc_date], dtype=bool)

    def is_holiday(self, t: date) -> bool:
        # Rolling can move a holiday into the previous or next year.
        for year in (t.year - 1, t.year, t.year + 1):
            if not MINYEAR <= year <= MAXYEAR:
                continue
            if t in self.get_holidays(year):
                return True
        return False

    def is_business_day(self, t: date) -> bool:
        return not self.is_weekend(t) and not self.is_holiday(t)

    def add_business_days(self, t: date, business_days: int) -> date:
        step = timedelta(days=1 if business_days >= 0 else -1)
        days_to_add = abs(business_days)
        while days_to_add > 0:
            t += step
            if self.is_business_day(t):
                days_to_add -= 1
        return t

    def to_frame(self, year: int) -> pd.DataFrame:
        holiday_dates = self.calculate(year)
        return pd.DataFrame({
            'name': [hd.name for hd in holiday_dates],
            'description': [hd.description for hd in holiday_dates],
            'date': [hd.date for hd in holiday_dates]
        })

    def __str__(self) -> str:
        return f"HolidayCalendar[code='{self.code}', name='{self.name}']"


class HolidayCalendarBuilder:
    '''
    Fluent construction of a HolidayCalendar. Validation happens in build().
    '''
    def __init__(self):
        self._code: str | None = None
        self._name: str | None = None
        self._holidays: list[Holiday] = []
        self._weekend_days: Iterable[int] = STANDARD_WEEKEND
        self._date_roll: DateRoll = NO_ROLL

    def code(self, code: str) -> Self:
        self._code = code
        return self

    def name(self, name: str) -> Self:
        self._name = name
        return self

    def holiday(self, holiday: Holiday) -> Self:
        self._holidays.append(holiday)
        return self

    def holidays(self, holidays: Iterable[Holiday]) -> Self:
        self._holidays.extend(holidays)
        return self

    def weekend_days(self, weekend_days: Iterable[int]) -> Self:
        self._weekend_days = weekend_days
        return self

    def date_roll(self, date_roll: DateRoll) -> Self:
        self._date_roll = date_roll
        return self

    def build(self) -> HolidayCalendar:
        return HolidayCalendar(
            code=self._code,
            name=self._name,
            holidays=self._holidays,
            weekend_days=self._weekend_days,
            date_roll=self._date_roll
        )
