from abc import ABC, abstractmethod
import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta, MINYEAR, MAXYEAR
import logging

from dateutil.easter import easter, EASTER_WESTERN
from holidays import country_holidays

logger = logging.getLogger(__name__)


def _check_year(year: int):
    if not MINYEAR <= year <= MAXYEAR:
        raise ValueError(f'year must be between {MINYEAR} and {MAXYEAR}. Got {year}.')


def _check_month(month: int):
    if not 1 <= month <= 12:
        raise ValueError(f'month must be between 1 and 12. Got {month}.')


def _check_weekday(weekday: int):
    if not calendar.MONDAY <= weekday <= calendar.SUNDAY:
        raise ValueError(f'weekday must be between {calendar.MONDAY} (Monday) and {calendar.SUNDAY} (Sunday). Got {weekday}.')


@dataclass(frozen=True, kw_only=True)
class Observance(ABC):
    '''
    Rule giving the date of a holiday for a year, or None when the holiday is not observed that year.
    since and until bound the years in which the rule applies (both inclusive).
    '''
    since: int | None = field(default=None)
    until: int | None = field(default=None)

    def __post_init__(self):
        if self.since is not None and self.until is not None and self.since > self.until:
            raise ValueError(f'since ({self.since}) must be less or equal than until ({self.until}).')

    def applies_to(self, year: int) -> bool:
        if self.since is not None and year < self.since:
            return False
        if self.until is not None and year > self.until:
            return False
        return True

    def get_date(self, year: int) -> date | None:
        _check_year(year)
        if not self.applies_to(year):
            return None
        return self._get_date(year)

    @abstractmethod
    def _get_date(self, year: int) -> date | None:
        pass

    def __call__(self, year: int) -> date | None:
        return self.get_date(year)


@dataclass(frozen=True)
class OrdinalWeekdayObservance(Observance):
    '''
    Nth weekday of a month, e.g. ordinal=1, weekday=calendar.MONDAY, month=9 is the first Monday of September.
    A 5th occurrence not present in a given month gives None.
    '''
    ordinal: int
    weekday: int
    month: int

    def __post_init__(self):
        super().__post_init__()
        if not 1 <= self.ordinal <= 5:
            raise ValueError(f'ordinal must be between 1 and 5. Got {self.ordinal}. Use LastWeekdayObservance for the last occurrence.')
        _check_weekday(self.weekday)
        _check_month(self.month)

    def _get_date(self, year: int) -> date | None:
        first_day = date(year, self.month, 1)
        days_to_add = (self.weekday - first_day.weekday()) % 7
        first_weekday_occurrence = first_day + timedelta(days=days_to_add)
        t = first_weekday_occurrence + timedelta(weeks=self.ordinal - 1)
        if t.month != self.month:
            return None
        return t


@dataclass(frozen=True)
class LastWeekdayObservance(Observance):
    weekday: int
    month: int

    def __post_init__(self):
        super().__post_init__()
        _check_weekday(self.weekday)
        _check_month(self.month)

    def _get_date(self, year: int) -> date:
        last_day = date(year, self.month, calendar.monthrange(year, self.month)[1])
        days_to_subtract = (last_day.weekday() - self.weekday) % 7
        return last_day - timedelta(days=days_to_subtract)


@dataclass(frozen=True)
class MonthDayObservance(Observance):
    month: int
    day: int

    def __post_init__(self):
        super().__post_init__()
        _check_month(self.month)
        # 2000 is a leap year, so Feb 29 passes here and fails only on resolution in non leap years.
        date(2000, self.month, self.day)

    def _get_date(self, year: int) -> date:
        return date(year, self.month, self.day)


@dataclass(frozen=True)
class OffsetObservance(Observance):
    '''
    Date of anchor shifted by a fixed number of days. None when anchor is not observed.
    '''
    anchor: Observance
    days: int = field(default=0)

    def _get_date(self, year: int) -> date | None:
        t = self.anchor.get_date(year)
        if t is None:
            return None
        return t + timedelta(days=self.days)


@dataclass(frozen=True)
class EasterObservance(Observance):
    '''
    Easter Sunday plus days. days=-2 is Good Friday, days=1 is Easter Monday.
    '''
    days: int = field(default=0)
    method: int = field(default=EASTER_WESTERN)

    def _get_date(self, year: int) -> date:
        return easter(year, method=self.method) + timedelta(days=self.days)


@dataclass(frozen=True, init=False)
class FirstOfObservance(Observance):
    '''
    First non None date among observances. Used for holidays whose rule changed over time.
    '''
    observances: tuple[Observance, ...]

    def __init__(self, *observances: Observance, since: int | None=None, until: int | None=None):
        if len(observances) == 0:
            raise ValueError('At least one observance must be provided.')
        object.__setattr__(self, 'observances', tuple(observances))
        object.__setattr__(self, 'since', since)
        object.__setattr__(self, 'until', until)
        self.__post_init__()

    def _get_date(self, year: int) -> date | None:
        for observance in self.observances:
            t = observance.get_date(year)
            if t is not None:
                return t
        return None


@dataclass(frozen=True)
class CountryHolidayObservance(Observance):
    '''
    Looks up a holiday by its exact name in the country calendars of the holidays package.
    Observed (shifted) dates are excluded. Date rolling is the calendar's job.
    '''
    country: str
    holiday_name: str
    subdiv: str | None = field(default=None)

    def _get_date(self, year: int) -> date | None:
        country_calendar = country_holidays(self.country, subdiv=self.subdiv, years=year, observed=False)
        for t, name in sorted(country_calendar.items()):
            if self.holiday_name in name.split('; '):
                return t
        logger.debug('Holiday %r not found in %s calendar for %d.', self.holiday_name, self.country, year)
        return None
