from abc import ABC, abstractmethod
from collections.abc import Collection
from dataclasses import dataclass
from datetime import date, timedelta

_one_day = timedelta(days=1)


def _is_weekend(t: date, weekend_days: Collection[int]) -> bool:
    return t.weekday() in weekend_days


def _following(t: date, weekend_days: Collection[int]) -> date:
    while _is_weekend(t, weekend_days):
        t += _one_day
    return t


def _preceding(t: date, weekend_days: Collection[int]) -> date:
    while _is_weekend(t, weekend_days):
        t -= _one_day
    return t


@dataclass(frozen=True)
class DateRoll(ABC):
    '''
    Adjusts a holiday date that falls on a weekend day. Dates outside weekend_days are returned unchanged.
    weekend_days must not hold all seven weekdays.
    '''
    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def roll(self, t: date, weekend_days: Collection[int]) -> date:
        pass

    def __call__(self, t: date, weekend_days: Collection[int]) -> date:
        return self.roll(t, weekend_days)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class NoRoll(DateRoll):
    name = 'no roll'

    def roll(self, t: date, weekend_days: Collection[int]) -> date:
        return t


@dataclass(frozen=True)
class RollBackward(DateRoll):
    name = 'roll backward'

    def roll(self, t: date, weekend_days: Collection[int]) -> date:
        return _preceding(t, weekend_days)


@dataclass(frozen=True)
class RollForward(DateRoll):
    name = 'roll forward'

    def roll(self, t: date, weekend_days: Collection[int]) -> date:
        return _following(t, weekend_days)


@dataclass(frozen=True)
class NearestWeekdayRoll(DateRoll):
    '''
    Moves to the closest non weekend day, forward on ties.
    With a Saturday/Sunday weekend this is the US federal observed rule: Saturday to Friday, Sunday to Monday.
    '''
    name = 'nearest weekday'

    def roll(self, t: date, weekend_days: Collection[int]) -> date:
        if not _is_weekend(t, weekend_days):
            return t
        following = _following(t, weekend_days)
        preceding = _preceding(t, weekend_days)
        if (t - preceding) < (following - t):
            return preceding
        return following


@dataclass(frozen=True)
class ModifiedRollForward(DateRoll):
    name = 'modified roll forward'

    def roll(self, t: date, weekend_days: Collection[int]) -> date:
        new_date = _following(t, weekend_days)
        if new_date.month == t.month:
            return new_date
        return _preceding(t, weekend_days)


@dataclass(frozen=True)
class ModifiedRollBackward(DateRoll):
    name = 'modified roll backward'

    def roll(self, t: date, weekend_days: Collection[int]) -> date:
        new_date = _preceding(t, weekend_days)
        if new_date.month == t.month:
            return new_date
        return _following(t, weekend_days)


NO_ROLL = NoRoll()
ROLL_BACKWARD = RollBackward()
ROLL_FORWARD = RollForward()
ROLL_NEAREST_WEEKDAY = NearestWeekdayRoll()
ROLL_MODIFIED_FORWARD = ModifiedRollForward()
ROLL_MODIFIED_BACKWARD = ModifiedRollBackward()
