from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date

from .exceptions import CalendarConstructionError
from .observances import Observance, MonthDayObservance


@dataclass(frozen=True, eq=False)
class Holiday(ABC):
    '''
    Named holiday rule. Two holidays are the same holiday when their names match, whatever their rules.
    '''
    name: str
    description: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise CalendarConstructionError(f'Holiday name must be a non-empty string. Got {self.name!r}.')
        if self.description is None:
            object.__setattr__(self, 'description', '')

    @abstractmethod
    def resolve(self, year: int) -> date | None:
        pass

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Holiday):
            return NotImplemented
        return self.name == other.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class FixedHoliday(Holiday):
    month: int
    day: int

    _observance: MonthDayObservance = field(init=False, repr=False)

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, '_observance', MonthDayObservance(self.month, self.day))

    def resolve(self, year: int) -> date:
        return self._observance.get_date(year)


@dataclass(frozen=True, eq=False)
class FloatingHoliday(Holiday):
    observance: Observance

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.observance, Observance):
            raise TypeError(f'observance must be an Observance. Got {type(self.observance)}.')

    def resolve(self, year: int) -> date | None:
        return self.observance.get_date(year)
