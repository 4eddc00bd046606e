from collections.abc import Iterable
from datetime import date, datetime

from dateutil import tz
from multimethod import multimethod
import numpy as np


@multimethod
def to_utc_date(instant: datetime) -> date:
    '''
    Calendar date in UTC of an instant. Naive datetimes and numpy datetime64 values are taken as UTC,
    ints and floats as POSIX timestamps in seconds. Iterables give a list of dates.
    '''
    if instant.tzinfo is None:
        return instant.date()
    return instant.astimezone(tz.UTC).date()

@multimethod
def to_utc_date(instant: date) -> date:
    return instant

@multimethod
def to_utc_date(instant: int) -> date:
    return datetime.fromtimestamp(instant, tz=tz.UTC).date()

@multimethod
def to_utc_date(instant: float) -> date:
    return datetime.fromtimestamp(instant, tz=tz.UTC).date()

@multimethod
def to_utc_date(instant: np.integer) -> date:
    return datetime.fromtimestamp(int(instant), tz=tz.UTC).date()

@multimethod
def to_utc_date(instant: np.floating) -> date:
    return datetime.fromtimestamp(float(instant), tz=tz.UTC).date()

# float64 subclasses both float and np.floating.
@multimethod
def to_utc_date(instant: np.float64) -> date:
    return datetime.fromtimestamp(float(instant), tz=tz.UTC).date()

@multimethod
def to_utc_date(instant: np.datetime64) -> date:
    if np.isnat(instant):
        raise ValueError('Cannot convert NaT to a date.')
    return instant.astype('datetime64[D]').item()

@multimethod
def to_utc_date(instant: str) -> date:
    raise TypeError(f'Strings are not instants. Parse {instant!r} into a datetime first.')

@multimethod
def to_utc_date(instants: np.ndarray) -> list[date]:
    if instants.dtype.kind == 'M':
        if np.isnat(instants).any():
            raise ValueError('Cannot convert NaT to a date.')
        return instants.astype('datetime64[D]').tolist()
    return [to_utc_date(instant) for instant in instants]

@multimethod
def to_utc_date(instants: Iterable) -> list[date]:
    return [to_utc_date(instant) for instant in instants]
