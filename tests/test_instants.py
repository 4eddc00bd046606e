from datetime import date, datetime

from dateutil import tz
import numpy as np
import pytest

from holidaycalendar import to_utc_date

NEW_YORK = tz.gettz('America/New_York')
TOKYO = tz.gettz('Asia/Tokyo')


def test_to_utc_date_aware_datetime():
    assert to_utc_date(datetime(2021, 12, 19, tzinfo=NEW_YORK)) == date(2021, 12, 19)
    assert to_utc_date(datetime(2021, 12, 17, 23, 0, tzinfo=NEW_YORK)) == date(2021, 12, 18)
    assert to_utc_date(datetime(2021, 12, 20, tzinfo=TOKYO)) == date(2021, 12, 19)


def test_to_utc_date_naive_datetime_is_utc():
    assert to_utc_date(datetime(2021, 12, 20, 1, 0)) == date(2021, 12, 20)


def test_to_utc_date_date():
    assert to_utc_date(date(2021, 12, 19)) == date(2021, 12, 19)


def test_to_utc_date_timestamp():
    timestamp = datetime(2021, 12, 19, 5, 0, tzinfo=tz.UTC).timestamp()
    assert to_utc_date(timestamp) == date(2021, 12, 19)
    assert to_utc_date(int(timestamp)) == date(2021, 12, 19)
    assert to_utc_date(0) == date(1970, 1, 1)


def test_to_utc_date_numpy():
    assert to_utc_date(np.datetime64('2021-12-18T12:00')) == date(2021, 12, 18)
    instants = np.array(['2021-12-18T12:00', '2021-12-20T00:00'], dtype='datetime64[m]')
    assert to_utc_date(instants) == [date(2021, 12, 18), date(2021, 12, 20)]


def test_to_utc_date_iterable():
    instants = [datetime(2021, 12, 20, tzinfo=TOKYO), date(2021, 12, 21)]
    assert to_utc_date(instants) == [date(2021, 12, 19), date(2021, 12, 21)]


def test_to_utc_date_rejects_strings_and_nat():
    with pytest.raises(TypeError):
        to_utc_date('2021-12-19')
    with pytest.raises(ValueError):
        to_utc_date(np.datetime64('NaT'))


def test_is_weekend_utc_datetime(sifma_calendar):
    # Sunday midnight in New York is Sunday 05:00 UTC.
    assert sifma_calendar.is_weekend_utc(datetime(2021, 12, 19, tzinfo=NEW_YORK))
    # Monday midnight in Tokyo is still Sunday in UTC.
    assert sifma_calendar.is_weekend_utc(datetime(2021, 12, 20, tzinfo=TOKYO))
    assert not sifma_calendar.is_weekend(date(2021, 12, 20))
    # Friday late evening in New York is already Saturday in UTC.
    assert sifma_calendar.is_weekend_utc(datetime(2021, 12, 17, 23, 0, tzinfo=NEW_YORK))
    assert not sifma_calendar.is_weekend_utc(datetime(2021, 12, 17, 12, 0, tzinfo=NEW_YORK))


def test_is_weekend_utc_timestamp(sifma_calendar):
    sunday = datetime(2021, 12, 19, tzinfo=NEW_YORK).timestamp()
    monday = datetime(2021, 12, 20, 12, 0, tzinfo=NEW_YORK).timestamp()
    assert sifma_calendar.is_weekend_utc(sunday)
    assert not sifma_calendar.is_weekend_utc(monday)


def test_is_weekend_utc_array(sifma_calendar):
    instants = np.array(['2021-12-18T12:00', '2021-12-20T00:00'], dtype='datetime64[m]')
    test_value = sifma_calendar.is_weekend_utc(instants)
    assert isinstance(test_value, np.ndarray)
    assert test_value.tolist() == [True, False]


def test_to_utc_date_numpy_numbers():
    timestamp = datetime(2021, 12, 19, 5, 0, tzinfo=tz.UTC).timestamp()
    assert to_utc_date(np.int64(timestamp)) == date(2021, 12, 19)
    assert to_utc_date(np.int32(0)) == date(1970, 1, 1)
    assert to_utc_date(np.float64(timestamp)) == date(2021, 12, 19)
    assert to_utc_date(np.float32(0.0)) == date(1970, 1, 1)


def test_is_weekend_utc_epoch_array(sifma_calendar):
    sunday = datetime(2021, 12, 19, tzinfo=NEW_YORK).timestamp()
    monday = datetime(2021, 12, 20, 12, 0, tzinfo=NEW_YORK).timestamp()
    epochs = np.array([sunday, monday], dtype=np.int64)
    assert to_utc_date(epochs) == [date(2021, 12, 19), date(2021, 12, 20)]
    test_value = sifma_calendar.is_weekend_utc(epochs)
    assert test_value.tolist() == [True, False], f'Expected [True, False]. Obtained value: {test_value}'
    assert sifma_calendar.is_weekend_utc(np.int64(sunday))
