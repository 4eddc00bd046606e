import pytest

from holidaycalendar import HolidayCalendar, get_sifma_us_calendar


@pytest.fixture
def sifma_calendar() -> HolidayCalendar:
    return get_sifma_us_calendar()


@pytest.fixture
def frb_calendar() -> HolidayCalendar:
    return HolidayCalendar.builder().code('FRB').name('Federal Reserve Board').build()
