from .__version__ import __version__
from .exceptions import CalendarConstructionError, UnsupportedOperationError
from .views import ReadOnlySet
from .observances import Observance, OrdinalWeekdayObservance, LastWeekdayObservance, MonthDayObservance, OffsetObservance, EasterObservance, FirstOfObservance, CountryHolidayObservance
from .holidays import Holiday, FixedHoliday, FloatingHoliday
from .date_rolls import DateRoll, NoRoll, RollBackward, RollForward, NearestWeekdayRoll, ModifiedRollForward, ModifiedRollBackward
from .date_rolls import NO_ROLL, ROLL_BACKWARD, ROLL_FORWARD, ROLL_NEAREST_WEEKDAY, ROLL_MODIFIED_FORWARD, ROLL_MODIFIED_BACKWARD
from .instants import to_utc_date
from .calendars import HolidayCalendar, HolidayCalendarBuilder, HolidayDate, MergeNamePolicy, STANDARD_WEEKEND
from .us import get_sifma_us_calendar, get_us_federal_calendar
