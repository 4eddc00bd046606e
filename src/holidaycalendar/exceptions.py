class CalendarConstructionError(ValueError):
    '''
    Raised when a HolidayCalendar cannot be built from the given arguments.
    '''


class UnsupportedOperationError(TypeError):
    '''
    Raised on any attempt to mutate a read-only calendar view.
    '''
