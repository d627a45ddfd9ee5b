from datetime import date

from dateutil import parser as date_parser

from .base import ValidatorBase
from .numbers import to_number
from ..schema.const import MAX_TIMESTAMP
from ..schema.util import is_number


def parse_date(v):
    """ Parse a date string in any of the commonly used formats.

    ```python
    parse_date('2018-05-10 15:13')  #-> datetime.datetime(2018, 5, 10, 15, 13)
    parse_date('Thu, 10 May 2018 07:13:00 GMT')  #-> datetime.datetime(2018, 5, 10, 7, 13, tzinfo=tzutc())
    parse_date('abc')  #-> None
    ```

    :type v: str
    :rtype: datetime.datetime|None
    """
    try:
        return date_parser.parse(v)
    except (ValueError, OverflowError):  # ParserError is a ValueError
        return None


def is_timestamp(v):
    """ Test that the number denotes a point in time: milliseconds since the epoch, within the supported range """
    return abs(v) <= MAX_TIMESTAMP  # NaN never compares


class Date(ValidatorBase):
    """ Validate a date: either a Python `date`/`datetime`, or a string that can be parsed as a date.

    ```python
    from datetime import datetime
    from fieldcheck.validators import Date

    Date()(datetime.now())  #-> True
    Date()('2018-05-10')  #-> True
    Date()(12345)  #-> False
    Date()('abc')  #-> False
    ```
    """

    name = 'date'

    def __call__(self, v):
        if isinstance(v, date):
            return True
        return isinstance(v, str) and parse_date(v) is not None


class Time(ValidatorBase):
    """ Validate a point in time: a UNIX timestamp (in milliseconds) or a time string.

    Strings are tried as a numeric timestamp first, and as a date string then.

    ```python
    from fieldcheck.validators import Time

    Time()(1525939200000)  #-> True
    Time()('2018-05-10 15:13')  #-> True
    Time()('abc')  #-> False
    Time()(True)  #-> False
    ```
    """

    name = 'time'

    def __call__(self, v):
        if is_number(v):
            return is_timestamp(v)
        if not isinstance(v, str):
            return False

        number = to_number(v)
        if number is not None and is_timestamp(number):
            return True
        return parse_date(v) is not None


__all__ = ('Date', 'Time',)
