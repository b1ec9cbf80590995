"""ZDA sentence decoder.

ZDA (Time and Date) carries a full four-digit year, unlike the DDMMYY date of
RMC, plus the local time zone offset.

ZDA Sentence Format:
    $GPZDA,082710.00,16,09,2002,00,00*64
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes
           |         |  |  |    +-- Local zone hours
           |         |  |  +-- Year (YYYY)
           |         |  +-- Month
           |         +-- Day
           +-- UTC time (HHMMSS.ss)
"""

import datetime

from nmea0183.dispatch import register
from nmea0183.errors import InvalidDateFieldError
from nmea0183.fields import FieldReader
from nmea0183.types import ZDAMessage


@register("ZDA", ZDAMessage)
def decode_zda(fields: FieldReader) -> ZDAMessage:
    utc_time = fields.time("utc time")
    day = fields.number("day", int)
    month = fields.number("month", int)
    year = fields.number("year", int)
    year_index = fields.index
    local_zone_hours = fields.number("local zone hours", int)
    local_zone_minutes = fields.number("local zone minutes", int)

    if day is not None and month is not None and year is not None:
        try:
            datetime.date(year, month, day)
        except ValueError as error:
            raise InvalidDateFieldError(f"{day:02d}/{month:02d}/{year}", str(error)).locate(
                year_index, "year"
            ) from None

    return ZDAMessage(
        utc_time=utc_time,
        day=day,
        month=month,
        year=year,
        local_zone_hours=local_zone_hours,
        local_zone_minutes=local_zone_minutes,
    )
