"""GLL sentence decoder.

GLL (Geographic Position - Latitude/Longitude) carries the position with a
validity status, without altitude or accuracy metrics.

GLL Sentence Format:
    $GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60
           |          | |           | |         | |
           |          | |           | |         | +-- Position mode (A/D/E/M/S/N)
           |          | |           | |         +-- Status (A=valid, V=invalid)
           |          | |           | +-- UTC time (HHMMSS.ss)
           |          | +-----------+-- Longitude + E/W
           +----------+-- Latitude + N/S
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import GLLMessage
from nmea0183.units import EAST_WEST_CODES, NORTH_SOUTH_CODES, POSITION_MODE_CODES, STATUS_CODES


@register("GLL", GLLMessage)
def decode_gll(fields: FieldReader) -> GLLMessage:
    latitude = fields.degree("latitude")
    north_south = fields.code("north/south", NORTH_SOUTH_CODES)
    longitude = fields.degree("longitude")
    east_west = fields.code("east/west", EAST_WEST_CODES)
    utc_time = fields.time("utc time")
    status = fields.code("status", STATUS_CODES)
    position_mode = fields.code("position mode", POSITION_MODE_CODES)

    return GLLMessage(
        latitude=latitude,
        north_south=north_south,
        longitude=longitude,
        east_west=east_west,
        utc_time=utc_time,
        status=status,
        position_mode=position_mode,
    )
