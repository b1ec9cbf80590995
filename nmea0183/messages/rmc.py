"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) is the one sentence that carries
position, velocity and date together.

RMC Sentence Format:
    $GPRMC,083559.00,A,4717.11437,N,00833.91522,E,0.004,77.52,091202,,,A,V*2D
           |         | |          | |           | |     |     |      ||| |
           |         | |          | |           | |     |     |      ||| +-- Navigational status
           |         | |          | |           | |     |     |      ||+-- Position mode
           |         | |          | |           | |     |     |      |+-- Magnetic variation E/W
           |         | |          | |           | |     |     |      +-- Magnetic variation (deg)
           |         | |          | |           | |     |     +-- Date (DDMMYY)
           |         | |          | |           | |     +-- Course over ground (deg true)
           |         | |          | |           | +-- Speed over ground (knots)
           |         | |          | +-----------+-- Longitude + E/W
           |         | +----------+-- Latitude + N/S
           |         +-- Status (A=valid, V=invalid)
           +-- UTC time (HHMMSS.ss)
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import RMCMessage
from nmea0183.units import (
    EAST_WEST_CODES,
    NAVIGATIONAL_STATUS_CODES,
    NORTH_SOUTH_CODES,
    POSITION_MODE_CODES,
    STATUS_CODES,
    Degree,
    Knot,
)


@register("RMC", RMCMessage)
def decode_rmc(fields: FieldReader) -> RMCMessage:
    utc_time = fields.time("utc time")
    status = fields.code("status", STATUS_CODES)
    latitude = fields.degree("latitude")
    north_south = fields.code("north/south", NORTH_SOUTH_CODES)
    longitude = fields.degree("longitude")
    east_west = fields.code("east/west", EAST_WEST_CODES)
    speed = fields.number("speed over ground", Knot)
    # Plain decimal degrees, not a packed DDDMM.MMMM coordinate.
    course = fields.number("course over ground", Degree)
    date = fields.date("date")
    magnetic_variation = fields.number("magnetic variation", Degree)
    magnetic_variation_direction = fields.optional_code("magnetic variation e/w", EAST_WEST_CODES)
    position_mode = fields.code("position mode", POSITION_MODE_CODES)
    navigational_status = fields.code("navigational status", NAVIGATIONAL_STATUS_CODES)

    return RMCMessage(
        utc_time=utc_time,
        status=status,
        latitude=latitude,
        north_south=north_south,
        longitude=longitude,
        east_west=east_west,
        speed=speed,
        course=course,
        date=date,
        magnetic_variation=magnetic_variation,
        magnetic_variation_direction=magnetic_variation_direction,
        position_mode=position_mode,
        navigational_status=navigational_status,
    )
