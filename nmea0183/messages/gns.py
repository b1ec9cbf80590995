"""GNS sentence decoder.

GNS (GNSS Fix Data) is the multi-constellation counterpart of GGA.

GNS Sentence Format:
    $GNGNS,103600.01,5114.51176,N,00012.29380,W,ANNN,07,1.18,111.5,45.6,,,V*00
           |         |          | |           | |    |  |    |     |    ||  |
           |         |          | |           | |    |  |    |     |    ||  +-- Navigational status
           |         |          | |           | |    |  |    |     |    |+-- DGPS station ID
           |         |          | |           | |    |  |    |     |    +-- DGPS age (s)
           |         |          | |           | |    |  |    |     +-- Geoid separation (m)
           |         |          | |           | |    |  |    +-- Altitude above MSL (m)
           |         |          | |           | |    |  +-- HDOP
           |         |          | |           | |    +-- Number of satellites
           |         |          | |           | +-- Position mode per constellation
           |         |          | +-----------+-- Longitude + E/W (E/W may be empty)
           |         +----------+-- Latitude + N/S (N/S may be empty)
           +-- UTC time (HHMMSS.ss)

Unlike GGA, the altitude and separation have no unit columns.
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import GNSMessage
from nmea0183.units import (
    EAST_WEST_CODES,
    NAVIGATIONAL_STATUS_CODES,
    NORTH_SOUTH_CODES,
    POSITION_MODE_CODES,
    Meter,
    Second,
)


@register("GNS", GNSMessage)
def decode_gns(fields: FieldReader) -> GNSMessage:
    utc_time = fields.time("utc time")
    latitude = fields.degree("latitude")
    north_south = fields.optional_code("north/south", NORTH_SOUTH_CODES)
    longitude = fields.degree("longitude")
    east_west = fields.optional_code("east/west", EAST_WEST_CODES)
    position_modes = fields.codes("position modes", POSITION_MODE_CODES)
    num_satellites = fields.number("satellites used", int)
    hdop = fields.number("hdop")
    altitude = fields.number("altitude", Meter)
    geoid_separation = fields.number("geoid separation", Meter)
    differential_age = fields.number("differential age", Second)
    differential_station = fields.number("differential station", int)
    navigational_status = fields.code("navigational status", NAVIGATIONAL_STATUS_CODES)

    return GNSMessage(
        utc_time=utc_time,
        latitude=latitude,
        north_south=north_south,
        longitude=longitude,
        east_west=east_west,
        position_modes=position_modes,
        num_satellites=num_satellites,
        hdop=hdop,
        altitude=altitude,
        geoid_separation=geoid_separation,
        differential_age=differential_age,
        differential_station=differential_station,
        navigational_status=navigational_status,
    )
