"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B
           |         |          | |           | | |  |    |     | |    | ||
           |         |          | |           | | |  |    |     | |    | |+-- DGPS station ID
           |         |          | |           | | |  |    |     | |    | +-- DGPS age (s)
           |         |          | |           | | |  |    |     | +----+-- Geoid separation, M
           |         |          | |           | | |  |    +-----+-- Altitude above MSL, M
           |         |          | |           | | |  +-- HDOP (horizontal dilution)
           |         |          | |           | | +-- Number of satellites
           |         |          | |           | +-- Fix quality (0-8)
           |         |          | +-----------+-- Longitude + E/W
           |         +----------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    3 = PPS fix (Precise Positioning Service)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
    7 = Manual input mode
    8 = Simulator mode
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import GGAMessage
from nmea0183.units import EAST_WEST_CODES, FIX_QUALITY_CODES, NORTH_SOUTH_CODES, Meter, Second

_METERS = "M"


@register("GGA", GGAMessage)
def decode_gga(fields: FieldReader) -> GGAMessage:
    utc_time = fields.time("utc time")
    latitude = fields.degree("latitude")
    north_south = fields.code("north/south", NORTH_SOUTH_CODES)
    longitude = fields.degree("longitude")
    east_west = fields.code("east/west", EAST_WEST_CODES)
    quality = fields.code("fix quality", FIX_QUALITY_CODES)
    num_satellites = fields.number("satellites used", int)
    hdop = fields.number("hdop")
    altitude = fields.number("altitude", Meter)
    fields.unit("altitude unit", _METERS)
    geoid_separation = fields.number("geoid separation", Meter)
    fields.unit("geoid separation unit", _METERS)
    differential_age = fields.number("differential age", Second)
    differential_station = fields.number("differential station", int)

    return GGAMessage(
        utc_time=utc_time,
        latitude=latitude,
        north_south=north_south,
        longitude=longitude,
        east_west=east_west,
        quality=quality,
        num_satellites=num_satellites,
        hdop=hdop,
        altitude=altitude,
        geoid_separation=geoid_separation,
        differential_age=differential_age,
        differential_station=differential_station,
    )
