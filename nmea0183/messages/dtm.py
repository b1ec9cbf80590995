"""DTM sentence decoder.

DTM (Datum Reference) names the local datum of the reported positions and
its offset from the reference datum.

DTM Sentence Format:
    $GPDTM,999,,0.08,N,0.07,E,-47.7,W84*1B
           |   ||    | |    | |     |
           |   ||    | |    | |     +-- Reference datum
           |   ||    | |    | +-- Altitude offset (m)
           |   ||    | +----+-- Longitude offset (minutes) + E/W
           |   |+----+-- Latitude offset (minutes) + N/S
           |   +-- Sub-datum code
           +-- Local datum code (W84, 999 = user defined)

The offsets are minutes of arc, not packed DDDMM.MMMM coordinates.
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import DTMMessage
from nmea0183.units import EAST_WEST_CODES, NORTH_SOUTH_CODES, Meter


@register("DTM", DTMMessage)
def decode_dtm(fields: FieldReader) -> DTMMessage:
    datum = fields.text("datum")
    sub_datum = fields.text("sub-datum")
    latitude_offset = fields.minutes("latitude offset")
    north_south = fields.code("north/south", NORTH_SOUTH_CODES)
    longitude_offset = fields.minutes("longitude offset")
    east_west = fields.code("east/west", EAST_WEST_CODES)
    altitude_offset = fields.number("altitude offset", Meter)
    reference_datum = fields.text("reference datum")

    return DTMMessage(
        datum=datum,
        sub_datum=sub_datum,
        latitude_offset=latitude_offset,
        north_south=north_south,
        longitude_offset=longitude_offset,
        east_west=east_west,
        altitude_offset=altitude_offset,
        reference_datum=reference_datum,
    )
