"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the fix and
the dilution of precision of the solution.

GSA Sentence Format:
    $GNGSA,A,3,80,71,73,79,69,,,,,,,,1.83,1.09,1.47*17
           | | |                     |    |    |
           | | |                     |    |    +-- VDOP
           | | |                     |    +-- HDOP
           | | |                     +-- PDOP
           | | +-- 12 satellite ID slots (empty when unused)
           | +-- Navigation mode (1=no fix, 2=2D, 3=3D)
           +-- Operation mode (M=manual, A=automatic)
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import GSAMessage
from nmea0183.units import NAVIGATION_MODE_CODES, OPERATION_MODE_CODES

_SATELLITE_SLOTS = 12


def _decode_satellite_id(fields: FieldReader) -> int | None:
    return fields.number("satellite id", int)


@register("GSA", GSAMessage)
def decode_gsa(fields: FieldReader) -> GSAMessage:
    operation_mode = fields.code("operation mode", OPERATION_MODE_CODES)
    navigation_mode = fields.code("navigation mode", NAVIGATION_MODE_CODES)
    satellite_ids = fields.array(_SATELLITE_SLOTS, _decode_satellite_id)
    pdop = fields.number("pdop")
    hdop = fields.number("hdop")
    vdop = fields.number("vdop")

    return GSAMessage(
        operation_mode=operation_mode,
        navigation_mode=navigation_mode,
        satellite_ids=satellite_ids,
        pdop=pdop,
        hdop=hdop,
        vdop=vdop,
    )
