"""VLW sentence decoder.

VLW (Dual Ground/Water Distance) reports distance travelled since reset and
in total, through the water and over ground.

VLW Sentence Format:
    $GPVLW,,N,,N,15.8,N,1.2,N*65
           | | | | |    | |   |
           | | | | |    | +---+-- Ground distance since reset (NM) + N
           | | | | +----+-- Total cumulative ground distance (NM) + N
           | | +-+-- Water distance since reset (NM) + N
           +-+-- Total cumulative water distance (NM) + N
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import VLWMessage
from nmea0183.units import DistanceUnit


@register("VLW", VLWMessage)
def decode_vlw(fields: FieldReader) -> VLWMessage:
    total_water_distance = fields.number("total water distance")
    total_water_distance_unit = fields.unit(
        "total water distance unit", DistanceUnit.NAUTICAL_MILE, required=False
    )
    water_distance = fields.number("water distance")
    water_distance_unit = fields.unit(
        "water distance unit", DistanceUnit.NAUTICAL_MILE, required=False
    )
    total_ground_distance = fields.number("total ground distance")
    total_ground_distance_unit = fields.unit(
        "total ground distance unit", DistanceUnit.NAUTICAL_MILE, required=False
    )
    ground_distance = fields.number("ground distance")
    ground_distance_unit = fields.unit(
        "ground distance unit", DistanceUnit.NAUTICAL_MILE, required=False
    )

    return VLWMessage(
        total_water_distance=total_water_distance,
        total_water_distance_unit=total_water_distance_unit,
        water_distance=water_distance,
        water_distance_unit=water_distance_unit,
        total_ground_distance=total_ground_distance,
        total_ground_distance_unit=total_ground_distance_unit,
        ground_distance=ground_distance,
        ground_distance_unit=ground_distance_unit,
    )
