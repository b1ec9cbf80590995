"""VTG sentence decoder.

VTG (Course Over Ground and Ground Speed) provides velocity information:
the direction of travel and speed relative to the ground.

VTG Sentence Format:
    $GPVTG,77.52,T,,M,0.004,N,0.008,K,A*06
           |     | | | |     | |     | |
           |     | | | |     | |     | +-- Position mode (A/D/E/M/S/N)
           |     | | | |     | +-----+-- Speed over ground (km/h) + K
           |     | | | +-----+-- Speed over ground (knots) + N
           |     | +-+-- Course over ground (magnetic) + M
           +-----+-- Course over ground (true) + T

Unit columns are fixed letters. Some receivers leave them empty along with
the value, so an empty unit column is accepted; any other letter is not.
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import VTGMessage
from nmea0183.units import POSITION_MODE_CODES, CourseUnit, Degree, Knot, SpeedUnit


@register("VTG", VTGMessage)
def decode_vtg(fields: FieldReader) -> VTGMessage:
    course_true = fields.number("course true", Degree)
    course_true_unit = fields.unit("course true unit", CourseUnit.DEGREES_TRUE, required=False)
    course_magnetic = fields.number("course magnetic", Degree)
    course_magnetic_unit = fields.unit(
        "course magnetic unit", CourseUnit.DEGREES_MAGNETIC, required=False
    )
    speed_knots = fields.number("speed knots", Knot)
    speed_knots_unit = fields.unit("speed knots unit", SpeedUnit.KNOTS, required=False)
    speed_kilometers_per_hour = fields.number("speed km/h")
    speed_kilometers_per_hour_unit = fields.unit(
        "speed km/h unit", SpeedUnit.KILOMETERS_PER_HOUR, required=False
    )
    position_mode = fields.code("position mode", POSITION_MODE_CODES)

    return VTGMessage(
        course_true=course_true,
        course_true_unit=course_true_unit,
        course_magnetic=course_magnetic,
        course_magnetic_unit=course_magnetic_unit,
        speed_knots=speed_knots,
        speed_knots_unit=speed_knots_unit,
        speed_kilometers_per_hour=speed_kilometers_per_hour,
        speed_kilometers_per_hour_unit=speed_kilometers_per_hour_unit,
        position_mode=position_mode,
    )
