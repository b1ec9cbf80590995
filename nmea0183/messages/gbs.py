"""GBS sentence decoder.

GBS (GNSS Satellite Fault Detection) supports receiver autonomous integrity
monitoring (RAIM): the expected position errors and the most likely failed
satellite.

GBS Sentence Format:
    $GPGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1,0*5A
           |         |   |   |   |  ||     |   | |
           |         |   |   |   |  ||     |   | +-- Signal ID (NMEA 4.1)
           |         |   |   |   |  ||     |   +-- System ID (NMEA 4.1)
           |         |   |   |   |  ||     +-- Standard deviation of the bias (m)
           |         |   |   |   |  |+-- Estimated bias of the failed satellite (m)
           |         |   |   |   |  +-- Probability of missed detection
           |         |   |   |   +-- ID of the most likely failed satellite
           |         |   |   +-- Expected altitude error (m)
           |         |   +-- Expected longitude error (m)
           |         +-- Expected latitude error (m)
           +-- UTC time (HHMMSS.ss)
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import GBSMessage
from nmea0183.units import Meter


@register("GBS", GBSMessage)
def decode_gbs(fields: FieldReader) -> GBSMessage:
    utc_time = fields.time("utc time")
    latitude_error = fields.number("latitude error", Meter)
    longitude_error = fields.number("longitude error", Meter)
    altitude_error = fields.number("altitude error", Meter)
    satellite_id = fields.number("failed satellite id", int)
    probability = fields.number("probability")
    bias = fields.number("bias", Meter)
    bias_standard_deviation = fields.number("bias standard deviation", Meter)
    system_id = fields.number("system id", int)
    signal_id = fields.number("signal id", int)

    return GBSMessage(
        utc_time=utc_time,
        latitude_error=latitude_error,
        longitude_error=longitude_error,
        altitude_error=altitude_error,
        satellite_id=satellite_id,
        probability=probability,
        bias=bias,
        bias_standard_deviation=bias_standard_deviation,
        system_id=system_id,
        signal_id=signal_id,
    )
