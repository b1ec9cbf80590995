"""GRS sentence decoder.

GRS (GNSS Range Residuals) reports the range residual of each satellite used
in the navigation solution, in the order of the matching GSA sentence.

GRS Sentence Format:
    $GNGRS,104148.00,1,2.6,2.2,-1.6,-1.1,-1.7,-1.5,5.8,1.7,,,,,1,1*52
           |         | |                                  | |
           |         | |                                  | +-- Signal ID (NMEA 4.1)
           |         | |                                  +-- System ID (NMEA 4.1)
           |         | +-- 12 residual slots (m, empty when unused)
           |         +-- Computation method (0=used in GGA, 1=computed after GGA)
           +-- UTC time (HHMMSS.ss)
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import GRSMessage
from nmea0183.units import COMPUTATION_METHOD_CODES, Meter

_RESIDUAL_SLOTS = 12


def _decode_residual(fields: FieldReader) -> Meter | None:
    return fields.number("residual", Meter)


@register("GRS", GRSMessage)
def decode_grs(fields: FieldReader) -> GRSMessage:
    utc_time = fields.time("utc time")
    computation_method = fields.optional_code("computation method", COMPUTATION_METHOD_CODES)
    residuals = fields.array(_RESIDUAL_SLOTS, _decode_residual)
    system_id = fields.number("system id", int)
    signal_id = fields.number("signal id", int)

    return GRSMessage(
        utc_time=utc_time,
        computation_method=computation_method,
        residuals=residuals,
        system_id=system_id,
        signal_id=signal_id,
    )
