"""GST sentence decoder.

GST (GNSS Pseudorange Error Statistics) describes the accuracy of the
position solution as an error ellipse and per-axis standard deviations.

GST Sentence Format:
    $GPGST,082356.00,1.8,,,,1.7,1.3,2.2*7E
           |         |   ||| |   |   |
           |         |   ||| |   |   +-- Altitude standard deviation (m)
           |         |   ||| |   +-- Longitude standard deviation (m)
           |         |   ||| +-- Latitude standard deviation (m)
           |         |   ||+-- Orientation of the semi-major axis (deg)
           |         |   |+-- Semi-minor axis standard deviation (m)
           |         |   +-- Semi-major axis standard deviation (m)
           |         +-- RMS of the pseudorange residuals (m)
           +-- UTC time (HHMMSS.ss)
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import GSTMessage
from nmea0183.units import Degree, Meter


@register("GST", GSTMessage)
def decode_gst(fields: FieldReader) -> GSTMessage:
    return GSTMessage(
        utc_time=fields.time("utc time"),
        range_rms=fields.number("range rms", Meter),
        std_major=fields.number("semi-major standard deviation", Meter),
        std_minor=fields.number("semi-minor standard deviation", Meter),
        orientation=fields.number("orientation", Degree),
        std_latitude=fields.number("latitude standard deviation", Meter),
        std_longitude=fields.number("longitude standard deviation", Meter),
        std_altitude=fields.number("altitude standard deviation", Meter),
    )
