"""GSV sentence decoder.

GSV (GNSS Satellites in View) reports up to four satellites per sentence.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74
           | | |  |  |  |   |  +--------------------------------------- 3 more satellite blocks
           | | |  |  |  |   +-- C/N0 (dB-Hz)
           | | |  |  |  +-- Azimuth (deg)
           | | |  |  +-- Elevation (deg)
           | | |  +-- Satellite ID
           | | +-- Satellites in view (whole group)
           | +-- Message number
           +-- Total number of messages

The last sentence of a group usually carries fewer than four blocks and
receivers differ on whether they pad the missing blocks with empty fields.
Both forms decode to four slots. NMEA 4.1 receivers append a signal ID after
the blocks.
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import EMPTY_SATELLITE, GSVMessage, SatelliteInView
from nmea0183.units import DBHz, Degree

_SATELLITE_SLOTS = 4
_FIELDS_PER_SATELLITE = 4


def _decode_satellite(fields: FieldReader) -> SatelliteInView:
    return SatelliteInView(
        id=fields.number("satellite id", int),
        elevation=fields.number("elevation", Degree),
        azimuth=fields.number("azimuth", Degree),
        snr=fields.number("c/n0", DBHz),
    )


def _count_blocks(remaining: int) -> tuple[int, bool]:
    """Split the fields after the counters into satellite blocks and signal ID.

    One field left over after whole blocks is the signal ID. Two or three left
    over is a truncated block; it is counted so that reading it fails with
    ``MissingFieldError``.
    """
    blocks, extra = divmod(remaining, _FIELDS_PER_SATELLITE)
    has_signal_id = extra == 1
    if extra > 1:
        blocks += 1
    return min(blocks, _SATELLITE_SLOTS), has_signal_id


@register("GSV", GSVMessage)
def decode_gsv(fields: FieldReader) -> GSVMessage:
    total_messages = fields.number("total messages", int, required=True)
    message_number = fields.number("message number", int, required=True)
    satellites_in_view = fields.number("satellites in view", int, required=True)

    blocks, has_signal_id = _count_blocks(fields.remaining_count())
    reported = fields.array(blocks, _decode_satellite)
    satellites = reported + (EMPTY_SATELLITE,) * (_SATELLITE_SLOTS - blocks)
    signal_id = fields.number("signal id", int) if has_signal_id else None

    return GSVMessage(
        total_messages=total_messages,
        message_number=message_number,
        satellites_in_view=satellites_in_view,
        satellites=satellites,
        signal_id=signal_id,
    )
