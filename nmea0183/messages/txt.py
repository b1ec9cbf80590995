"""TXT sentence decoder.

TXT (Text Transmission) carries short human-readable messages such as the
receiver's version banner at power-up.

TXT Sentence Format:
    $GPTXT,01,01,02,ANTARIS ATR0620 HW 00000040*67
           |  |  |  |
           |  |  |  +-- Text (no commas)
           |  |  +-- Message level (00=error, 01=warning, 02=notice, 07=user)
           |  +-- Message number
           +-- Total number of messages
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import TXTMessage
from nmea0183.units import MESSAGE_LEVEL_CODES


@register("TXT", TXTMessage)
def decode_txt(fields: FieldReader) -> TXTMessage:
    total_messages = fields.number("total messages", int)
    message_number = fields.number("message number", int)
    level = fields.code("message level", MESSAGE_LEVEL_CODES)
    text = fields.text("text")

    return TXTMessage(
        total_messages=total_messages,
        message_number=message_number,
        level=level,
        text=text,
    )
