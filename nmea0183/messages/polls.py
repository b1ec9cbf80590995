"""Poll request decoders (GBQ, GLQ, GNQ, GPQ).

A host asks the receiver to output one standard message by sending a poll
whose only field is the requested message code. The message code of the
poll selects the talker ID of the reply (GP for GPQ, GN for GNQ, ...).

Poll Sentence Format:
    $UPGBQ,RMC*21
           |
           +-- Requested message code
"""

from nmea0183.dispatch import register
from nmea0183.fields import FieldReader
from nmea0183.types import GBQMessage, GLQMessage, GNQMessage, GPQMessage


@register("GBQ", GBQMessage)
def decode_gbq(fields: FieldReader) -> GBQMessage:
    return GBQMessage(message_id=fields.message_code("message id"))


@register("GLQ", GLQMessage)
def decode_glq(fields: FieldReader) -> GLQMessage:
    return GLQMessage(message_id=fields.message_code("message id"))


@register("GNQ", GNQMessage)
def decode_gnq(fields: FieldReader) -> GNQMessage:
    return GNQMessage(message_id=fields.message_code("message id"))


@register("GPQ", GPQMessage)
def decode_gpq(fields: FieldReader) -> GPQMessage:
    return GPQMessage(message_id=fields.message_code("message id"))
