"""NMEA 0183 sentence decoding.

Typical use::

    from nmea0183 import GGAMessage, decode

    sentence = decode("$GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B\\r\\n")
    if isinstance(sentence.message, GGAMessage):
        print(sentence.message.latitude_degrees)
"""

import logging

from nmea0183.checksum import calculate_checksum, validate_checksum
from nmea0183.config import DEFAULT_OPTIONS, DecodeOptions
from nmea0183.dispatch import KNOWN_MESSAGE_CODES, supported_codes
from nmea0183.errors import (
    ChecksumMismatchError,
    FieldError,
    FramingError,
    IdentityError,
    IncompleteSentenceError,
    IntegrityError,
    InvalidChecksumError,
    InvalidDateFieldError,
    InvalidEnumFieldError,
    InvalidNumericFieldError,
    InvalidTimeFieldError,
    InvalidUnitMarkerError,
    MalformedHeaderError,
    MalformedTerminatorError,
    MissingFieldError,
    NMEAError,
    TrailingDataError,
    UnknownFrameMarkerError,
    UnknownMessageCodeError,
    UnknownTalkerError,
    UnsupportedMessageCodeError,
)
from nmea0183.reader import NMEAReader, decode_lines
from nmea0183.sentence import FrameKind, Sentence, decode
from nmea0183.talker import Talker
from nmea0183.types import (
    DTMMessage,
    GBQMessage,
    GBSMessage,
    GGAMessage,
    GLLMessage,
    GLQMessage,
    GNQMessage,
    GNSMessage,
    GPQMessage,
    GRSMessage,
    GSAMessage,
    GSTMessage,
    GSVMessage,
    Message,
    RMCMessage,
    SatelliteInView,
    TXTMessage,
    VLWMessage,
    VTGMessage,
    ZDAMessage,
)
from nmea0183.units import (
    ComputationMethod,
    CourseUnit,
    DBHz,
    Degree,
    DistanceUnit,
    EastWest,
    Fix,
    Knot,
    MessageLevel,
    Meter,
    Minute,
    NavigationalStatus,
    NavigationMode,
    NorthSouth,
    OperationMode,
    Second,
    SpeedUnit,
    Status,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_OPTIONS",
    "KNOWN_MESSAGE_CODES",
    "ChecksumMismatchError",
    "ComputationMethod",
    "CourseUnit",
    "DBHz",
    "DTMMessage",
    "DecodeOptions",
    "Degree",
    "DistanceUnit",
    "EastWest",
    "FieldError",
    "Fix",
    "FrameKind",
    "FramingError",
    "GBQMessage",
    "GBSMessage",
    "GGAMessage",
    "GLLMessage",
    "GLQMessage",
    "GNQMessage",
    "GNSMessage",
    "GPQMessage",
    "GRSMessage",
    "GSAMessage",
    "GSTMessage",
    "GSVMessage",
    "IdentityError",
    "IncompleteSentenceError",
    "IntegrityError",
    "InvalidChecksumError",
    "InvalidDateFieldError",
    "InvalidEnumFieldError",
    "InvalidNumericFieldError",
    "InvalidTimeFieldError",
    "InvalidUnitMarkerError",
    "Knot",
    "MalformedHeaderError",
    "MalformedTerminatorError",
    "Message",
    "MessageLevel",
    "Meter",
    "Minute",
    "MissingFieldError",
    "NMEAError",
    "NMEAReader",
    "NavigationMode",
    "NavigationalStatus",
    "NorthSouth",
    "OperationMode",
    "RMCMessage",
    "SatelliteInView",
    "Second",
    "Sentence",
    "SpeedUnit",
    "Status",
    "TXTMessage",
    "Talker",
    "TrailingDataError",
    "UnknownFrameMarkerError",
    "UnknownMessageCodeError",
    "UnknownTalkerError",
    "UnsupportedMessageCodeError",
    "VLWMessage",
    "VTGMessage",
    "ZDAMessage",
    "calculate_checksum",
    "decode",
    "decode_lines",
    "supported_codes",
    "validate_checksum",
]
