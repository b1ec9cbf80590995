"""Sentence framing and decoding.

This is the main entry point of the package. ``decode`` turns one received
line into a ``Sentence`` or raises an ``NMEAError`` subclass naming the stage
that rejected it. It performs, in order:

1. Frame marker check ('$' parametric, '!' encapsulation)
2. Checksum delimiter search and checksum parsing
3. Checksum verification, before any field is interpreted
4. Line terminator check (exactly CR LF after the checksum)
5. Talker and message code resolution
6. Field decoding by the registered message decoder
7. Trailing data check

Sentence Structure:
    $GPGGA,092725.00,...,*5B\\r\\n
    |^^^^^ ^^^^^^^^^^^^^ ^^ ^^^^
    ||    |field buffer  |  +-- terminator
    ||    |              +-- checksum (2 hex digits)
    |+----+-- talker (GP) + message code (GGA) + ','
    +-- frame marker
"""

from dataclasses import dataclass
from enum import Enum

from nmea0183 import messages  # noqa: F401  (registers the decoders)
from nmea0183.checksum import CHECKSUM_DELIMITER, calculate_checksum, parse_checksum
from nmea0183.config import DEFAULT_OPTIONS, DecodeOptions
from nmea0183.dispatch import lookup
from nmea0183.errors import (
    ChecksumMismatchError,
    IncompleteSentenceError,
    MalformedHeaderError,
    MalformedTerminatorError,
    TrailingDataError,
    UnknownFrameMarkerError,
)
from nmea0183.fields import FIELD_DELIMITER, FieldReader
from nmea0183.talker import Talker, parse_talker
from nmea0183.types import Message

__all__ = ["FrameKind", "Sentence", "decode"]

TERMINATOR = "\r\n"

_TALKER_LENGTH = 2
_MESSAGE_CODE_LENGTH = 3
_HEADER_LENGTH = _TALKER_LENGTH + _MESSAGE_CODE_LENGTH
_CHECKSUM_LENGTH = 2


class FrameKind(Enum):
    """Kind of sentence, given by its first character."""

    PARAMETRIC = "$"
    ENCAPSULATION = "!"


_FRAME_KINDS = {kind.value: kind for kind in FrameKind}


@dataclass(frozen=True)
class Sentence:
    """A fully decoded sentence.

    Only ``decode`` creates these; holding one means the checksum, the
    talker and the message code were all valid.

    Attributes:
        frame: Parametric ('$') or encapsulation ('!') sentence.
        talker: Equipment that sent the sentence.
        message: The decoded message body; its class identifies the message
            type.
    """

    frame: FrameKind
    talker: Talker
    message: Message

    @property
    def message_code(self) -> str:
        return self.message.code


def _split_frame(line: str, options: DecodeOptions) -> tuple[FrameKind, str]:
    """Check the marker, checksum and terminator; return the payload."""
    if not line:
        raise IncompleteSentenceError("empty sentence")

    try:
        frame = _FRAME_KINDS[line[0]]
    except KeyError:
        raise UnknownFrameMarkerError(f"unknown frame marker {line[0]!r}") from None

    end = line.find(CHECKSUM_DELIMITER)
    if end == -1:
        raise IncompleteSentenceError("no checksum delimiter '*' found")

    payload = line[1:end]
    checksum_end = end + 1 + _CHECKSUM_LENGTH
    expected = parse_checksum(line[end + 1 : checksum_end])
    computed = calculate_checksum(payload)
    if computed != expected:
        raise ChecksumMismatchError(expected, computed)

    terminator = line[checksum_end:]
    if terminator != TERMINATOR and (options.require_terminator or terminator):
        raise MalformedTerminatorError(f"expected '\\r\\n' after the checksum, got {terminator!r}")

    return frame, payload


def _split_header(payload: str) -> tuple[str, str, str]:
    """Split the payload into talker code, message code and field buffer."""
    if len(payload) <= _HEADER_LENGTH or payload[_HEADER_LENGTH] != FIELD_DELIMITER:
        raise MalformedHeaderError(
            f"expected a talker, a three-letter message code and ',', got {payload[: _HEADER_LENGTH + 1]!r}"
        )
    return (
        payload[:_TALKER_LENGTH],
        payload[_TALKER_LENGTH:_HEADER_LENGTH],
        payload[_HEADER_LENGTH + 1 :],
    )


def decode(line: str, options: DecodeOptions = DEFAULT_OPTIONS) -> Sentence:
    """Decode one NMEA 0183 sentence.

    Args:
        line: Complete sentence including the frame marker, the checksum and
            the CR LF terminator.
        options: Decoding policy (century of two-digit years, terminator
            requirement).

    Returns:
        The decoded sentence. Never a partially filled record.

    Raises:
        FramingError: Marker, delimiter, terminator or header is malformed,
            or the sentence has more fields than its message defines.
        IntegrityError: The checksum is unreadable or does not match.
        IdentityError: The talker or message code is unknown, or the message
            code has no decoder.
        FieldError: A field does not follow its grammar or is missing.

    Example:
        >>> sentence = decode("$UPGBQ,RMC*21\\r\\n")
        >>> sentence.talker
        <Talker.MICROPROCESSOR_CONTROLLER: 'UP'>
        >>> sentence.message
        GBQMessage(message_id='RMC')
    """
    frame, payload = _split_frame(line, options)
    talker_code, message_code, buffer = _split_header(payload)
    talker = parse_talker(talker_code)
    entry = lookup(message_code)

    fields = FieldReader(buffer, options)
    message = entry.decoder(fields)
    if not fields.exhausted:
        raise TrailingDataError(message_code, fields.remainder())

    return Sentence(frame=frame, talker=talker, message=message)
