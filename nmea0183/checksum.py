"""NMEA checksum calculation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between the '$' (or '!') marker
and '*' (exclusive), then represented as a two-digit hexadecimal number after
the '*'.

Example sentence structure:
    $GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B
     ^                       checksum content                           ^^
     start                                                 checksum (0x5B = 91)
"""

from string import hexdigits

from nmea0183.errors import InvalidChecksumError

__all__ = ["calculate_checksum", "parse_checksum", "validate_checksum"]

FRAME_MARKERS = ("$", "!")
CHECKSUM_DELIMITER = "*"


def calculate_checksum(payload: str) -> int:
    """Calculate the XOR checksum of a sentence payload.

    The NMEA checksum algorithm XORs every byte of the payload. This is a
    simple error-detection mechanism that detects any single corrupted byte
    and some multi-byte errors.

    Args:
        payload: The text between the frame marker and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("UPGBQ,RMC")
        33  # 0x21
    """
    result = 0
    for byte in payload.encode("utf-8"):
        result ^= byte
    return result


def parse_checksum(text: str) -> int:
    """Parse the two hexadecimal characters that follow '*'.

    Both upper- and lowercase digits are accepted. Anything that is not
    exactly two hex digits (a sign, whitespace, a single digit) is rejected;
    ``int(text, 16)`` alone would accept some of those.

    Args:
        text: The checksum characters, e.g. "5B"

    Returns:
        The checksum byte

    Raises:
        InvalidChecksumError: If ``text`` is not two hexadecimal digits.
    """
    if len(text) != 2 or not all(character in hexdigits for character in text):
        raise InvalidChecksumError(f"checksum must be two hex digits, got {text!r}")
    return int(text, 16)


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload and provided checksum from a sentence.

    Returns:
        A tuple of (payload, checksum_text), or None if the marker or the
        '*' delimiter is missing.

    Example:
        >>> _extract_checksum_parts("$UPGBQ,RMC*21")
        ('UPGBQ,RMC', '21')
    """
    if not sentence.startswith(FRAME_MARKERS) or CHECKSUM_DELIMITER not in sentence:
        return None

    end = sentence.index(CHECKSUM_DELIMITER)
    return sentence[1:end], sentence[end + 1 : end + 3]


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    A lenient predicate for callers that only want to filter a stream:
    surrounding whitespace (including the line terminator) is ignored and no
    field is interpreted. Use :func:`nmea0183.decode` to get the reason a
    sentence is rejected.

    Args:
        sentence: Complete NMEA sentence including marker, '*' and checksum.

    Returns:
        True if the checksum is valid, False if the sentence is malformed,
        the checksum is truncated or non-hexadecimal, or it does not match.

    Example:
        >>> validate_checksum("$UPGBQ,RMC*21\\r\\n")
        True
        >>> validate_checksum("$UPGBQ,RMC*FF")
        False
    """
    parts = _extract_checksum_parts(sentence.strip())
    if parts is None:
        return False

    payload, provided = parts
    try:
        return calculate_checksum(payload) == parse_checksum(provided)
    except InvalidChecksumError:
        return False
