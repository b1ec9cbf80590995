"""NMEA field grammar.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). An empty field decodes to None so callers can distinguish "no
data" from "zero value". A field that is present but does not follow its
grammar is an error, never silently treated as missing.

The module has two layers:

    parse_* functions   Pure parsers for one token. They raise FieldError
                        subclasses without position information.
    FieldReader         A cursor over the field buffer of one sentence. It
                        cuts the next token, applies a parser and locates any
                        error at the 1-based field index and field name.

Message decoders only use FieldReader; none of them slice strings themselves.
"""

import datetime
import re
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

from nmea0183.config import DEFAULT_OPTIONS, DecodeOptions
from nmea0183.errors import (
    FieldError,
    InvalidDateFieldError,
    InvalidEnumFieldError,
    InvalidNumericFieldError,
    InvalidTimeFieldError,
    InvalidUnitMarkerError,
    MissingFieldError,
)
from nmea0183.units import Degree, Minute

__all__ = [
    "FieldReader",
    "parse_code",
    "parse_message_code",
    "parse_nmea_date",
    "parse_nmea_degree",
    "parse_nmea_raw_minutes",
    "parse_nmea_time",
    "parse_optional_number",
]

_T = TypeVar("_T")
_Marker = TypeVar("_Marker", str, Enum)

FIELD_DELIMITER = ","

# No exponents, nan/inf, whitespace or underscores; float() accepts all of them.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_UNSIGNED_DECIMAL_PATTERN = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")
_TIME_PATTERN = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})(?:\.([0-9]+))?")
_DATE_PATTERN = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})")
_MESSAGE_CODE_PATTERN = re.compile(r"[A-Z]{3}")

_PACKED_DEGREE_SCALE = 100.0

# datetime.time resolution
_FRACTION_DIGITS = 6


def parse_optional_number(token: str, kind: Callable[[Any], _T] = float) -> _T | None:
    """Parse a numeric field, returning None if empty.

    Args:
        token: String value from an NMEA field
        kind: ``int``, ``float``, or a unit type such as ``Meter`` that wraps
            a float

    Returns:
        The parsed value, or None if the field is empty

    Raises:
        InvalidNumericFieldError: If the token is not empty and not a plain
            decimal number (an integer when ``kind`` is ``int``).

    Example:
        >>> parse_optional_number("08", int)
        8
        >>> parse_optional_number("499.6", Meter)
        Meter(value=499.6)
        >>> parse_optional_number("")  # empty field
        None
    """
    if not token:
        return None

    if kind is int:
        if _INTEGER_PATTERN.fullmatch(token) is None:
            raise InvalidNumericFieldError(token, "expected an integer")
        return int(token)

    if _DECIMAL_PATTERN.fullmatch(token) is None:
        raise InvalidNumericFieldError(token, "expected a decimal number")
    value = float(token)
    return value if kind is float else kind(value)


def parse_code(token: str, mapping: Mapping[str, _T]) -> _T:
    """Look up a fixed one- or two-character code.

    The mapping is exhaustive: any token missing from it, the empty token
    included, is rejected rather than mapped to a default.

    Raises:
        InvalidEnumFieldError: If ``token`` is not a key of ``mapping``.

    Example:
        >>> parse_code("N", NORTH_SOUTH_CODES)
        <NorthSouth.NORTH: 'N'>
    """
    try:
        return mapping[token]
    except KeyError:
        expected = ", ".join(repr(code) for code in mapping)
        raise InvalidEnumFieldError(token, f"expected one of {expected}") from None


def _parse_code_string(token: str, mapping: Mapping[str, _T]) -> tuple[_T, ...]:
    return tuple(parse_code(character, mapping) for character in token)


def parse_message_code(token: str) -> str:
    """Validate a three-letter message code such as the target of a poll.

    Raises:
        InvalidEnumFieldError: If ``token`` is not three uppercase letters.
    """
    if _MESSAGE_CODE_PATTERN.fullmatch(token) is None:
        raise InvalidEnumFieldError(token, "expected a three-letter message code")
    return token


def parse_nmea_degree(token: str) -> Degree | None:
    """Parse a packed NMEA coordinate (DDDMM.MMMM) as degrees.

    The packed value is scaled by 1/100, so the two digits before the
    decimal point become the first two decimal places:
        degrees = value / 100

    The hemisphere is a separate field; the result is always non-negative.

    Returns:
        Degrees, or None if the field is empty

    Raises:
        InvalidNumericFieldError: If the token is not an unsigned decimal.

    Example:
        >>> round(parse_nmea_degree("4717.11399").value, 7)
        47.1711399
    """
    if not token:
        return None
    if _UNSIGNED_DECIMAL_PATTERN.fullmatch(token) is None:
        raise InvalidNumericFieldError(token, "expected a DDDMM.MMMM coordinate")
    return Degree(float(token) / _PACKED_DEGREE_SCALE)


def parse_nmea_raw_minutes(token: str) -> Minute | None:
    """Parse a field that reports an angle directly in minutes of arc.

    Used by DTM, whose latitude and longitude offsets are small minute
    values (``"0.08"``), not packed coordinates. No conversion is applied.
    """
    return parse_optional_number(token, Minute)


def parse_nmea_time(token: str) -> datetime.time | None:
    """Parse a UTC time field in HHMMSS or HHMMSS.ss format.

    Fractional seconds are scaled to microseconds, so ``"092725.5"`` and
    ``"092725.50"`` are the same instant. Digits beyond microsecond
    resolution are dropped.

    Raises:
        InvalidTimeFieldError: If the digits do not follow the format or a
            component is out of range (hour 24, minute 60, ...).

    Example:
        >>> parse_nmea_time("092725.00")
        datetime.time(9, 27, 25)
        >>> parse_nmea_time("125027")
        datetime.time(12, 50, 27)
    """
    if not token:
        return None

    match = _TIME_PATTERN.fullmatch(token)
    if match is None:
        raise InvalidTimeFieldError(token, "expected HHMMSS or HHMMSS.ss")

    hours, minutes, seconds, fraction = match.groups()
    microseconds = int((fraction or "").ljust(_FRACTION_DIGITS, "0")[:_FRACTION_DIGITS])
    try:
        return datetime.time(int(hours), int(minutes), int(seconds), microseconds)
    except ValueError as error:
        raise InvalidTimeFieldError(token, str(error)) from None


def parse_nmea_date(token: str, century: int = DEFAULT_OPTIONS.century) -> datetime.date | None:
    """Parse a date field in DDMMYY format.

    The two-digit year carries no century; ``century`` is added to it.

    Raises:
        InvalidDateFieldError: If the token is not six digits or does not
            name a calendar day (month 13, 30 February, ...).

    Example:
        >>> parse_nmea_date("091202")
        datetime.date(2002, 12, 9)
    """
    if not token:
        return None

    match = _DATE_PATTERN.fullmatch(token)
    if match is None:
        raise InvalidDateFieldError(token, "expected DDMMYY")

    day, month, year = (int(group) for group in match.groups())
    try:
        return datetime.date(century + year, month, day)
    except ValueError as error:
        raise InvalidDateFieldError(token, str(error)) from None


class FieldReader:
    """Cursor over the comma-separated fields of one sentence.

    Each read consumes one token: the text up to and including the next
    comma, or the rest of the buffer when no comma is left. The last field
    of a sentence has no trailing comma; after it the reader is exhausted and
    any further read raises ``MissingFieldError``.

    Errors raised by the parsers are located at the 1-based index of the
    field being read and the name the decoder gave it.

    Example:
        >>> fields = FieldReader("RMC")
        >>> fields.token("message id")
        'RMC'
        >>> fields.exhausted
        True
    """

    def __init__(self, buffer: str, options: DecodeOptions = DEFAULT_OPTIONS) -> None:
        self.options = options
        self._buffer = buffer
        self._position = 0
        self._index = 0
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def index(self) -> int:
        """Index of the last field read (0 before the first read)."""
        return self._index

    def remainder(self) -> str:
        """Unread text, or "" once the reader is exhausted."""
        if self._exhausted:
            return ""
        return self._buffer[self._position :]

    def remaining_count(self) -> int:
        """Number of fields left to read."""
        if self._exhausted:
            return 0
        return self._buffer.count(FIELD_DELIMITER, self._position) + 1

    def token(self, name: str) -> str:
        if self._exhausted:
            raise MissingFieldError(None).locate(self._index + 1, name)

        self._index += 1
        end = self._buffer.find(FIELD_DELIMITER, self._position)
        if end == -1:
            token = self._buffer[self._position :]
            self._position = len(self._buffer)
            self._exhausted = True
        else:
            token = self._buffer[self._position : end]
            self._position = end + 1
        return token

    def _apply(self, name: str, parse: Callable[..., _T], *args: Any) -> _T:
        token = self.token(name)
        try:
            return parse(token, *args)
        except FieldError as error:
            error.locate(self._index, name)
            raise

    def number(
        self,
        name: str,
        kind: Callable[[Any], _T] = float,
        required: bool = False,
    ) -> _T | None:
        value = self._apply(name, parse_optional_number, kind)
        if value is None and required:
            raise InvalidNumericFieldError("", "field is required").locate(self._index, name)
        return value

    def code(self, name: str, mapping: Mapping[str, _T]) -> _T:
        return self._apply(name, parse_code, mapping)

    def optional_code(self, name: str, mapping: Mapping[str, _T]) -> _T | None:
        """Like :meth:`code`, but an empty field is None."""
        token = self.token(name)
        if not token:
            return None
        try:
            return parse_code(token, mapping)
        except FieldError as error:
            error.locate(self._index, name)
            raise

    def degree(self, name: str) -> Degree | None:
        return self._apply(name, parse_nmea_degree)

    def minutes(self, name: str) -> Minute | None:
        return self._apply(name, parse_nmea_raw_minutes)

    def time(self, name: str) -> datetime.time | None:
        return self._apply(name, parse_nmea_time)

    def date(self, name: str) -> datetime.date | None:
        return self._apply(name, parse_nmea_date, self.options.century)

    def codes(self, name: str, mapping: Mapping[str, _T]) -> tuple[_T, ...]:
        """Decode a field holding one single-character code per character.

        Used by the GNS mode indicator, which reports one position mode per
        constellation (``"ANNN"``). An empty field gives an empty tuple.
        """
        return self._apply(name, _parse_code_string, mapping)

    def message_code(self, name: str) -> str:
        return self._apply(name, parse_message_code)

    def text(self, name: str) -> str | None:
        return self.token(name) or None

    def unit(self, name: str, expected: _Marker, required: bool = True) -> _Marker | None:
        """Assert a fixed unit marker such as the ``M`` after a GGA altitude.

        Args:
            name: Field name for error reporting
            expected: The marker, either as a string or as an Enum member
                whose value is the marker
            required: When False an empty field is accepted and gives None

        Returns:
            ``expected`` when the marker is present, None when it is absent

        Raises:
            InvalidUnitMarkerError: If the field holds anything else.
        """
        marker = expected.value if isinstance(expected, Enum) else expected
        token = self.token(name)
        if not token and not required:
            return None
        if token != marker:
            raise InvalidUnitMarkerError(token, f"expected {marker!r}").locate(self._index, name)
        return expected

    def array(self, count: int, decode_one: Callable[["FieldReader"], _T]) -> tuple[_T, ...]:
        """Apply ``decode_one`` exactly ``count`` times.

        Slots are always read, so a fixed-capacity list such as the twelve GSA
        satellite IDs keeps its length when fewer entries are reported.
        """
        return tuple(decode_one(self) for _ in range(count))
