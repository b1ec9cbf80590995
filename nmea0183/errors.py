"""Decode errors for NMEA 0183 sentences.

Every failure raised by :func:`nmea0183.decode` derives from ``NMEAError``.
The hierarchy mirrors the stage at which decoding stopped, so callers can
tell corrupt data (framing, checksum, field errors) apart from sentences
that are well formed but not handled (``UnsupportedMessageCodeError``):

    NMEAError
    ├── FramingError       stage="frame"
    ├── IntegrityError     stage="checksum"
    ├── IdentityError      stage="identity"
    └── FieldError         stage="field"

``NMEAError`` subclasses ``ValueError`` because every failure describes bad
input, never a bad program state.
"""

__all__ = [
    "ChecksumMismatchError",
    "FieldError",
    "FramingError",
    "IdentityError",
    "IncompleteSentenceError",
    "IntegrityError",
    "InvalidChecksumError",
    "InvalidDateFieldError",
    "InvalidEnumFieldError",
    "InvalidNumericFieldError",
    "InvalidTimeFieldError",
    "InvalidUnitMarkerError",
    "MalformedHeaderError",
    "MalformedTerminatorError",
    "MissingFieldError",
    "NMEAError",
    "TrailingDataError",
    "UnknownFrameMarkerError",
    "UnknownMessageCodeError",
    "UnknownTalkerError",
    "UnsupportedMessageCodeError",
]


class NMEAError(ValueError):
    """Base class for all sentence decode failures."""

    stage: str = "sentence"


# --- structural -------------------------------------------------------------


class FramingError(NMEAError):
    """The sentence does not have the ``$...*hh\\r\\n`` shape."""

    stage = "frame"


class IncompleteSentenceError(FramingError):
    """The input is empty or ends before the ``*`` checksum delimiter."""


class UnknownFrameMarkerError(FramingError):
    """The first character is neither ``$`` nor ``!``."""


class MalformedTerminatorError(FramingError):
    """The checksum is not followed by exactly ``\\r\\n``."""


class MalformedHeaderError(FramingError):
    """The address field is not a talker plus a three-letter code and comma."""


class TrailingDataError(FramingError):
    """The sentence carries more fields than its message layout defines."""

    def __init__(self, code: str, remainder: str) -> None:
        super().__init__(f"{code} sentence has unexpected trailing data: {remainder!r}")
        self.code = code
        self.remainder = remainder


# --- integrity --------------------------------------------------------------


class IntegrityError(NMEAError):
    """The checksum is missing, unreadable or wrong."""

    stage = "checksum"


class InvalidChecksumError(IntegrityError):
    """The two characters after ``*`` are not a hexadecimal byte."""


class ChecksumMismatchError(IntegrityError):
    """The XOR of the payload differs from the transmitted checksum."""

    def __init__(self, expected: int, computed: int) -> None:
        super().__init__(
            f"checksum mismatch: sentence says {expected:02X}, payload gives {computed:02X}"
        )
        self.expected = expected
        self.computed = computed


# --- identity ---------------------------------------------------------------


class IdentityError(NMEAError):
    """The talker or message code cannot be resolved."""

    stage = "identity"

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class UnknownTalkerError(IdentityError):
    def __init__(self, code: str) -> None:
        super().__init__(code, f"unknown talker identifier {code!r}")


class UnknownMessageCodeError(IdentityError):
    def __init__(self, code: str) -> None:
        super().__init__(code, f"unknown message code {code!r}")


class UnsupportedMessageCodeError(IdentityError):
    """A valid NMEA 0183 message code that has no registered decoder."""

    def __init__(self, code: str) -> None:
        super().__init__(code, f"message code {code!r} is not supported")


# --- field level ------------------------------------------------------------


class FieldError(NMEAError):
    """A single field does not follow its grammar.

    Raised by the token parsers without position information; the
    ``FieldReader`` that applied the parser fills in ``field_index`` (1-based,
    counted after the address field) and ``field_name`` via :meth:`locate`.

    Attributes:
        value: The offending token, or ``None`` when the field was missing.
        field_index: Position of the field in the sentence, once located.
        field_name: Human-readable name of the field, once located.
    """

    stage = "field"
    kind = "field"

    def __init__(self, value: str | None, reason: str = "") -> None:
        super().__init__(value, reason)
        self.value = value
        self.reason = reason
        self.field_index: int | None = None
        self.field_name: str | None = None

    def locate(self, index: int, name: str) -> "FieldError":
        """Attach the field position and return ``self`` for re-raising."""
        self.field_index = index
        self.field_name = name
        return self

    def __str__(self) -> str:
        text = f"invalid {self.kind} {self.value!r}"
        if self.field_index is not None:
            text += f" in field {self.field_index} ({self.field_name})"
        if self.reason:
            text += f": {self.reason}"
        return text


class InvalidNumericFieldError(FieldError):
    kind = "numeric field"


class InvalidEnumFieldError(FieldError):
    kind = "enumerated field"


class InvalidTimeFieldError(FieldError):
    kind = "time field"


class InvalidDateFieldError(FieldError):
    kind = "date field"


class InvalidUnitMarkerError(FieldError):
    kind = "unit marker"


class MissingFieldError(FieldError):
    """The decoder needed another field but the sentence had ended."""

    kind = "field count"

    def __str__(self) -> str:
        if self.field_index is None:
            return "sentence ended before all fields were read"
        return f"sentence ended before field {self.field_index} ({self.field_name})"
