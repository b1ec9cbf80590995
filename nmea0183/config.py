"""Decoder options."""

from dataclasses import dataclass

__all__ = ["DEFAULT_OPTIONS", "DecodeOptions"]

# DDMMYY dates carry no century; 2000 + YY until a receiver says otherwise.
_DEFAULT_CENTURY = 2000


@dataclass(frozen=True)
class DecodeOptions:
    """Policy knobs for :func:`nmea0183.decode`.

    Attributes:
        century: Added to the two-digit year of DDMMYY date fields. The wire
            format has no century, so this is a policy choice; the default
            reads ``"091202"`` as 9 December 2002.
        require_terminator: When True (the default) a sentence must end with
            ``\\r\\n`` right after the checksum. When False a sentence that
            ends at the checksum is also accepted, for sources that strip
            line endings (log files, ``str.splitlines``). Any other trailing
            text is still rejected.
    """

    century: int = _DEFAULT_CENTURY
    require_terminator: bool = True


DEFAULT_OPTIONS = DecodeOptions()
