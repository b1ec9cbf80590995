"""Message code to decoder table.

Decoders register themselves with the ``@register`` decorator when
``nmea0183.messages`` is imported. Adding a message type means adding one
decoder module; the framer and this table do not change.

Lookup distinguishes two kinds of miss:

    UnsupportedMessageCodeError   a real NMEA 0183 code (HDT, MWV, VDM, ...)
                                  that has no decoder yet
    UnknownMessageCodeError       a code that is not NMEA 0183 at all
"""

from collections.abc import Callable
from typing import Any, NamedTuple

from nmea0183.errors import UnknownMessageCodeError, UnsupportedMessageCodeError
from nmea0183.fields import FieldReader

__all__ = ["KNOWN_MESSAGE_CODES", "DecoderEntry", "lookup", "register", "supported_codes"]

Decoder = Callable[[FieldReader], Any]


class DecoderEntry(NamedTuple):
    decoder: Decoder
    record_type: type


# Standard IEC 61162-1 sentence formatters, decoded here or not.
KNOWN_MESSAGE_CODES = frozenset(
    {
        "AAM", "ABK", "ABM", "ACA", "ACK", "ACS", "AIR", "AKD", "ALA", "ALM",
        "ALR", "APB", "BBM", "BEC", "BOD", "BWC", "BWR", "BWW", "CUR", "DBK",
        "DBS", "DBT", "DDC", "DOR", "DPT", "DSC", "DSE", "DTM", "ETL", "EVE",
        "FIR", "FSI", "GBQ", "GBS", "GGA", "GLC", "GLL", "GLQ", "GMP", "GNQ",
        "GNS", "GPQ", "GRS", "GSA", "GST", "GSV", "HBT", "HDG", "HDM", "HDT",
        "HMR", "HMS", "HSC", "HTC", "HTD", "LCD", "LRF", "LRI", "LR1", "LR2",
        "LR3", "MLA", "MSK", "MSS", "MTW", "MWD", "MWV", "OSD", "RMA", "RMB",
        "RMC", "ROO", "ROT", "RPM", "RSA", "RSD", "RTE", "SFI", "SSD", "STN",
        "THS", "TLB", "TLL", "TTM", "TUT", "TXT", "VBW", "VDM", "VDO", "VDR",
        "VHW", "VLW", "VPW", "VSD", "VTG", "VWR", "WCV", "WNC", "WPL", "XDR",
        "XTE", "XTR", "ZDA", "ZDL", "ZFO", "ZTG",
    }
)  # fmt: skip

_DECODERS: dict[str, DecoderEntry] = {}


def register(code: str, record_type: type) -> Callable[[Decoder], Decoder]:
    """Register the decoder for one three-letter message code.

    Example:
        >>> @register("GGA", GGAMessage)
        ... def decode_gga(fields: FieldReader) -> GGAMessage: ...

    Raises:
        ValueError: If ``code`` already has a decoder.
    """

    def decorator(decoder: Decoder) -> Decoder:
        if code in _DECODERS:
            raise ValueError(f"decoder for {code!r} is already registered")
        _DECODERS[code] = DecoderEntry(decoder, record_type)
        return decoder

    return decorator


def lookup(code: str) -> DecoderEntry:
    """Return the decoder entry for ``code``.

    Raises:
        UnsupportedMessageCodeError: If ``code`` is a known NMEA 0183 code
            without a registered decoder.
        UnknownMessageCodeError: If ``code`` is not an NMEA 0183 code.
    """
    try:
        return _DECODERS[code]
    except KeyError:
        if code in KNOWN_MESSAGE_CODES:
            raise UnsupportedMessageCodeError(code) from None
        raise UnknownMessageCodeError(code) from None


def supported_codes() -> frozenset[str]:
    return frozenset(_DECODERS)
