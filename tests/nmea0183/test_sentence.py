"""Tests for sentence framing, checksum verification and end-to-end decoding."""

import dataclasses
import datetime

import pytest

from nmea0183 import (
    ChecksumMismatchError,
    DecodeOptions,
    EastWest,
    Fix,
    FrameKind,
    GBQMessage,
    GGAMessage,
    IncompleteSentenceError,
    InvalidChecksumError,
    InvalidNumericFieldError,
    InvalidTimeFieldError,
    InvalidUnitMarkerError,
    MalformedHeaderError,
    MalformedTerminatorError,
    Meter,
    MissingFieldError,
    NMEAError,
    NorthSouth,
    Sentence,
    Talker,
    TrailingDataError,
    UnknownFrameMarkerError,
    UnknownMessageCodeError,
    UnknownTalkerError,
    UnsupportedMessageCodeError,
    decode,
)

GGA = "$GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B\r\n"
GBQ = "$UPGBQ,RMC*21\r\n"


class TestEndToEnd:
    """Complete sentences decoded through the public entry point."""

    def test_position_fix(self):
        sentence = decode(GGA)
        assert sentence.frame is FrameKind.PARAMETRIC
        assert sentence.talker is Talker.GPS
        assert sentence.message_code == "GGA"

        gga = sentence.message
        assert isinstance(gga, GGAMessage)
        assert gga.utc_time == datetime.time(9, 27, 25)
        assert gga.latitude.value == pytest.approx(47.1711399)
        assert gga.north_south is NorthSouth.NORTH
        assert gga.longitude.value == pytest.approx(8.339159)
        assert gga.east_west is EastWest.EAST
        assert gga.quality is Fix.AUTONOMOUS_GNSS_FIX
        assert gga.num_satellites == 8
        assert gga.hdop == pytest.approx(1.01)
        assert gga.altitude == Meter(499.6)
        assert gga.geoid_separation == Meter(48.0)
        assert gga.differential_age is None
        assert gga.differential_station is None

    def test_polling_request(self):
        sentence = decode(GBQ)
        assert sentence.talker is Talker.MICROPROCESSOR_CONTROLLER
        assert sentence.talker.is_user_configured
        assert sentence.message == GBQMessage(message_id="RMC")
        assert sentence.message_code == "GBQ"

    def test_qzss_talker(self):
        sentence = decode("$QZGBQ,RMC*2F\r\n")
        assert sentence.talker is Talker.QZSS_QZ
        assert sentence.message == GBQMessage(message_id="RMC")

    def test_encapsulation_frame(self):
        sentence = decode("!GPGBQ,RMC*33\r\n")
        assert sentence.frame is FrameKind.ENCAPSULATION
        assert sentence.talker is Talker.GPS

    def test_lowercase_checksum(self):
        assert decode("$UPGLQ,RMC*2f\r\n").message.message_id == "RMC"

    def test_decoding_is_pure(self):
        assert decode(GGA) == decode(GGA)

    def test_sentence_is_immutable(self):
        sentence = decode(GBQ)
        with pytest.raises(dataclasses.FrozenInstanceError):
            sentence.talker = Talker.GPS  # type: ignore[misc]

    def test_returns_sentence(self):
        assert isinstance(decode(GBQ), Sentence)


class TestFraming:
    """Failures before the checksum is verified."""

    def test_empty_input(self):
        with pytest.raises(IncompleteSentenceError):
            decode("")

    @pytest.mark.parametrize("line", ["GPGGA,1*00\r\n", "#UPGBQ,RMC*21\r\n", " $UPGBQ,RMC*21\r\n"])
    def test_unknown_frame_marker(self, line):
        with pytest.raises(UnknownFrameMarkerError):
            decode(line)

    def test_missing_checksum_delimiter(self):
        with pytest.raises(IncompleteSentenceError):
            decode("$UPGBQ,RMC\r\n")

    def test_non_hex_checksum(self):
        with pytest.raises(InvalidChecksumError):
            decode("$UPGBQ,RMC*G1\r\n")

    def test_truncated_checksum(self):
        with pytest.raises(InvalidChecksumError):
            decode("$UPGBQ,RMC*2")

    def test_stage(self):
        with pytest.raises(NMEAError) as exc_info:
            decode("?")
        assert exc_info.value.stage == "frame"


class TestChecksum:
    """The checksum gate runs before any field is interpreted."""

    def test_mismatch_carries_both_values(self):
        with pytest.raises(ChecksumMismatchError) as exc_info:
            decode("$UPGBQ,RMC*22\r\n")
        assert exc_info.value.expected == 0x22
        assert exc_info.value.computed == 0x21
        assert exc_info.value.stage == "checksum"

    def test_every_single_byte_mutation_is_detected(self):
        payload_end = GGA.index("*")
        for position in range(1, payload_end):
            mutated_character = chr(ord(GGA[position]) ^ 0x01)
            mutated = GGA[:position] + mutated_character + GGA[position + 1 :]
            with pytest.raises(ChecksumMismatchError):
                decode(mutated)

    def test_checked_before_fields(self):
        # Garbage fields with a wrong checksum report the checksum, not the field.
        with pytest.raises(ChecksumMismatchError):
            decode("$GPGLL,x,x,x,x,x,x,x*00\r\n")


class TestTerminator:
    def test_missing_terminator(self):
        with pytest.raises(MalformedTerminatorError):
            decode("$UPGBQ,RMC*21")

    @pytest.mark.parametrize("suffix", ["\n", "\r", "\n\r", "\r\n\r\n", " \r\n", "\r\nX"])
    def test_wrong_terminator(self, suffix):
        with pytest.raises(MalformedTerminatorError):
            decode("$UPGBQ,RMC*21" + suffix)

    def test_terminator_optional(self):
        options = DecodeOptions(require_terminator=False)
        assert decode("$UPGBQ,RMC*21", options).message_code == "GBQ"
        assert decode("$UPGBQ,RMC*21\r\n", options).message_code == "GBQ"

    def test_optional_terminator_still_rejects_other_text(self):
        options = DecodeOptions(require_terminator=False)
        with pytest.raises(MalformedTerminatorError):
            decode("$UPGBQ,RMC*21\n", options)


class TestHeader:
    @pytest.mark.parametrize("line", ["$GP*17\r\n", "$GPGGA*56\r\n", "$GPGGAX,1*13\r\n", "$GPGG,1*0A\r\n"])
    def test_malformed_header(self, line):
        with pytest.raises(MalformedHeaderError):
            decode(line)

    def test_unknown_talker(self):
        with pytest.raises(UnknownTalkerError) as exc_info:
            decode("$XXGGA,1*5C\r\n")
        assert exc_info.value.code == "XX"

    def test_unknown_message_code(self):
        with pytest.raises(UnknownMessageCodeError) as exc_info:
            decode("$GPXYZ,1,2*4F\r\n")
        assert exc_info.value.code == "XYZ"
        assert exc_info.value.stage == "identity"

    def test_unsupported_message_code(self):
        with pytest.raises(UnsupportedMessageCodeError) as exc_info:
            decode("$GPHDT,274.07,T*03\r\n")
        assert exc_info.value.code == "HDT"


class TestFieldFailures:
    """A single bad field fails the whole sentence, with its position."""

    def test_trailing_data(self):
        with pytest.raises(TrailingDataError) as exc_info:
            decode("$UPGBQ,RMC,EXTRA*57\r\n")
        assert exc_info.value.code == "GBQ"
        assert exc_info.value.remainder == "EXTRA"
        assert exc_info.value.stage == "frame"

    def test_missing_field(self):
        with pytest.raises(MissingFieldError) as exc_info:
            decode("$GPGLL,4717.11364,N,00833.91565,E,092321.00,A*0D\r\n")
        assert exc_info.value.field_index == 7
        assert exc_info.value.field_name == "position mode"

    def test_invalid_time(self):
        with pytest.raises(InvalidTimeFieldError) as exc_info:
            decode("$GPGLL,4717.11364,N,00833.91565,E,250000.00,A,A*6C\r\n")
        assert exc_info.value.field_index == 5
        assert exc_info.value.value == "250000.00"

    def test_invalid_unit_marker(self):
        with pytest.raises(InvalidUnitMarkerError) as exc_info:
            decode("$GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,F,48.0,M,,*50\r\n")
        assert exc_info.value.field_index == 10

    def test_invalid_number(self):
        with pytest.raises(InvalidNumericFieldError) as exc_info:
            decode("$GPGSA,A,3,80,71,73,79,69,,,,,,,,1.83,1.09,X*4D\r\n")
        assert exc_info.value.field_index == 17
        assert exc_info.value.field_name == "vdop"

    def test_all_failures_are_value_errors(self):
        with pytest.raises(ValueError):
            decode("$GPXYZ,1,2*4F\r\n")
