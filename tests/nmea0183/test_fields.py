"""Tests for the NMEA field grammar."""

import datetime

import pytest

from nmea0183 import (
    CourseUnit,
    Degree,
    InvalidDateFieldError,
    InvalidEnumFieldError,
    InvalidNumericFieldError,
    InvalidTimeFieldError,
    InvalidUnitMarkerError,
    Meter,
    Minute,
    MissingFieldError,
    NorthSouth,
)
from nmea0183.config import DecodeOptions
from nmea0183.fields import (
    FieldReader,
    parse_code,
    parse_message_code,
    parse_nmea_date,
    parse_nmea_degree,
    parse_nmea_raw_minutes,
    parse_nmea_time,
    parse_optional_number,
)
from nmea0183.units import NORTH_SOUTH_CODES, POSITION_MODE_CODES, Fix


class TestParseOptionalNumber:
    """Tests for parse_optional_number function."""

    def test_float(self):
        assert parse_optional_number("545.4") == pytest.approx(545.4)

    def test_int(self):
        assert parse_optional_number("08", int) == 8

    def test_signed(self):
        assert parse_optional_number("-47.7") == pytest.approx(-47.7)
        assert parse_optional_number("+3", int) == 3

    def test_unit_type(self):
        assert parse_optional_number("499.6", Meter) == Meter(499.6)

    def test_empty_is_none(self):
        assert parse_optional_number("") is None
        assert parse_optional_number("", int) is None
        assert parse_optional_number("", Meter) is None

    def test_empty_is_not_zero(self):
        assert parse_optional_number("", int) != 0

    @pytest.mark.parametrize("token", ["abc", "1e5", "nan", "inf", " 1", "1_000", ".", "1.2.3", "-"])
    def test_rejects_malformed_float(self, token):
        with pytest.raises(InvalidNumericFieldError) as exc_info:
            parse_optional_number(token)
        assert exc_info.value.value == token

    @pytest.mark.parametrize("token", ["1.5", "x", "0x10"])
    def test_rejects_malformed_int(self, token):
        with pytest.raises(InvalidNumericFieldError):
            parse_optional_number(token, int)

    def test_leading_and_trailing_dot(self):
        assert parse_optional_number(".5") == pytest.approx(0.5)
        assert parse_optional_number("5.") == pytest.approx(5.0)


class TestParseCode:
    """Tests for parse_code function."""

    def test_known_code(self):
        assert parse_code("S", NORTH_SOUTH_CODES) is NorthSouth.SOUTH

    def test_unknown_code(self):
        with pytest.raises(InvalidEnumFieldError, match="'X'"):
            parse_code("X", NORTH_SOUTH_CODES)

    def test_empty_code(self):
        with pytest.raises(InvalidEnumFieldError):
            parse_code("", NORTH_SOUTH_CODES)

    def test_two_characters_where_one_expected(self):
        with pytest.raises(InvalidEnumFieldError):
            parse_code("NN", NORTH_SOUTH_CODES)


class TestParseMessageCode:
    def test_valid(self):
        assert parse_message_code("RMC") == "RMC"

    @pytest.mark.parametrize("token", ["", "RM", "RMCX", "rmc", "R1C"])
    def test_invalid(self, token):
        with pytest.raises(InvalidEnumFieldError):
            parse_message_code(token)


class TestParseNmeaDegree:
    """Tests for parse_nmea_degree function."""

    def test_latitude(self):
        assert parse_nmea_degree("4717.11399").value == pytest.approx(47.1711399)

    def test_longitude_with_leading_zeros(self):
        assert parse_nmea_degree("00833.91590").value == pytest.approx(8.339159)

    def test_packed_value_scaled_by_one_hundredth(self):
        assert parse_nmea_degree("4807.038").value == pytest.approx(48.07038)

    def test_returns_degree_type(self):
        assert isinstance(parse_nmea_degree("4807.038"), Degree)

    def test_without_fraction(self):
        assert parse_nmea_degree("4830").value == pytest.approx(48.30)

    def test_small_values(self):
        assert parse_nmea_degree("30.0").value == pytest.approx(0.3)
        assert parse_nmea_degree("0.0").value == 0.0

    def test_empty_is_none(self):
        assert parse_nmea_degree("") is None

    @pytest.mark.parametrize("token", ["-4717.1", "47a7.1", "N", "1e3", "nan"])
    def test_invalid(self, token):
        with pytest.raises(InvalidNumericFieldError):
            parse_nmea_degree(token)


class TestParseNmeaRawMinutes:
    def test_value_is_not_converted(self):
        assert parse_nmea_raw_minutes("0.08") == Minute(0.08)

    def test_empty_is_none(self):
        assert parse_nmea_raw_minutes("") is None


class TestParseNmeaTime:
    """Tests for parse_nmea_time function."""

    def test_with_hundredths(self):
        assert parse_nmea_time("092725.00") == datetime.time(9, 27, 25)

    def test_without_fraction(self):
        assert parse_nmea_time("125027") == datetime.time(12, 50, 27)

    def test_fraction_scaled_to_microseconds(self):
        assert parse_nmea_time("103600.01") == datetime.time(10, 36, 0, 10_000)
        assert parse_nmea_time("103600.5") == datetime.time(10, 36, 0, 500_000)

    def test_excess_fraction_digits_dropped(self):
        assert parse_nmea_time("103600.1234567") == datetime.time(10, 36, 0, 123_456)

    def test_empty_is_none(self):
        assert parse_nmea_time("") is None

    @pytest.mark.parametrize("token", ["250000", "126000", "120060", "1200", "12000a", "120000.", "1200000"])
    def test_invalid(self, token):
        with pytest.raises(InvalidTimeFieldError):
            parse_nmea_time(token)


class TestParseNmeaDate:
    """Tests for parse_nmea_date function."""

    def test_default_century(self):
        assert parse_nmea_date("091202") == datetime.date(2002, 12, 9)

    def test_custom_century(self):
        assert parse_nmea_date("091298", century=1900) == datetime.date(1998, 12, 9)

    def test_empty_is_none(self):
        assert parse_nmea_date("") is None

    @pytest.mark.parametrize("token", ["091302", "320102", "300202", "0912", "09120a"])
    def test_invalid(self, token):
        with pytest.raises(InvalidDateFieldError):
            parse_nmea_date(token)


class TestFieldReader:
    """Tests for the FieldReader cursor."""

    def test_reads_tokens_in_order(self):
        fields = FieldReader("a,,c")
        assert fields.token("first") == "a"
        assert fields.token("second") == ""
        assert fields.token("third") == "c"
        assert fields.exhausted

    def test_last_token_without_comma(self):
        fields = FieldReader("RMC")
        assert fields.token("message id") == "RMC"
        assert fields.exhausted
        assert fields.remainder() == ""

    def test_empty_buffer_is_one_empty_field(self):
        fields = FieldReader("")
        assert fields.remaining_count() == 1
        assert fields.token("only") == ""
        assert fields.exhausted

    def test_reading_past_the_end(self):
        fields = FieldReader("1")
        fields.token("first")
        with pytest.raises(MissingFieldError) as exc_info:
            fields.token("second")
        assert exc_info.value.field_index == 2
        assert exc_info.value.field_name == "second"

    def test_trailing_comma_leaves_empty_field(self):
        fields = FieldReader("A,")
        fields.token("first")
        assert not fields.exhausted
        assert fields.remaining_count() == 1

    def test_remaining_count(self):
        fields = FieldReader("1,2,3")
        assert fields.remaining_count() == 3
        fields.token("first")
        assert fields.remaining_count() == 2

    def test_error_is_located(self):
        fields = FieldReader("1.0,abc")
        fields.number("first")
        with pytest.raises(InvalidNumericFieldError) as exc_info:
            fields.number("second")
        error = exc_info.value
        assert error.field_index == 2
        assert error.field_name == "second"
        assert error.stage == "field"
        assert "field 2 (second)" in str(error)

    def test_required_number(self):
        with pytest.raises(InvalidNumericFieldError, match="required"):
            FieldReader(",").number("count", int, required=True)

    def test_optional_code(self):
        fields = FieldReader(",N")
        assert fields.optional_code("first", NORTH_SOUTH_CODES) is None
        assert fields.optional_code("second", NORTH_SOUTH_CODES) is NorthSouth.NORTH

    def test_optional_code_still_rejects_unknown(self):
        with pytest.raises(InvalidEnumFieldError) as exc_info:
            FieldReader("Q").optional_code("north/south", NORTH_SOUTH_CODES)
        assert exc_info.value.field_index == 1

    def test_codes(self):
        modes = FieldReader("ANDN").codes("modes", POSITION_MODE_CODES)
        assert modes == (Fix.AUTONOMOUS_GNSS_FIX, Fix.NO_FIX, Fix.DIFFERENTIAL_GNSS_FIX, Fix.NO_FIX)

    def test_codes_empty(self):
        assert FieldReader("").codes("modes", POSITION_MODE_CODES) == ()

    def test_unit_marker(self):
        fields = FieldReader("M,X")
        assert fields.unit("first", "M") == "M"
        with pytest.raises(InvalidUnitMarkerError) as exc_info:
            fields.unit("second", "M")
        assert exc_info.value.field_index == 2

    def test_required_unit_marker_rejects_empty(self):
        with pytest.raises(InvalidUnitMarkerError):
            FieldReader("").unit("unit", "M")

    def test_optional_enum_unit_marker(self):
        fields = FieldReader("T,")
        assert fields.unit("first", CourseUnit.DEGREES_TRUE, required=False) is CourseUnit.DEGREES_TRUE
        assert fields.unit("second", CourseUnit.DEGREES_TRUE, required=False) is None

    def test_array_reads_every_slot(self):
        fields = FieldReader("1,,3,")
        ids = fields.array(4, lambda f: f.number("id", int))
        assert ids == (1, None, 3, None)
        assert fields.exhausted

    def test_array_fails_when_slots_are_missing(self):
        with pytest.raises(MissingFieldError):
            FieldReader("1,2").array(3, lambda f: f.number("id", int))

    def test_date_uses_options_century(self):
        fields = FieldReader("091298", DecodeOptions(century=1900))
        assert fields.date("date") == datetime.date(1998, 12, 9)

    def test_text(self):
        fields = FieldReader("W84,")
        assert fields.text("datum") == "W84"
        assert fields.text("sub-datum") is None
