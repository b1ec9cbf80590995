"""Tests for the position fix messages: GGA, GLL, GNS and RMC."""

import datetime

import pytest

from nmea0183 import (
    Degree,
    EastWest,
    Fix,
    GGAMessage,
    GLLMessage,
    GNSMessage,
    InvalidEnumFieldError,
    Knot,
    Meter,
    NavigationalStatus,
    NorthSouth,
    RMCMessage,
    Second,
    Status,
    Talker,
    decode,
)

RMC = "$GPRMC,083559.00,A,4717.11437,N,00833.91522,E,0.004,77.52,091202,,,A,V*2D\r\n"


class TestGGA:
    """Tests for GGA decoding."""

    def test_southern_western_hemisphere_no_fix(self):
        gga = decode("$GPGGA,123519,4807.038,S,01131.000,W,0,00,,,M,,M,,*5D\r\n").message
        assert isinstance(gga, GGAMessage)
        assert gga.utc_time == datetime.time(12, 35, 19)
        assert gga.north_south is NorthSouth.SOUTH
        assert gga.latitude_degrees == pytest.approx(-48.07038)
        assert gga.longitude_degrees == pytest.approx(-11.31)
        assert gga.quality is Fix.NO_FIX
        assert gga.num_satellites == 0
        assert gga.hdop is None
        assert gga.altitude is None
        assert gga.geoid_separation is None
        assert gga.valid is False

    def test_unsigned_value_kept_with_hemisphere(self):
        gga = decode("$GPGGA,123519,4807.038,S,01131.000,W,0,00,,,M,,M,,*5D\r\n").message
        assert gga.latitude.value == pytest.approx(48.07038)
        assert gga.longitude.value == pytest.approx(11.31)

    def test_differential_fields(self):
        gga = decode(
            "$GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,2.5,0042*74\r\n"
        ).message
        assert gga.differential_age == Second(2.5)
        assert gga.differential_station == 42

    def test_valid_with_fix(self):
        gga = decode(
            "$GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B\r\n"
        ).message
        assert gga.valid is True
        assert gga.latitude_degrees == pytest.approx(47.1711399)
        assert gga.longitude_degrees == pytest.approx(8.339159)

    def test_packed_coordinates_scaled_by_one_hundredth(self):
        gga = decode(
            "$GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B\r\n"
        ).message
        assert gga.latitude.value == pytest.approx(47.1711399, abs=1e-9)
        assert gga.longitude.value == pytest.approx(8.3391590, abs=1e-9)

    def test_empty_hemisphere_is_rejected(self):
        with pytest.raises(InvalidEnumFieldError) as exc_info:
            decode("$GPGGA,,,,,,0,00,,,M,,M,,*66\r\n")
        assert exc_info.value.field_index == 3
        assert exc_info.value.field_name == "north/south"


class TestGLL:
    """Tests for GLL decoding."""

    def test_valid_position(self):
        gll = decode("$GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60\r\n").message
        assert isinstance(gll, GLLMessage)
        assert gll.latitude.value == pytest.approx(47.1711364)
        assert gll.longitude.value == pytest.approx(8.3391565)
        assert gll.utc_time == datetime.time(9, 23, 21)
        assert gll.status is Status.DATA_VALID
        assert gll.position_mode is Fix.AUTONOMOUS_GNSS_FIX
        assert gll.valid is True


class TestGNS:
    """Tests for GNS decoding."""

    def test_multi_constellation_fix(self):
        sentence = decode(
            "$GNGNS,103600.01,5114.51176,N,00012.29380,W,ANNN,07,1.18,111.5,45.6,,,V*00\r\n"
        )
        assert sentence.talker is Talker.GNSS
        gns = sentence.message
        assert isinstance(gns, GNSMessage)
        assert gns.utc_time == datetime.time(10, 36, 0, 10_000)
        assert gns.latitude_degrees == pytest.approx(51.1451176)
        assert gns.longitude_degrees == pytest.approx(-0.122938)
        assert gns.position_modes == (Fix.AUTONOMOUS_GNSS_FIX, Fix.NO_FIX, Fix.NO_FIX, Fix.NO_FIX)
        assert gns.num_satellites == 7
        assert gns.hdop == pytest.approx(1.18)
        assert gns.altitude == Meter(111.5)
        assert gns.geoid_separation == Meter(45.6)
        assert gns.differential_age is None
        assert gns.differential_station is None
        assert gns.navigational_status is NavigationalStatus.NOT_VALID
        assert gns.valid is True

    def test_no_fix_leaves_hemispheres_empty(self):
        gns = decode("$GNGNS,103600.01,,,,,NN,00,,,,,,V*02\r\n").message
        assert gns.latitude is None
        assert gns.north_south is None
        assert gns.east_west is None
        assert gns.latitude_degrees is None
        assert gns.position_modes == (Fix.NO_FIX, Fix.NO_FIX)
        assert gns.num_satellites == 0
        assert gns.valid is False


class TestRMC:
    """Tests for RMC decoding."""

    def test_valid_position(self):
        rmc = decode(RMC).message
        assert isinstance(rmc, RMCMessage)
        assert rmc.utc_time == datetime.time(8, 35, 59)
        assert rmc.status is Status.DATA_VALID
        assert rmc.latitude_degrees == pytest.approx(47.1711437)
        assert rmc.longitude_degrees == pytest.approx(8.3391522)
        assert rmc.speed == Knot(0.004)
        assert rmc.course == Degree(77.52)
        assert rmc.date == datetime.date(2002, 12, 9)
        assert rmc.magnetic_variation is None
        assert rmc.magnetic_variation_direction is None
        assert rmc.position_mode is Fix.AUTONOMOUS_GNSS_FIX
        assert rmc.navigational_status is NavigationalStatus.NOT_VALID
        assert rmc.valid is True

    def test_timestamp_combines_date_and_time(self):
        rmc = decode(RMC).message
        assert rmc.timestamp == datetime.datetime(2002, 12, 9, 8, 35, 59, tzinfo=datetime.timezone.utc)

    def test_magnetic_variation(self):
        rmc = decode(
            "$GPRMC,083559.00,A,4717.11437,N,00833.91522,E,0.004,77.52,091202,1.5,W,A,V*50\r\n"
        ).message
        assert rmc.magnetic_variation == Degree(1.5)
        assert rmc.magnetic_variation_direction is EastWest.WEST
