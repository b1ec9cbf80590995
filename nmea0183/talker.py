"""Talker identifiers.

The first two characters after the ``$``/``!`` marker name the kind of
equipment that produced a sentence (IEC 61162-1 / NMEA 0183 table):

    $GPGGA,...   GP = GPS receiver
    $GNGSA,...   GN = combined multi-constellation GNSS solution
    !AIVDM,...   AI = mobile AIS station
    $UPGBQ,...   UP = microprocessor controller (host polling a receiver)

The table is closed: any code that is not a member is rejected with
``UnknownTalkerError`` rather than being carried as an opaque string.
"""

from enum import Enum

from nmea0183.errors import UnknownTalkerError

__all__ = ["Talker", "parse_talker"]


class Talker(Enum):
    """Two-letter talker identifier; the member value is the wire code."""

    # GNSS
    GPS = "GP"
    GLONASS = "GL"
    GALILEO = "GA"
    BEIDOU = "GB"
    BEIDOU_BD = "BD"
    QZSS = "GQ"
    QZSS_QZ = "QZ"
    NAVIC = "GI"
    GNSS = "GN"

    # AIS
    INDEPENDENT_AIS_BASE_STATION = "AB"
    DEPENDENT_AIS_BASE_STATION = "AD"
    MOBILE_AIS_STATION = "AI"

    # Autopilot
    AUTOPILOT_GENERAL = "AG"
    AUTOPILOT_MAGNETIC = "AP"

    BRIDGE_NAVIGATIONAL_WATCH_ALARM_SYSTEM = "BN"

    # Communications and computers
    COMPUTER_PROGRAMMED_CALCULATOR = "CC"
    DIGITAL_SELECTIVE_CALLING = "CD"
    COMPUTER_MEMORY_DATA = "CM"
    COMMUNICATIONS_SATELLITE = "CS"
    COMMUNICATIONS_RADIO_TELEPHONE_MF_HF = "CT"
    COMMUNICATIONS_RADIO_TELEPHONE_VHF = "CV"
    COMMUNICATIONS_SCANNING_RECEIVER = "CX"

    DECCA = "DE"
    DIRECTION_FINDER = "DF"
    VELOCITY_SENSOR_SPEED_LOG_WATER_MAGNETIC = "DM"
    DUPLEX_REPEATER_STATION = "DU"
    ELECTRONIC_CHART_DISPLAY = "EC"
    EMERGENCY_POSITION_INDICATING_BEACON = "EP"
    ENGINE_ROOM_MONITORING_SYSTEMS = "ER"

    # Heading
    HEADING_MAGNETIC_COMPASS = "HC"
    HEADING_NORTH_SEEKING_GYRO = "HE"
    HEADING_NON_NORTH_SEEKING_GYRO = "HN"

    INTEGRATED_INSTRUMENTATION = "II"
    INTEGRATED_NAVIGATION = "IN"
    LORAN_A_RECEIVER = "LA"
    LORAN_C_RECEIVER = "LC"
    MICROWAVE_POSITIONING_SYSTEM = "MP"
    NAVIGATION_LIGHT_CONTROLLER = "NL"
    OMEGA_NAVIGATION_SYSTEM = "OM"
    DISTRESS_ALARM_SYSTEM = "OS"
    RADAR_OR_ARPA = "RA"
    SOUNDER_DEPTH = "SD"
    ELECTRONIC_POSITIONING_SYSTEM = "SN"
    SOUNDER_SCANNING = "SS"
    TURN_RATE_INDICATOR = "TI"
    TRANSIT_NAVIGATION_SYSTEM = "TR"

    # User configured
    U0 = "U0"
    U1 = "U1"
    U2 = "U2"
    U3 = "U3"
    U4 = "U4"
    U5 = "U5"
    U6 = "U6"
    U7 = "U7"
    U8 = "U8"
    U9 = "U9"
    MICROPROCESSOR_CONTROLLER = "UP"

    VELOCITY_SENSOR_DOPPLER = "VD"
    VELOCITY_SENSOR_SPEED_LOG_WATER_MECHANICAL = "VW"
    WEATHER_INSTRUMENTS = "WI"

    # Transducers
    TRANSDUCER_TEMPERATURE = "YC"
    TRANSDUCER_DISPLACEMENT = "YD"
    TRANSDUCER_FREQUENCY = "YF"
    TRANSDUCER_LEVEL = "YL"
    TRANSDUCER_PRESSURE = "YP"
    TRANSDUCER_FLOW_RATE = "YR"
    TRANSDUCER_TACHOMETER = "YT"
    TRANSDUCER_VOLUME = "YV"
    TRANSDUCER = "YX"

    # Timekeepers
    TIMEKEEPER_ATOMIC_CLOCK = "ZA"
    TIMEKEEPER_CHRONOMETER = "ZC"
    TIMEKEEPER_QUARTZ = "ZQ"
    TIMEKEEPER_RADIO_UPDATE = "ZV"

    @property
    def code(self) -> str:
        return self.value

    @property
    def is_user_configured(self) -> bool:
        return self.value[0] == "U"


_TALKERS_BY_CODE: dict[str, Talker] = {talker.value: talker for talker in Talker}


def parse_talker(code: str) -> Talker:
    """Resolve a two-letter talker code.

    Raises:
        UnknownTalkerError: If ``code`` is not in the talker table.

    Example:
        >>> parse_talker("GP")
        <Talker.GPS: 'GP'>
    """
    try:
        return _TALKERS_BY_CODE[code]
    except KeyError:
        raise UnknownTalkerError(code) from None
