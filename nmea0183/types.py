"""Records for decoded NMEA message bodies.

This module defines one frozen dataclass per supported message code. The
record class *is* the message variant: consumers dispatch on it with
``isinstance`` or ``match``, and ``Record.code`` names its three-letter code.

Design Decisions:
    1. Optional fields (X | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero" - critical for stationary detection and data quality.

    2. Raw fields plus derived properties: Records keep what the sentence
       said (an unsigned latitude and its hemisphere). Signed coordinates,
       validity flags and unit conversions are read-only properties computed
       from those fields, so a record never holds two copies of one value.

    3. Separate valid flag: ``valid`` indicates navigation validity, NOT
       decode validity. A decoded sentence may still be navigationally
       invalid (e.g., no GPS fix). Decode failures raise instead.

    4. Fixed-length tuples: The twelve GSA satellite IDs, the twelve GRS
       residuals and the four GSV satellite slots keep their protocol length.
       An unreported slot is None (or an empty SatelliteInView), never dropped.
"""

import datetime
from dataclasses import dataclass
from typing import ClassVar

from nmea0183.units import (
    ComputationMethod,
    CourseUnit,
    DBHz,
    Degree,
    DistanceUnit,
    EastWest,
    Fix,
    Knot,
    MessageLevel,
    Meter,
    Minute,
    NavigationalStatus,
    NavigationMode,
    NorthSouth,
    OperationMode,
    Second,
    SpeedUnit,
    Status,
)

__all__ = [
    "DTMMessage",
    "GBQMessage",
    "GBSMessage",
    "GGAMessage",
    "GLLMessage",
    "GLQMessage",
    "GNQMessage",
    "GNSMessage",
    "GPQMessage",
    "GRSMessage",
    "GSAMessage",
    "GSTMessage",
    "GSVMessage",
    "Message",
    "RMCMessage",
    "SatelliteInView",
    "TXTMessage",
    "VLWMessage",
    "VTGMessage",
    "ZDAMessage",
]

_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6
_METERS_PER_SECOND_PER_KNOT = 1852.0 / 3600.0


def _signed_degrees(
    value: Degree | None,
    hemisphere: NorthSouth | EastWest | None,
) -> float | None:
    """Apply the sign convention: North/East positive, South/West negative."""
    if value is None or hemisphere is None:
        return None
    if hemisphere in (NorthSouth.SOUTH, EastWest.WEST):
        return -value.value
    return value.value


# --- position fixes -----------------------------------------------------------


@dataclass(frozen=True)
class GGAMessage:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    GGA provides the primary position fix information from GNSS receivers,
    including coordinates, altitude, and fix quality metrics.

    Attributes:
        utc_time: UTC time of the fix. None if the field was empty.

        latitude: Unsigned latitude, the packed DDMM.MMMM value scaled by 1/100.
            Use ``latitude_degrees`` for the signed value.

        north_south: Latitude hemisphere.

        longitude: Unsigned longitude, the packed DDDMM.MMMM value scaled by 1/100.

        east_west: Longitude hemisphere.

        quality: How the fix was computed. ``Fix.NO_FIX`` means the
            coordinates should not be used for navigation.

        num_satellites: Number of satellites used in the fix solution.

        hdop: Horizontal dilution of precision. Lower is better
            (< 1 = ideal, 1-2 = excellent, 2-5 = good, > 10 = poor).

        altitude: Altitude above mean sea level (MSL).

        geoid_separation: Height of geoid (MSL) above WGS84 ellipsoid.
            ellipsoid_height = altitude + geoid_separation.

        differential_age: Age of the differential corrections.

        differential_station: ID of the differential reference station.

    Example:
        >>> gga = decode("$GPGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B\\r\\n").message
        >>> gga.quality
        <Fix.AUTONOMOUS_GNSS_FIX: 'autonomous'>
        >>> round(gga.latitude_degrees, 6)
        47.17114
        >>> gga.valid
        True
    """

    code: ClassVar[str] = "GGA"

    utc_time: datetime.time | None
    latitude: Degree | None
    north_south: NorthSouth
    longitude: Degree | None
    east_west: EastWest
    quality: Fix
    num_satellites: int | None
    hdop: float | None
    altitude: Meter | None
    geoid_separation: Meter | None
    differential_age: Second | None
    differential_station: int | None

    @property
    def latitude_degrees(self) -> float | None:
        return _signed_degrees(self.latitude, self.north_south)

    @property
    def longitude_degrees(self) -> float | None:
        return _signed_degrees(self.longitude, self.east_west)

    @property
    def valid(self) -> bool:
        return self.quality is not Fix.NO_FIX


@dataclass(frozen=True)
class GLLMessage:
    """Decoded GLL (Geographic Position - Latitude/Longitude) sentence."""

    code: ClassVar[str] = "GLL"

    latitude: Degree | None
    north_south: NorthSouth
    longitude: Degree | None
    east_west: EastWest
    utc_time: datetime.time | None
    status: Status
    position_mode: Fix

    @property
    def latitude_degrees(self) -> float | None:
        return _signed_degrees(self.latitude, self.north_south)

    @property
    def longitude_degrees(self) -> float | None:
        return _signed_degrees(self.longitude, self.east_west)

    @property
    def valid(self) -> bool:
        return self.status is Status.DATA_VALID


@dataclass(frozen=True)
class GNSMessage:
    """Decoded GNS (GNSS Fix Data) sentence.

    Like GGA, but with one position mode character per constellation
    (GPS, GLONASS, Galileo, BeiDou, ... in that order) instead of a single
    quality indicator. Receivers leave the hemisphere fields empty when there
    is no fix, so ``north_south`` and ``east_west`` are optional here.

    Attributes:
        position_modes: One ``Fix`` per constellation, e.g. ``"ANNN"`` gives
            (AUTONOMOUS_GNSS_FIX, NO_FIX, NO_FIX, NO_FIX).
        navigational_status: NMEA 4.1 safety status of the solution.
    """

    code: ClassVar[str] = "GNS"

    utc_time: datetime.time | None
    latitude: Degree | None
    north_south: NorthSouth | None
    longitude: Degree | None
    east_west: EastWest | None
    position_modes: tuple[Fix, ...]
    num_satellites: int | None
    hdop: float | None
    altitude: Meter | None
    geoid_separation: Meter | None
    differential_age: Second | None
    differential_station: int | None
    navigational_status: NavigationalStatus

    @property
    def latitude_degrees(self) -> float | None:
        return _signed_degrees(self.latitude, self.north_south)

    @property
    def longitude_degrees(self) -> float | None:
        return _signed_degrees(self.longitude, self.east_west)

    @property
    def valid(self) -> bool:
        return any(mode is not Fix.NO_FIX for mode in self.position_modes)


@dataclass(frozen=True)
class RMCMessage:
    """Decoded RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        status: ``Status.DATA_VALID`` when the receiver has a fix.
        speed: Speed over ground.
        course: Course over ground, degrees true. Not a packed coordinate.
        date: UTC date; the two-digit year is completed with
            ``DecodeOptions.century``.
        magnetic_variation: Magnetic variation, with its direction in
            ``magnetic_variation_direction`` (None when not reported).
        position_mode: FAA mode indicator (NMEA 2.3+).
        navigational_status: NMEA 4.1 safety status of the solution.
    """

    code: ClassVar[str] = "RMC"

    utc_time: datetime.time | None
    status: Status
    latitude: Degree | None
    north_south: NorthSouth
    longitude: Degree | None
    east_west: EastWest
    speed: Knot | None
    course: Degree | None
    date: datetime.date | None
    magnetic_variation: Degree | None
    magnetic_variation_direction: EastWest | None
    position_mode: Fix
    navigational_status: NavigationalStatus

    @property
    def latitude_degrees(self) -> float | None:
        return _signed_degrees(self.latitude, self.north_south)

    @property
    def longitude_degrees(self) -> float | None:
        return _signed_degrees(self.longitude, self.east_west)

    @property
    def valid(self) -> bool:
        return self.status is Status.DATA_VALID

    @property
    def timestamp(self) -> datetime.datetime | None:
        """UTC date and time combined, or None if either is missing."""
        if self.date is None or self.utc_time is None:
            return None
        return datetime.datetime.combine(self.date, self.utc_time, tzinfo=datetime.timezone.utc)


# --- satellites and accuracy --------------------------------------------------


@dataclass(frozen=True)
class SatelliteInView:
    """One satellite slot of a GSV sentence.

    All four values are None for a slot the receiver did not fill.
    """

    id: int | None
    elevation: Degree | None
    azimuth: Degree | None
    snr: DBHz | None

    @property
    def is_empty(self) -> bool:
        return self.id is None and self.elevation is None and self.azimuth is None and self.snr is None


EMPTY_SATELLITE = SatelliteInView(None, None, None, None)


@dataclass(frozen=True)
class GSAMessage:
    """Decoded GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        operation_mode: Manual or automatic 2D/3D switching.
        navigation_mode: Fix dimensionality.
        satellite_ids: Exactly twelve slots; unused slots are None.
        pdop, hdop, vdop: Position, horizontal and vertical dilution of
            precision.
    """

    code: ClassVar[str] = "GSA"

    operation_mode: OperationMode
    navigation_mode: NavigationMode
    satellite_ids: tuple[int | None, ...]
    pdop: float | None
    hdop: float | None
    vdop: float | None

    @property
    def satellites_used(self) -> tuple[int, ...]:
        return tuple(satellite_id for satellite_id in self.satellite_ids if satellite_id is not None)


@dataclass(frozen=True)
class GSVMessage:
    """Decoded GSV (GNSS Satellites in View) sentence.

    A receiver reports its satellites in view over a group of GSV sentences,
    four satellites each. ``total_messages`` and ``message_number`` place
    this sentence in its group; ``satellites_in_view`` is the total over the
    whole group. ``satellites`` always has four slots.
    """

    code: ClassVar[str] = "GSV"

    total_messages: int
    message_number: int
    satellites_in_view: int
    satellites: tuple[SatelliteInView, ...]
    signal_id: int | None

    @property
    def satellites_reported(self) -> tuple[SatelliteInView, ...]:
        return tuple(satellite for satellite in self.satellites if not satellite.is_empty)

    @property
    def is_last(self) -> bool:
        return self.message_number == self.total_messages


@dataclass(frozen=True)
class GBSMessage:
    """Decoded GBS (GNSS Satellite Fault Detection) sentence."""

    code: ClassVar[str] = "GBS"

    utc_time: datetime.time | None
    latitude_error: Meter | None
    longitude_error: Meter | None
    altitude_error: Meter | None
    satellite_id: int | None
    probability: float | None
    bias: Meter | None
    bias_standard_deviation: Meter | None
    system_id: int | None
    signal_id: int | None


@dataclass(frozen=True)
class GRSMessage:
    """Decoded GRS (GNSS Range Residuals) sentence.

    ``residuals`` has twelve slots, ordered as the satellites of the GSA
    sentence for the same ``system_id``.
    """

    code: ClassVar[str] = "GRS"

    utc_time: datetime.time | None
    computation_method: ComputationMethod | None
    residuals: tuple[Meter | None, ...]
    system_id: int | None
    signal_id: int | None


@dataclass(frozen=True)
class GSTMessage:
    """Decoded GST (GNSS Pseudorange Error Statistics) sentence."""

    code: ClassVar[str] = "GST"

    utc_time: datetime.time | None
    range_rms: Meter | None
    std_major: Meter | None
    std_minor: Meter | None
    orientation: Degree | None
    std_latitude: Meter | None
    std_longitude: Meter | None
    std_altitude: Meter | None


# --- course, speed and distance -----------------------------------------------


@dataclass(frozen=True)
class VTGMessage:
    """Decoded VTG (Course Over Ground and Ground Speed) sentence.

    VTG provides velocity information including direction of travel (course)
    and speed over ground. Each value is followed by a unit column (T, M, N,
    K) that older receivers leave empty, so the unit fields are optional.

    Attributes:
        course_true: Course over ground relative to true north.
            Range: 0.0 to 359.99. None if stationary or field empty.

        course_magnetic: Course relative to magnetic north.
            Often None as many receivers don't output magnetic course.

        speed_knots: Speed over ground in knots.

        speed_kilometers_per_hour: Speed over ground in km/h.

        position_mode: FAA mode indicator. ``Fix.NO_FIX`` means the
            velocity should not be used.

    Example:
        >>> vtg = decode("$GPVTG,77.52,T,,M,0.004,N,0.008,K,A*06\\r\\n").message
        >>> vtg.speed_knots
        Knot(value=0.004)
    """

    code: ClassVar[str] = "VTG"

    course_true: Degree | None
    course_true_unit: CourseUnit | None
    course_magnetic: Degree | None
    course_magnetic_unit: CourseUnit | None
    speed_knots: Knot | None
    speed_knots_unit: SpeedUnit | None
    speed_kilometers_per_hour: float | None
    speed_kilometers_per_hour_unit: SpeedUnit | None
    position_mode: Fix

    @property
    def speed_meters_per_second(self) -> float | None:
        """Speed over ground in m/s.

        Computed from the km/h column, falling back to knots when only that
        is reported. None if neither is present.
        """
        if self.speed_kilometers_per_hour is not None:
            return self.speed_kilometers_per_hour / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND
        if self.speed_knots is not None:
            return self.speed_knots.value * _METERS_PER_SECOND_PER_KNOT
        return None

    @property
    def valid(self) -> bool:
        return self.position_mode is not Fix.NO_FIX


@dataclass(frozen=True)
class VLWMessage:
    """Decoded VLW (Dual Ground/Water Distance) sentence.

    Distances are in nautical miles; each is followed by an ``N`` unit column.
    """

    code: ClassVar[str] = "VLW"

    total_water_distance: float | None
    total_water_distance_unit: DistanceUnit | None
    water_distance: float | None
    water_distance_unit: DistanceUnit | None
    total_ground_distance: float | None
    total_ground_distance_unit: DistanceUnit | None
    ground_distance: float | None
    ground_distance_unit: DistanceUnit | None


# --- reference and housekeeping -----------------------------------------------


@dataclass(frozen=True)
class DTMMessage:
    """Decoded DTM (Datum Reference) sentence.

    Attributes:
        datum: Local datum code (``W84``, ``999`` for user defined, ...).
        sub_datum: Local datum subdivision code.
        latitude_offset: Offset from the reference datum, in minutes.
        longitude_offset: Offset from the reference datum, in minutes.
        altitude_offset: Altitude offset from the reference datum.
        reference_datum: Reference datum code, typically ``W84``.
    """

    code: ClassVar[str] = "DTM"

    datum: str | None
    sub_datum: str | None
    latitude_offset: Minute | None
    north_south: NorthSouth
    longitude_offset: Minute | None
    east_west: EastWest
    altitude_offset: Meter | None
    reference_datum: str | None


@dataclass(frozen=True)
class ZDAMessage:
    """Decoded ZDA (Time and Date) sentence."""

    code: ClassVar[str] = "ZDA"

    utc_time: datetime.time | None
    day: int | None
    month: int | None
    year: int | None
    local_zone_hours: int | None
    local_zone_minutes: int | None

    @property
    def date(self) -> datetime.date | None:
        if self.year is None or self.month is None or self.day is None:
            return None
        return datetime.date(self.year, self.month, self.day)


@dataclass(frozen=True)
class TXTMessage:
    """Decoded TXT (Text Transmission) sentence."""

    code: ClassVar[str] = "TXT"

    total_messages: int | None
    message_number: int | None
    level: MessageLevel
    text: str | None


# --- polling requests ---------------------------------------------------------


@dataclass(frozen=True)
class _PollMessage:
    """A request for the receiver to output ``message_id`` once."""

    message_id: str


@dataclass(frozen=True)
class GBQMessage(_PollMessage):
    """Poll a standard message (talker ID GB)."""

    code: ClassVar[str] = "GBQ"


@dataclass(frozen=True)
class GLQMessage(_PollMessage):
    """Poll a standard message (talker ID GL)."""

    code: ClassVar[str] = "GLQ"


@dataclass(frozen=True)
class GNQMessage(_PollMessage):
    """Poll a standard message (talker ID GN)."""

    code: ClassVar[str] = "GNQ"


@dataclass(frozen=True)
class GPQMessage(_PollMessage):
    """Poll a standard message (talker ID GP)."""

    code: ClassVar[str] = "GPQ"


Message = (
    GGAMessage
    | GLLMessage
    | GNSMessage
    | RMCMessage
    | GSAMessage
    | GSVMessage
    | GBSMessage
    | GRSMessage
    | GSTMessage
    | VTGMessage
    | VLWMessage
    | DTMMessage
    | ZDAMessage
    | TXTMessage
    | GBQMessage
    | GLQMessage
    | GNQMessage
    | GPQMessage
)
