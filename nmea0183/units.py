"""Physical quantities and enumerated codes used in NMEA sentences.

Design Decisions:
    1. One type per unit: Each physical quantity is a small frozen dataclass
       around a float. ``Degree(1.0) == Meter(1.0)`` is False, so a latitude
       can never be compared with, or assigned in place of, an altitude by
       accident. Equality is plain float equality; values are exactly what
       the sentence said, not a physical measurement with tolerance.

    2. Codes as Enums: Fixed single- or two-character codes map to Enum
       members through the ``*_CODES`` tables below. The tables are the
       complete grammar of each code: a character missing from a table is an
       invalid field, never a default.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "COMPUTATION_METHOD_CODES",
    "EAST_WEST_CODES",
    "FIX_QUALITY_CODES",
    "MESSAGE_LEVEL_CODES",
    "NAVIGATIONAL_STATUS_CODES",
    "NAVIGATION_MODE_CODES",
    "NORTH_SOUTH_CODES",
    "OPERATION_MODE_CODES",
    "POSITION_MODE_CODES",
    "STATUS_CODES",
    "ComputationMethod",
    "CourseUnit",
    "DBHz",
    "Degree",
    "DistanceUnit",
    "EastWest",
    "Fix",
    "Knot",
    "MessageLevel",
    "Meter",
    "Minute",
    "NavigationMode",
    "NavigationalStatus",
    "NorthSouth",
    "OperationMode",
    "Second",
    "SpeedUnit",
    "Status",
]


# --- quantities ---------------------------------------------------------------


@dataclass(frozen=True)
class _Quantity:
    value: float

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class Degree(_Quantity):
    """Angle in decimal degrees."""


@dataclass(frozen=True)
class Minute(_Quantity):
    """Angle in minutes of arc (1/60 of a degree)."""


@dataclass(frozen=True)
class Second(_Quantity):
    """Duration in seconds."""


@dataclass(frozen=True)
class Meter(_Quantity):
    """Length in meters."""


@dataclass(frozen=True)
class Knot(_Quantity):
    """Speed in nautical miles per hour (1 knot = 1.852 km/h)."""


@dataclass(frozen=True)
class DBHz(_Quantity):
    """Carrier-to-noise density ratio in dB-Hz."""


# --- cardinal indicators ------------------------------------------------------


class NorthSouth(Enum):
    NORTH = "N"
    SOUTH = "S"


class EastWest(Enum):
    EAST = "E"
    WEST = "W"


# --- fix and status -----------------------------------------------------------


class Fix(Enum):
    """How a position solution was computed.

    Shared by the GGA quality indicator (digits) and the position mode
    indicator of GLL, GNS, RMC and VTG (letters).
    """

    NO_FIX = "no fix"
    AUTONOMOUS_GNSS_FIX = "autonomous"
    DIFFERENTIAL_GNSS_FIX = "differential"
    PRECISE_GNSS_FIX = "precise"
    RTK_FIXED = "rtk fixed"
    RTK_FLOAT = "rtk float"
    ESTIMATED_OR_DEAD_RECKONING_FIX = "estimated"
    MANUAL_INPUT = "manual"
    SIMULATOR = "simulator"


class Status(Enum):
    """Data validity flag of GLL and RMC."""

    DATA_VALID = "A"
    DATA_INVALID = "V"


class OperationMode(Enum):
    """GSA 2D/3D switching mode."""

    MANUAL = "M"
    AUTOMATIC = "A"


class NavigationMode(Enum):
    """GSA fix dimensionality."""

    FIX_NO = "1"
    FIX_2D = "2"
    FIX_3D = "3"


class NavigationalStatus(Enum):
    """NMEA 4.1 navigational status of RMC and GNS."""

    SAFE = "S"
    CAUTION = "C"
    UNSAFE = "U"
    NOT_VALID = "V"


class ComputationMethod(Enum):
    """How GRS range residuals relate to the GGA position."""

    IN_GGA = "0"
    AFTER_GGA = "1"


class MessageLevel(Enum):
    """Severity of a TXT transmission."""

    ERROR = "00"
    WARNING = "01"
    NOTICE = "02"
    USER = "07"


class CourseUnit(Enum):
    DEGREES_TRUE = "T"
    DEGREES_MAGNETIC = "M"


class SpeedUnit(Enum):
    KNOTS = "N"
    KILOMETERS_PER_HOUR = "K"


class DistanceUnit(Enum):
    NAUTICAL_MILE = "N"


# --- code tables --------------------------------------------------------------


def _by_value(enum: type[Enum]) -> dict[str, Enum]:
    return {member.value: member for member in enum}


NORTH_SOUTH_CODES = _by_value(NorthSouth)
EAST_WEST_CODES = _by_value(EastWest)
STATUS_CODES = _by_value(Status)
OPERATION_MODE_CODES = _by_value(OperationMode)
NAVIGATION_MODE_CODES = _by_value(NavigationMode)
NAVIGATIONAL_STATUS_CODES = _by_value(NavigationalStatus)
COMPUTATION_METHOD_CODES = _by_value(ComputationMethod)
MESSAGE_LEVEL_CODES = _by_value(MessageLevel)

# GGA quality indicator
FIX_QUALITY_CODES: dict[str, Fix] = {
    "0": Fix.NO_FIX,
    "1": Fix.AUTONOMOUS_GNSS_FIX,
    "2": Fix.DIFFERENTIAL_GNSS_FIX,
    "3": Fix.PRECISE_GNSS_FIX,
    "4": Fix.RTK_FIXED,
    "5": Fix.RTK_FLOAT,
    "6": Fix.ESTIMATED_OR_DEAD_RECKONING_FIX,
    "7": Fix.MANUAL_INPUT,
    "8": Fix.SIMULATOR,
}

# FAA mode indicator (NMEA 2.3+)
POSITION_MODE_CODES: dict[str, Fix] = {
    "N": Fix.NO_FIX,
    "A": Fix.AUTONOMOUS_GNSS_FIX,
    "D": Fix.DIFFERENTIAL_GNSS_FIX,
    "P": Fix.PRECISE_GNSS_FIX,
    "R": Fix.RTK_FIXED,
    "F": Fix.RTK_FLOAT,
    "E": Fix.ESTIMATED_OR_DEAD_RECKONING_FIX,
    "M": Fix.MANUAL_INPUT,
    "S": Fix.SIMULATOR,
}
