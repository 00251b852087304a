"""Magnetic variation and indicator fields of ARINC 424 records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flightdeck.arinc424.coordinate import Latitude, Longitude
from flightdeck.arinc424.fields import (
    InvalidValueError,
    UnexpectedCharError,
    _field,
    _parse_unsigned,
)


class MagVarKind(Enum):
    """How the magnetic variation of a point is given."""

    EAST = "E"
    WEST = "W"
    TRUE_NORTH = "T"
    WMM = " "


@dataclass(frozen=True)
class MagVar:
    """A magnetic variation.

    East and west variations carry ``degree`` and ``centidegree``; a blank
    variation (to be taken from the world magnetic model) carries the point's
    ``latitude`` and ``longitude``.
    """

    kind: MagVarKind
    degree: int | None = None
    centidegree: int | None = None
    latitude: Latitude | None = None
    longitude: Longitude | None = None

    @classmethod
    def parse(
        cls, record: str, start: int, lat_start: int, lon_start: int
    ) -> MagVar:
        """Read the variation at ``start``; coordinates are read for a blank one."""
        code = _field(record, start, 1)
        if code in ("E", "W"):
            degree = _parse_unsigned(_field(record, start + 1, 3), 8)
            centidegree = _parse_unsigned(_field(record, start + 4, 1), 8)
            return cls(MagVarKind(code), degree=degree, centidegree=centidegree)
        if code == "T":
            return cls(MagVarKind.TRUE_NORTH)
        if code == " ":
            return cls(
                MagVarKind.WMM,
                latitude=Latitude.parse(record, lat_start),
                longitude=Longitude.parse(record, lon_start),
            )
        raise UnexpectedCharError("expected E, W or T as variation direction")


class MagTrueInd(Enum):
    """Whether bearings are given to magnetic or true north."""

    MAGNETIC = "M"
    TRUE_NORTH = "T"
    MIXED = " "

    @classmethod
    def parse(cls, record: str, start: int) -> MagTrueInd:
        """Read the indicator in the column ``start``."""
        code = _field(record, start, 1)
        try:
            return cls(code)
        except ValueError:
            raise UnexpectedCharError(
                "unexpected magnetic/true north indicator"
            ) from None


class NameInd(Enum):
    """The name format indicator of a fix."""

    ABEAM_FIX = "A  "
    BEARING_DISTANCE_FIX = "B  "
    AIRPORT_NAME_AS_FIX = "D  "
    FIR_FIX = "F  "
    PHONETIC_LETTER_NAME_FIX = "H  "
    AIRPORT_IDENT_FIX = "I  "
    LATITUDE_LONGITUDE_FIX = "L  "
    MULTIPLE_WORD_NAME_FIX = "M  "
    NAVAID_IDENT_FIX = "N  "
    PUBLISHED_FIVE_LETTER_NAME_FIX = "P  "
    PUBLISHED_NAME_FIX_LESS_THAN_FIVE_LETTERS = "Q  "
    PUBLISHED_NAME_FIX_MORE_THAN_FIVE_LETTERS = "R  "
    AIRPORT_RWY_RELATED_FIX = "T  "
    UIR_FIX = "U  "
    LOCALIZER_MARKER_WITH_PUBLISHED_FIVE_LETTER = " O "
    LOCALIZER_MARKER_WITHOUT_PUBLISHED_FIVE_LETTER = " M "
    UNSPECIFIED = "   "

    @classmethod
    def parse(cls, record: str, start: int) -> NameInd:
        """Read the three-column indicator beginning at ``start``."""
        code = _field(record, start, 3)
        try:
            return cls(code)
        except ValueError:
            raise UnexpectedCharError("unexpected name format indicator") from None


class WaypointUsage(Enum):
    """The waypoint usage in columns 30 and 31."""

    HI_LO_ALTITUDE = " B"
    HI_ALTITUDE = " H"
    LO_ALTITUDE = " L"
    TERMINAL_ONLY = "  "
    RNAV = "R "

    @classmethod
    def parse(cls, record: str) -> WaypointUsage:
        """Read the waypoint usage from columns 30 and 31."""
        code = _field(record, 29, 2)
        try:
            return cls(code)
        except ValueError:
            raise InvalidValueError("unknown waypoint usage") from None