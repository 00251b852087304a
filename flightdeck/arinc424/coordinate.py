"""Latitude and longitude fields of ARINC 424 records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flightdeck.arinc424.fields import (
    NumberOutOfRangeError,
    UnexpectedCharError,
    _field,
    _parse_unsigned,
)


class CardinalDirection(Enum):
    """A cardinal direction."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


def _parse_numeric(record: str, start: int, length: int, upper: int) -> int:
    value = _parse_unsigned(_field(record, start, length), 8)
    if not 0 <= value < upper:
        raise NumberOutOfRangeError(f"{value} is not below {upper}")
    return value


@dataclass(frozen=True)
class Latitude:
    """A latitude in degrees, minutes, seconds and centiseconds."""

    cardinal: CardinalDirection
    degree: int
    minutes: int
    seconds: int
    centiseconds: int

    @classmethod
    def parse(cls, record: str, start: int) -> Latitude:
        """Read a latitude of the form ``NDDMMSSCC`` beginning at ``start``."""
        code = _field(record, start, 1)
        if code == "N":
            cardinal = CardinalDirection.NORTH
        elif code == "S":
            cardinal = CardinalDirection.SOUTH
        else:
            raise UnexpectedCharError("expected N or S cardinal direction")

        degree = _parse_numeric(record, start + 1, 2, 90)
        minutes = _parse_numeric(record, start + 3, 2, 60)
        seconds = _parse_numeric(record, start + 5, 2, 60)
        centiseconds = _parse_numeric(record, start + 7, 2, 99)

        if degree == 90 and (minutes or seconds or centiseconds):
            raise NumberOutOfRangeError("latitude beyond 90 degrees")
        return cls(cardinal, degree, minutes, seconds, centiseconds)


@dataclass(frozen=True)
class Longitude:
    """A longitude in degrees, minutes, seconds and centiseconds."""

    cardinal: CardinalDirection
    degree: int
    minutes: int
    seconds: int
    centiseconds: int

    @classmethod
    def parse(cls, record: str, start: int) -> Longitude:
        """Read a longitude of the form ``EDDDMMSSCC`` beginning at ``start``."""
        code = _field(record, start, 1)
        if code == "W":
            cardinal = CardinalDirection.WEST
        elif code == "E":
            cardinal = CardinalDirection.EAST
        else:
            raise UnexpectedCharError("expected E or W cardinal direction")

        degree = _parse_numeric(record, start + 1, 3, 181)
        minutes = _parse_numeric(record, start + 4, 2, 61)
        seconds = _parse_numeric(record, start + 6, 2, 61)
        centiseconds = _parse_numeric(record, start + 8, 2, 100)

        if degree == 180 and (minutes or seconds or centiseconds):
            raise NumberOutOfRangeError("longitude beyond 180 degrees")
        return cls(cardinal, degree, minutes, seconds, centiseconds)