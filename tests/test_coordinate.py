import pytest

from flightdeck.arinc424.coordinate import CardinalDirection, Latitude, Longitude
from flightdeck.arinc424.fields import (
    NotANumberError,
    NumberOutOfRangeError,
    UnexpectedCharError,
)

PA_AIRPORT = "SEURP EDDHEDA        0        N N53374900E009591762E002000053                   P    MWGE    HAMBURG                       356512407"
PC_WAYPOINT = "SEURPCEDDHED W1    ED0    V     N53341894E009404512                                 WGE           WHISKEY1                 122922407"


def test_airport_latitude():
    lat = Latitude.parse(PA_AIRPORT, 32)
    assert lat == Latitude(CardinalDirection.NORTH, 53, 37, 49, 0)


def test_airport_longitude():
    lon = Longitude.parse(PA_AIRPORT, 41)
    assert lon == Longitude(CardinalDirection.EAST, 9, 59, 17, 62)


def test_waypoint_coordinates():
    assert Latitude.parse(PC_WAYPOINT, 32) == Latitude(CardinalDirection.NORTH, 53, 34, 18, 94)
    assert Longitude.parse(PC_WAYPOINT, 41) == Longitude(CardinalDirection.EAST, 9, 40, 45, 12)


def test_southern_and_western_hemisphere():
    assert Latitude.parse("S53374900", 0).cardinal is CardinalDirection.SOUTH
    assert Longitude.parse("W009591762", 0).cardinal is CardinalDirection.WEST


def test_latitude_wrong_cardinal():
    with pytest.raises(UnexpectedCharError):
        Latitude.parse("E53374900", 0)


def test_longitude_wrong_cardinal():
    with pytest.raises(UnexpectedCharError):
        Longitude.parse("N009591762", 0)


def test_latitude_not_a_number():
    with pytest.raises(NotANumberError):
        Latitude.parse("N5A374900", 0)


def test_latitude_degree_out_of_range():
    with pytest.raises(NumberOutOfRangeError):
        Latitude.parse("N90000000", 0)


def test_latitude_minutes_out_of_range():
    with pytest.raises(NumberOutOfRangeError):
        Latitude.parse("N53604900", 0)


def test_latitude_centiseconds_below_99():
    with pytest.raises(NumberOutOfRangeError):
        Latitude.parse("N53374999", 0)


def test_longitude_at_180_degrees():
    assert Longitude.parse("E180000000", 0) == Longitude(CardinalDirection.EAST, 180, 0, 0, 0)


def test_longitude_beyond_180_degrees():
    with pytest.raises(NumberOutOfRangeError):
        Longitude.parse("E180000001", 0)
    with pytest.raises(NumberOutOfRangeError):
        Longitude.parse("E181000000", 0)


def test_longitude_allows_sixty_minutes():
    assert Longitude.parse("E009606099", 0).minutes == 60