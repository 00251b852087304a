import pytest

from flightdeck.arinc424.datum import Datum
from flightdeck.arinc424.fields import InvalidLengthError, UnexpectedCharError

PA_AIRPORT = "SEURP EDDHEDA        0        N N53374900E009591762E002000053                   P    MWGE    HAMBURG                       356512407"
PC_WAYPOINT = "SEURPCEDDHED W1    ED0    V     N53341894E009404512                                 WGE           WHISKEY1                 122922407"


def test_airport_datum():
    assert Datum.parse(PA_AIRPORT, 86) is Datum.WGE


def test_waypoint_datum():
    assert Datum.parse(PC_WAYPOINT, 84) is Datum.WGE


def test_unknown_datum():
    assert Datum.parse("xxU  yy", 2) is Datum.UNKNOWN


@pytest.mark.parametrize("datum", list(Datum))
def test_every_code_round_trips(datum):
    assert Datum.parse("  " + datum.value + "  ", 2) is datum


def test_invalid_code_raises():
    with pytest.raises(UnexpectedCharError):
        Datum.parse("XYZ", 0)


def test_blank_code_raises():
    with pytest.raises(UnexpectedCharError):
        Datum.parse("   ", 0)


def test_short_record_raises():
    with pytest.raises(InvalidLengthError):
        Datum.parse("WG", 0)