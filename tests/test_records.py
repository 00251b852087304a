import pytest

from flightdeck.arinc424.codes import SecCode, SubCode
from flightdeck.arinc424.coordinate import CardinalDirection
from flightdeck.arinc424.datum import Datum
from flightdeck.arinc424.fields import (
    CustArea,
    Cycle,
    InvalidLengthError,
    InvalidValueError,
    RecordType,
    UnexpectedCharError,
)
from flightdeck.arinc424.indicators import (
    MagTrueInd,
    MagVar,
    MagVarKind,
    NameInd,
    WaypointUsage,
)
from flightdeck.arinc424.records import Airport, Waypoint

PA_AIRPORT = "SEURP EDDHEDA        0        N N53374900E009591762E002000053                   P    MWGE    HAMBURG                       356512407"

PC_WAYPOINT = "SEURPCEDDHED W1    ED0    V     N53341894E009404512                                 WGE           WHISKEY1                 122922407"


def test_airport_record():
    wp = Airport.parse(PA_AIRPORT)
    assert wp.record_type == RecordType.STANDARD
    assert wp.cust_area == CustArea.EUR
    assert wp.sec_code == SecCode.AIRPORT
    assert wp.arpt_ident == "EDDH"
    assert wp.icao_code == "ED"
    assert wp.sub_code == SubCode.REFERENCE_POINT
    assert wp.iata == "   "
    assert wp.cont_nr == "0"
    assert wp.latitude.cardinal == CardinalDirection.NORTH
    assert wp.latitude.degree == 53
    assert wp.latitude.minutes == 37
    assert wp.latitude.seconds == 49
    assert wp.latitude.centiseconds == 0
    assert wp.longitude.cardinal == CardinalDirection.EAST
    assert wp.longitude.degree == 9
    assert wp.longitude.minutes == 59
    assert wp.longitude.seconds == 17
    assert wp.longitude.centiseconds == 62
    assert wp.mag_var == MagVar(MagVarKind.EAST, degree=2, centidegree=0)
    assert wp.mag_true_ind == MagTrueInd.MAGNETIC
    assert wp.datum == Datum.WGE
    assert wp.frn == 35651
    assert wp.cycle == Cycle(year=24, month=7)


def test_waypoint_record():
    wp = Waypoint.parse(PC_WAYPOINT)
    assert wp.record_type == RecordType.STANDARD
    assert wp.cust_area == CustArea.EUR
    assert wp.sec_code == SecCode.AIRPORT
    assert wp.sub_code == SubCode.TERMINAL_WAYPOINT
    assert wp.regn_code == "EDDH"
    assert wp.icao_code == "ED"
    assert wp.fix_ident == "W1   "
    assert wp.cont_nr == "0"
    assert wp.waypoint_type == "V  "
    assert wp.waypoint_usage == WaypointUsage.TERMINAL_ONLY
    assert wp.latitude.cardinal == CardinalDirection.NORTH
    assert wp.latitude.degree == 53
    assert wp.latitude.minutes == 34
    assert wp.latitude.seconds == 18
    assert wp.latitude.centiseconds == 94
    assert wp.longitude.cardinal == CardinalDirection.EAST
    assert wp.longitude.degree == 9
    assert wp.longitude.minutes == 40
    assert wp.longitude.seconds == 45
    assert wp.longitude.centiseconds == 12
    assert wp.mag_var == MagVar(
        MagVarKind.WMM, latitude=wp.latitude, longitude=wp.longitude
    )
    assert wp.datum == Datum.WGE
    assert wp.name_ind == NameInd.UNSPECIFIED
    assert wp.name_desc == "WHISKEY1                 "
    assert wp.frn == 12292
    assert wp.cycle == Cycle(year=24, month=7)


def test_waypoint_fields_display_trimmed():
    wp = Waypoint.parse(PC_WAYPOINT)
    assert str(wp.fix_ident) == "W1"
    assert str(wp.name_desc) == "WHISKEY1"


def test_airport_true_north_variation():
    record = PA_AIRPORT[:51] + "T" + PA_AIRPORT[52:]
    assert Airport.parse(record).mag_var.kind == MagVarKind.TRUE_NORTH


def test_airport_unknown_record_type():
    with pytest.raises(InvalidValueError):
        Airport.parse("X" + PA_AIRPORT[1:])


def test_airport_unknown_datum():
    record = PA_AIRPORT[:86] + "XYZ" + PA_AIRPORT[89:]
    with pytest.raises(UnexpectedCharError):
        Airport.parse(record)


@pytest.mark.parametrize(
    ("parser", "record"), [(Airport.parse, PA_AIRPORT), (Waypoint.parse, PC_WAYPOINT)]
)
def test_truncated_record(parser, record):
    with pytest.raises(InvalidLengthError):
        parser(record[:100])