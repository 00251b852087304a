"""Section and subsection codes of ARINC 424 records."""

from __future__ import annotations

from enum import Enum

from flightdeck.arinc424.fields import InvalidValueError, _field


class SecCode(Enum):
    """The section code in column 5."""

    MORA = "A"
    NAVAID = "D"
    ENROUTE = "E"
    HELIPORT = "H"
    AIRPORT = "P"
    COMPANY_ROUTE = "R"
    TABLE = "T"
    AIRSPACE = "U"

    @classmethod
    def parse(cls, record: str) -> SecCode:
        """Read the section code from column 5."""
        code = _field(record, 4, 1)
        try:
            return cls(code)
        except ValueError:
            raise InvalidValueError("unknown SEC CODE") from None


class SubCode(Enum):
    """The subsection code, whose meaning depends on the section code."""

    GRID_MORA = "grid_mora"
    VHF_NAVAID = "vhf_navaid"
    NDB_NAVAID = "ndb_navaid"
    WAYPOINT = "waypoint"
    PAD = "pad"
    REFERENCE_POINT = "reference_point"
    GATE = "gate"
    TERMINAL_WAYPOINT = "terminal_waypoint"
    MSA = "msa"
    COMPANY_ROUTE = "company_route"
    ALTERNATE_RECORD = "alternate_record"
    CRUISING_TABLE = "cruising_table"
    CONTROLLED_AIRSPACE = "controlled_airspace"

    @classmethod
    def parse(cls, record: str, start: int) -> SubCode:
        """Read the subsection code at ``start`` in the context of the section code."""
        sec_code = SecCode.parse(record)
        code = _field(record, start, 1)
        if code not in _SUB_CODES:
            raise InvalidValueError(f"unsupported SUB CODE: {code}")
        try:
            return _SUB_CODES[code][sec_code]
        except KeyError:
            name = "BLANK" if code == " " else code
            raise InvalidValueError(f"invalid SEC CODE for SUB CODE: {name}") from None


_SUB_CODES: dict[str, dict[SecCode, SubCode]] = {
    " ": {
        SecCode.NAVAID: SubCode.VHF_NAVAID,
        SecCode.COMPANY_ROUTE: SubCode.COMPANY_ROUTE,
    },
    "A": {
        SecCode.ENROUTE: SubCode.WAYPOINT,
        SecCode.HELIPORT: SubCode.PAD,
        SecCode.AIRPORT: SubCode.REFERENCE_POINT,
        SecCode.COMPANY_ROUTE: SubCode.ALTERNATE_RECORD,
    },
    "B": {
        SecCode.NAVAID: SubCode.NDB_NAVAID,
        SecCode.AIRPORT: SubCode.GATE,
    },
    "C": {
        SecCode.HELIPORT: SubCode.TERMINAL_WAYPOINT,
        SecCode.AIRPORT: SubCode.TERMINAL_WAYPOINT,
        SecCode.TABLE: SubCode.CRUISING_TABLE,
        SecCode.AIRSPACE: SubCode.CONTROLLED_AIRSPACE,
    },
    "S": {
        SecCode.MORA: SubCode.GRID_MORA,
        SecCode.HELIPORT: SubCode.MSA,
        SecCode.AIRPORT: SubCode.MSA,
    },
}