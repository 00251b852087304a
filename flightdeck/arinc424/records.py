"""ARINC 424 records built from their fixed-column fields."""

from __future__ import annotations

from dataclasses import dataclass

from flightdeck.arinc424.codes import SecCode, SubCode
from flightdeck.arinc424.coordinate import Latitude, Longitude
from flightdeck.arinc424.datum import Datum
from flightdeck.arinc424.fields import (
    ArptHeliIdent,
    ContNr,
    CustArea,
    Cycle,
    FileRecordNumber,
    FixIdent,
    Iata,
    IcaoCode,
    NameDesc,
    RecordType,
    RegnCode,
    WaypointType,
)
from flightdeck.arinc424.indicators import MagTrueInd, MagVar, NameInd, WaypointUsage


@dataclass(frozen=True)
class Airport:
    """An airport reference point record."""

    record_type: RecordType
    cust_area: CustArea
    sec_code: SecCode
    arpt_ident: ArptHeliIdent
    icao_code: IcaoCode
    sub_code: SubCode
    iata: Iata
    cont_nr: ContNr
    latitude: Latitude
    longitude: Longitude
    mag_var: MagVar
    mag_true_ind: MagTrueInd
    datum: Datum
    frn: FileRecordNumber
    cycle: Cycle

    @classmethod
    def parse(cls, record: str) -> Airport:
        """Parse an airport record; raises a ``FieldError`` on a malformed field."""
        return cls(
            record_type=RecordType.parse(record),
            cust_area=CustArea.parse(record),
            sec_code=SecCode.parse(record),
            arpt_ident=ArptHeliIdent.parse(record, 6),
            icao_code=IcaoCode.parse(record, 10),
            sub_code=SubCode.parse(record, 12),
            iata=Iata.parse(record, 13),
            cont_nr=ContNr.parse(record, 21),
            latitude=Latitude.parse(record, 32),
            longitude=Longitude.parse(record, 41),
            mag_var=MagVar.parse(record, 51, 32, 41),
            mag_true_ind=MagTrueInd.parse(record, 85),
            datum=Datum.parse(record, 86),
            frn=FileRecordNumber.parse(record),
            cycle=Cycle.parse(record),
        )


@dataclass(frozen=True)
class Waypoint:
    """An enroute or terminal waypoint record."""

    record_type: RecordType
    cust_area: CustArea
    sec_code: SecCode
    sub_code: SubCode
    regn_code: RegnCode
    icao_code: IcaoCode
    fix_ident: FixIdent
    cont_nr: ContNr
    waypoint_type: WaypointType
    waypoint_usage: WaypointUsage
    latitude: Latitude
    longitude: Longitude
    mag_var: MagVar
    datum: Datum
    name_ind: NameInd
    name_desc: NameDesc
    frn: FileRecordNumber
    cycle: Cycle

    @classmethod
    def parse(cls, record: str) -> Waypoint:
        """Parse a waypoint record; raises a ``FieldError`` on a malformed field."""
        return cls(
            record_type=RecordType.parse(record),
            cust_area=CustArea.parse(record),
            sec_code=SecCode.parse(record),
            sub_code=SubCode.parse(record, 5),
            regn_code=RegnCode.parse(record, 6),
            icao_code=IcaoCode.parse(record, 10),
            fix_ident=FixIdent.parse(record, 13),
            cont_nr=ContNr.parse(record, 21),
            waypoint_type=WaypointType.parse(record, 26),
            waypoint_usage=WaypointUsage.parse(record),
            latitude=Latitude.parse(record, 32),
            longitude=Longitude.parse(record, 41),
            mag_var=MagVar.parse(record, 74, 32, 41),
            datum=Datum.parse(record, 84),
            name_ind=NameInd.parse(record, 95),
            name_desc=NameDesc.parse(record, 98),
            frn=FileRecordNumber.parse(record),
            cycle=Cycle.parse(record),
        )