# flightdeck

Building blocks for electronic flight bag software:

- `flightdeck.arinc424` reads fixed-width ARINC 424 navigation records
  (airport reference points and waypoints) into typed Python objects.
- `flightdeck.algorithm` provides a winding-number point-in-polygon test,
  suitable for example for checking a centre of gravity against an envelope.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Parsing ARINC 424 records

Each record is a single 132-column line. Parse it with the matching record
class from `flightdeck.arinc424.records`:

```python
from flightdeck.arinc424.records import Airport, Waypoint

record = "SEURP EDDHEDA        0        N N53374900E009591762E002000053                   P    MWGE    HAMBURG                       356512407"
airport = Airport.parse(record)

print(airport.arpt_ident)        # EDDH
print(airport.latitude.degree)   # 53
print(airport.datum)             # Datum.WGE
print(airport.frn == 35651)      # True
print(airport.cycle)             # Cycle(year=24, month=7)
```

`Airport` and `Waypoint` are frozen dataclasses whose attributes are the
parsed fields:

- `flightdeck.arinc424.fields`: `RecordType`, `CustArea`, `Cycle`,
  `FileRecordNumber` and the alphanumeric fields `ArptHeliIdent`, `ContNr`,
  `FixIdent`, `Iata`, `IcaoCode`, `NameDesc`, `RegnCode` and `WaypointType`.
  Alphanumeric fields compare equal to a string holding the exact columns
  (`airport.iata == "   "`), and `str()` gives the value without trailing
  blanks. `FileRecordNumber` compares equal to an `int`.
- `flightdeck.arinc424.coordinate`: `Latitude`, `Longitude` and
  `CardinalDirection`.
- `flightdeck.arinc424.codes`: `SecCode` and `SubCode`; the subsection code
  is interpreted according to the section code.
- `flightdeck.arinc424.datum`: `Datum`, the geodetic datum codes of
  ARINC 424-17 attachment 2.
- `flightdeck.arinc424.indicators`: `MagVar` (with its `MagVarKind`),
  `MagTrueInd`, `NameInd` and `WaypointUsage`. A blank magnetic variation
  gives a `MagVar` of kind `MagVarKind.WMM` that carries the point's latitude
  and longitude.

Fields can also be read on their own from a record, for example
`Latitude.parse(record, 32)` or `Datum.parse(record, 86)`; the second
argument is the zero-based column where the field starts.

A record that does not follow the format raises a subclass of
`flightdeck.arinc424.fields.FieldError` (itself a `ValueError`):
`InvalidLengthError`, `InvalidValueError`, `UnexpectedCharError`,
`NotANumberError` or `NumberOutOfRangeError`.

## Point in polygon

```python
from flightdeck.algorithm import Point, winding_number

square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0)]
winding_number(Point(0.5, 0.5), square)  # 1: inside
winding_number(Point(2.0, 0.5), square)  # 0: outside
```

`winding_number` checks each edge from one vertex to the next and does not
close the polygon by itself: repeat the first vertex at the end. An empty
polygon raises `ValueError`. `is_left_of_line(point, start, end)` returns a
positive value when the point lies left of the line from `start` to `end`,
a negative value when it lies right of it, and 0 when it lies on it.

## What the package does not do

Only airport reference point and waypoint records are parsed; there is no
navigation database, no route decoding, no fuel planning or mass and balance
calculation, and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```