"""Basic fixed-column fields of ARINC 424 records and the errors raised while parsing them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

_UNSIGNED = re.compile(r"\+?[0-9]+")


class FieldError(ValueError):
    """A field of a record could not be parsed."""


class InvalidLengthError(FieldError):
    """The record is too short to hold the field."""

    def __init__(self, message: str = "invalid field length") -> None:
        super().__init__(message)


class InvalidValueError(FieldError):
    """The field holds a value that is not defined for it."""


class UnexpectedCharError(FieldError):
    """The field holds an unexpected character."""


class NotANumberError(FieldError):
    """A numeric field is not a number."""

    def __init__(self, message: str = "field is not a number") -> None:
        super().__init__(message)


class NumberOutOfRangeError(FieldError):
    """A numeric field holds a number outside of its allowed range."""

    def __init__(self, message: str = "number out of range") -> None:
        super().__init__(message)


def _field(record: str, start: int, length: int) -> str:
    """Return the columns ``start`` to ``start + length`` of the record."""
    if start < 0:
        raise InvalidLengthError(f"negative field start {start}")
    text = record[start : start + length]
    if len(text) != length:
        raise InvalidLengthError(
            f"expected {length} characters at column {start}, got {len(text)}"
        )
    return text


def _parse_unsigned(text: str, bits: int) -> int:
    """Parse an unsigned integer of the given width the strict way."""
    if not _UNSIGNED.fullmatch(text):
        raise NotANumberError(f"{text!r} is not a number")
    value = int(text)
    if value >= 1 << bits:
        raise NotANumberError(f"{text!r} does not fit into {bits} bits")
    return value


@dataclass(frozen=True, eq=False)
class AlphaNumericField:
    """A fixed-width alphanumeric field, kept exactly as written in the record."""

    raw: str
    length: ClassVar[int] = 0

    @classmethod
    def parse(cls, record: str, start: int) -> AlphaNumericField:
        """Read the field of ``cls.length`` columns beginning at ``start``."""
        return cls(_field(record, start, cls.length))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.raw == other
        if isinstance(other, AlphaNumericField):
            return type(self) is type(other) and self.raw == other.raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), self.raw))

    def __str__(self) -> str:
        return self.raw.rstrip()


class ArptHeliIdent(AlphaNumericField):
    """Airport or heliport identifier."""

    length = 4


class ContNr(AlphaNumericField):
    """Continuation record number."""

    length = 1


class FixIdent(AlphaNumericField):
    """Fix identifier."""

    length = 5


class Iata(AlphaNumericField):
    """IATA designator."""

    length = 3


class IcaoCode(AlphaNumericField):
    """ICAO region code."""

    length = 2


class NameDesc(AlphaNumericField):
    """Name or description."""

    length = 25


class RegnCode(AlphaNumericField):
    """Region code."""

    length = 4


class WaypointType(AlphaNumericField):
    """Waypoint type."""

    length = 3


class CustArea(Enum):
    """Customer or area code in columns 2 to 4."""

    BLANK = "blank"
    CUSTOM = "custom"
    PREFERRED_ROUTE = "PDR"
    AFR = "AFR"
    CAN = "CAN"
    EEU = "EEU"
    EUR = "EUR"
    LAM = "LAM"
    MES = "MES"
    PAC = "PAC"
    SAM = "SAM"
    SPA = "SPA"
    USA = "USA"

    @classmethod
    def parse(cls, record: str) -> CustArea:
        """Read the area code; unknown codes are customer codes."""
        code = _field(record, 1, 3)
        if code == "   ":
            return cls.BLANK
        try:
            area = cls(code)
        except ValueError:
            return cls.CUSTOM
        if area in (cls.BLANK, cls.CUSTOM):
            return cls.CUSTOM
        return area


@dataclass(frozen=True)
class Cycle:
    """The AIRAC cycle the record belongs to."""

    year: int
    month: int

    @classmethod
    def parse(cls, record: str) -> Cycle:
        """Read the cycle from columns 129 to 132."""
        year = _parse_unsigned(_field(record, 128, 2), 8)
        month = _parse_unsigned(_field(record, 130, 2), 8)
        return cls(year=year, month=month)


@dataclass(frozen=True, eq=False)
class FileRecordNumber:
    """The record's number within the file."""

    value: int

    @classmethod
    def parse(cls, record: str) -> FileRecordNumber:
        """Read the file record number from columns 124 to 128."""
        return cls(_parse_unsigned(_field(record, 123, 5), 32))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FileRecordNumber):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value


class RecordType(Enum):
    """Whether the record is standard or tailored."""

    STANDARD = "S"
    TAILORED = "T"

    @classmethod
    def parse(cls, record: str) -> RecordType:
        """Read the record type from the first column."""
        code = _field(record, 0, 1)
        try:
            return cls(code)
        except ValueError:
            raise InvalidValueError("unknown record type") from None