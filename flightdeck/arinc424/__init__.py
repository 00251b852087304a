"""Parsers for ARINC 424 navigation record fields and records."""

__all__ = ["codes", "coordinate", "datum", "fields", "indicators", "records"]