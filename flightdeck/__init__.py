"""ARINC 424 record parsing and geometric helpers for flight planning."""

__version__ = "0.1.0"