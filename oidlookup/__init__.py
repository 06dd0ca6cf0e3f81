"""Resolve SNMP OIDs to MIB definitions through an external translator."""

__version__ = "0.3.0"
