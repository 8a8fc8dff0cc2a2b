"""Warehouse management core: versioned updates, validation and legacy sync."""

__version__ = "0.1.0"
