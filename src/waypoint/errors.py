"""Waypoint exception hierarchy.

Only configuration problems raise. Matching and serializing report
misses as data (fallback segments, ``None``), never as exceptions.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when the link configuration is invalid.

    Typically raised by ``normalize()`` while building the route table,
    before any URL is parsed.
    """
