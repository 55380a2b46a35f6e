"""Time-zone units.

This module provides:
    - ZoneContext: offset, DST flag, abbreviation and identifier
    - ZoneProvider: protocol of the time-zone service
    - FixedZoneProvider: the same context for every instant
    - IanaZoneProvider: contexts from the IANA database
"""

from __future__ import annotations

from solarhijri.units.zone import (
    FixedZoneProvider,
    IanaZoneProvider,
    ZoneContext,
    ZoneProvider,
    resolve_zone_provider,
)

__all__: list[str] = [
    "ZoneContext",
    "ZoneProvider",
    "FixedZoneProvider",
    "IanaZoneProvider",
    "resolve_zone_provider",
]
