"""Zone resolution — where in a location a SKU can actually be deployed.

A SKU's ``locationInfo`` lists the zones it is offered in per location, and
its restrictions take availability away again: a Location restriction removes
the whole location, a Zone restriction removes individual zones.
"""

from __future__ import annotations

from enum import Enum

from skuwright.records import LocationInfo, RawSkuRecord, RestrictionType


class ZoneOffering(str, Enum):
    """Tri-state view of a SKU in one location."""

    NOT_OFFERED = "not_offered"  # absent from locationInfo, or wholly restricted
    NO_ZONES = "no_zones"  # offered, but no zone survives
    ZONAL = "zonal"


def find_location_info(record: RawSkuRecord, location: str) -> LocationInfo | None:
    """Return the first locationInfo entry matching ``location`` case-insensitively."""
    wanted = location.lower()
    for info in record.location_info or ():
        if info.location is not None and info.location.lower() == wanted:
            return info
    return None


def is_location_restricted(record: RawSkuRecord, location: str) -> bool:
    """True if a Location restriction names ``location``, offered there or not."""
    wanted = location.lower()
    for restriction in record.restrictions or ():
        if restriction.type != RestrictionType.LOCATION:
            continue
        if any(candidate.lower() == wanted for candidate in restriction.affected_locations):
            return True
    return False


def availability_zones(record: RawSkuRecord, location: str) -> set[str] | None:
    """Zones in ``location`` where the SKU is offered and unrestricted.

    Returns None when the SKU is not offered in the location at all or is
    restricted for the entire location. An empty set means the location is
    offered but every zone is individually restricted (or none were listed).
    """
    info = find_location_info(record, location)
    if info is None:
        return None

    zones = set(info.zones or ())

    # A location-wide restriction wins over any zone-level bookkeeping.
    if is_location_restricted(record, location):
        return None

    for restriction in record.restrictions or ():
        if restriction.type == RestrictionType.ZONE:
            zones.difference_update(restriction.affected_zones)

    return zones


def zone_offering(record: RawSkuRecord, location: str) -> ZoneOffering:
    zones = availability_zones(record, location)
    if zones is None:
        return ZoneOffering.NOT_OFFERED
    if not zones:
        return ZoneOffering.NO_ZONES
    return ZoneOffering.ZONAL
