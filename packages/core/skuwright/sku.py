"""SKU — a resource SKU record with typed capability and availability queries.

Capability values arrive as untyped strings. Each accessor applies its own
interpretation: a boolean marker compare, an integer or float parse, or a
substring check for comma-joined lists such as ``HyperVGenerations="V1,V2"``.
When several capabilities share a name, the first one in list order is used.
"""

from __future__ import annotations

import re
from typing import Any

from skuwright import zones as _zones
from skuwright.errors import CapabilityNotFoundError, CapabilityValueParseError
from skuwright.records import Capability, RawSkuRecord
from skuwright.zones import ZoneOffering

# Resource types
VIRTUAL_MACHINES = "virtualMachines"
DISKS = "disks"

# Boolean capability markers
CAPABILITY_SUPPORTED = "True"
CAPABILITY_UNSUPPORTED = "False"

# Well-known capability names
EPHEMERAL_OS_DISK = "EphemeralOSDiskSupported"
ACCELERATED_NETWORKING = "AcceleratedNetworkingEnabled"
VCPUS = "vCPUs"
MEMORY_GB = "MemoryGB"
HYPERV_GENERATIONS = "HyperVGenerations"
ENCRYPTION_AT_HOST = "EncryptionAtHostSupported"
ULTRA_SSD_AVAILABLE = "UltraSSDAvailable"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int(raw: str) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid literal for int() with base 10: {raw!r}")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range: {raw!r}")
    return value


def _parse_float(raw: str) -> float:
    # float() alone would accept surrounding whitespace and digit separators
    if raw != raw.strip() or "_" in raw:
        raise ValueError(f"could not convert string to float: {raw!r}")
    return float(raw)


def _is_true_marker(value: str | None) -> bool:
    return value is not None and value.lower() == CAPABILITY_SUPPORTED.lower()


class SKU:
    """Read-only wrapper around one :class:`RawSkuRecord`."""

    __slots__ = ("_record",)

    def __init__(self, record: RawSkuRecord | dict[str, Any]):
        if not isinstance(record, RawSkuRecord):
            record = RawSkuRecord.model_validate(record)
        self._record = record

    @property
    def record(self) -> RawSkuRecord:
        return self._record

    # Field accessors; absent values normalise to ""

    @property
    def name(self) -> str:
        return self._record.name or ""

    @property
    def resource_type(self) -> str:
        return self._record.resource_type or ""

    @property
    def location(self) -> str:
        """First listed location, falling back to the first locationInfo entry."""
        for location in self._record.locations or ():
            return location
        for info in self._record.location_info or ():
            if info.location is not None:
                return info.location
        return ""

    def is_resource_type(self, resource_type: str) -> bool:
        return self._record.resource_type is not None and self._record.resource_type == resource_type

    # Capability model

    def _find_capability(self, name: str) -> Capability | None:
        for capability in self._record.capabilities or ():
            if capability.name is not None and capability.name == name:
                return capability
        return None

    def has_capability(self, name: str) -> bool:
        """True for a boolean capability whose value is the "True" marker.

        Examples include "EphemeralOSDiskSupported", "UltraSSDAvailable",
        "EncryptionAtHostSupported", "AcceleratedNetworkingEnabled" and
        "RdmaEnabled".
        """
        capability = self._find_capability(name)
        return capability is not None and _is_true_marker(capability.value)

    def has_capability_with_separator(self, name: str, value: str) -> bool:
        """True when the capability's raw value contains ``value``.

        This is plain substring containment, so "1" also matches "10".
        """
        capability = self._find_capability(name)
        return capability is not None and capability.value is not None and value in capability.value

    def has_capability_with_capacity(self, name: str, value: int) -> bool:
        """True when a numeric capability is at least ``value``.

        Examples include "MaxResourceVolumeMB", "OSVhdSizeMB", "vCPUs",
        "MaxDataDiskCount" and "UncachedDiskIOPS". An absent capability is
        simply False; a present but non-numeric one raises
        CapabilityValueParseError.
        """
        capability = self._find_capability(name)
        if capability is None or capability.value is None:
            return False
        try:
            quantity = _parse_int(capability.value)
        except ValueError as exc:
            raise CapabilityValueParseError(name, capability.value, exc) from exc
        return quantity >= value

    def get_capability_integer_quantity(self, name: str) -> int:
        capability = self._find_capability(name)
        if capability is None:
            raise CapabilityNotFoundError(name)
        raw = capability.value if capability.value is not None else ""
        try:
            return _parse_int(raw)
        except ValueError as exc:
            raise CapabilityValueParseError(name, raw, exc) from exc

    def get_capability_float_quantity(self, name: str) -> float:
        capability = self._find_capability(name)
        if capability is None:
            raise CapabilityNotFoundError(name)
        raw = capability.value if capability.value is not None else ""
        try:
            return _parse_float(raw)
        except ValueError as exc:
            raise CapabilityValueParseError(name, raw, exc, kind="float64") from exc

    def vcpu(self) -> int:
        return self.get_capability_integer_quantity(VCPUS)

    def memory(self) -> float:
        """Memory in GiB; fractional for sizes like 0.75 GB."""
        return self.get_capability_float_quantity(MEMORY_GB)

    def has_zonal_capability(self, name: str) -> bool:
        """True if any zone detail in any location advertises ``name`` as supported."""
        wanted = name.lower()
        for info in self._record.location_info or ():
            for details in info.zone_details or ():
                for capability in details.capabilities or ():
                    if capability.name is not None and capability.name.lower() == wanted:
                        if _is_true_marker(capability.value):
                            return True
        return False

    # Availability

    def availability_zones(self, location: str) -> set[str] | None:
        """Unrestricted zones in ``location``; None when not deployable there at all."""
        return _zones.availability_zones(self._record, location)

    def zone_offering(self, location: str) -> ZoneOffering:
        return _zones.zone_offering(self._record, location)

    def is_restricted(self, location: str) -> bool:
        return _zones.is_location_restricted(self._record, location)

    def is_available(self, location: str) -> bool:
        wanted = location.lower()
        if not any(candidate.lower() == wanted for candidate in self._record.locations or ()):
            return False
        return self.availability_zones(location) is not None

    # Comparison

    def same_identity(self, other: SKU) -> bool:
        """Loose equality: same resource type, name and location, ignoring case."""
        return (
            self.resource_type.lower() == other.resource_type.lower()
            and self.name.lower() == other.name.lower()
            and self.location.lower() == other.location.lower()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SKU):
            return NotImplemented
        return self._record == other._record

    def __hash__(self) -> int:
        return hash(self._record)

    def __repr__(self) -> str:
        return f"SKU(name={self.name!r}, resource_type={self.resource_type!r}, location={self.location!r})"


def wrap_records(records: list[RawSkuRecord] | None) -> list[SKU] | None:
    """Wrap raw records one-to-one, preserving order."""
    if records is None:
        return None
    return [SKU(record) for record in records]
