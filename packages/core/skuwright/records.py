"""Raw resource SKU records, as returned by the provider's listing API.

The models accept both the REST wire spelling (``resourceType``,
``locationInfo``) and the snake_case spelling produced by the Python SDK's
``as_dict()``. Every optional field stays optional here; normalisation of
absent values happens in :class:`skuwright.sku.SKU`.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Capability(_WireModel):
    name: str | None = None
    value: str | None = None


class ZoneDetails(_WireModel):
    name: tuple[str, ...] | None = None
    capabilities: tuple[Capability, ...] | None = None


class LocationInfo(_WireModel):
    location: str | None = None
    zones: tuple[str, ...] | None = None
    zone_details: tuple[ZoneDetails, ...] | None = None


class RestrictionType(str, Enum):
    LOCATION = "Location"
    ZONE = "Zone"


class RestrictionInfo(_WireModel):
    locations: tuple[str, ...] | None = None
    zones: tuple[str, ...] | None = None


class Restriction(_WireModel):
    # The provider adds restriction types over time; unknown ones stay plain strings
    type: RestrictionType | str | None = Field(default=None, union_mode="left_to_right")
    restricted_values: tuple[str, ...] | None = Field(default=None, alias="values")
    restriction_info: RestrictionInfo | None = None
    reason_code: str | None = None

    @property
    def affected_locations(self) -> tuple[str, ...]:
        found = list(self.restricted_values or ())
        if self.restriction_info and self.restriction_info.locations:
            found.extend(loc for loc in self.restriction_info.locations if loc not in found)
        return tuple(found)

    @property
    def affected_zones(self) -> tuple[str, ...]:
        if self.restriction_info is None:
            return ()
        return self.restriction_info.zones or ()


class RawSkuRecord(_WireModel):
    """One entry of the provider's resource SKU listing."""

    name: str | None = None
    resource_type: str | None = None
    tier: str | None = None
    size: str | None = None
    family: str | None = None
    kind: str | None = None
    locations: tuple[str, ...] | None = None
    location_info: tuple[LocationInfo, ...] | None = None
    capabilities: tuple[Capability, ...] | None = None
    restrictions: tuple[Restriction, ...] | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> list[RawSkuRecord]:
        return load_records(path)


def parse_records(data: Any) -> list[RawSkuRecord]:
    """Validate a decoded listing document.

    Accepts either a bare list of records or the provider's ``{"value": [...]}``
    envelope.
    """
    if isinstance(data, dict):
        if "value" not in data:
            raise ValueError(f"Expected a 'value' key in the listing envelope, got keys {list(data)}")
        data = data["value"] or []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of resource SKUs, got {type(data).__name__}")
    return [RawSkuRecord.model_validate(item) for item in data]


def load_records(path: str | Path) -> list[RawSkuRecord]:
    """Read resource SKU records from a JSON or YAML file."""
    p = Path(path)
    text = p.read_text()
    if p.suffix in (".yaml", ".yml"):
        return parse_records(yaml.safe_load(text))
    return parse_records(json.loads(text))
