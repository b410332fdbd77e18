"""Shared fixtures for core tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from skuwright.adapters.file import FileSkuClient
from skuwright.cache import Cache, new_cache, with_client, with_location
from skuwright.records import Capability, LocationInfo, RawSkuRecord, load_records

DATA_DIR = Path(__file__).parent / "data"


def make_record(
    name: str = "foo",
    resource_type: str = "virtualMachines",
    location: str = "eastus",
    zones: list[str] | None = None,
    capabilities: dict[str, str] | None = None,
    restrictions: list[dict] | None = None,
) -> RawSkuRecord:
    """A single-location record; capabilities keep dict insertion order."""
    return RawSkuRecord(
        name=name,
        resource_type=resource_type,
        locations=[location],
        location_info=[LocationInfo(location=location, zones=zones if zones is not None else ["1", "2", "3"])],
        capabilities=[Capability(name=k, value=v) for k, v in (capabilities or {}).items()],
        restrictions=restrictions or [],
    )


@pytest.fixture
def eastus_records() -> list[RawSkuRecord]:
    """Real-shaped resource SKU listing for eastus."""
    return load_records(DATA_DIR / "eastus.json")


@pytest.fixture
def eastus_cache(eastus_records) -> Cache:
    return new_cache(with_client(FileSkuClient(eastus_records)), with_location("eastus"))


@pytest.fixture
def d4s_v3_record() -> RawSkuRecord:
    return make_record(
        name="standard_d4s_v3",
        capabilities={"EphemeralOSDiskSupported": "True", "MaxResourceVolumeMB": "32768"},
    )
