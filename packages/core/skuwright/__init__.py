"""Skuwright — capability and availability queries over cloud compute SKUs."""

from skuwright.adapters import SkuClient
from skuwright.adapters.azure import ResourceSkusClient
from skuwright.adapters.file import FileSkuClient
from skuwright.cache import (
    Cache,
    LazyCacheCreator,
    new_cache,
    new_static_cache,
    with_client,
    with_location,
    with_resource_client,
)
from skuwright.errors import (
    CapabilityNotFoundError,
    CapabilityValueParseError,
    ClientAlreadySetError,
    SkuListError,
    SkuwrightError,
)
from skuwright.query import all_of, filter_skus, map_skus, name_filter, resource_type_filter
from skuwright.records import (
    Capability,
    LocationInfo,
    RawSkuRecord,
    Restriction,
    RestrictionInfo,
    RestrictionType,
    ZoneDetails,
)
from skuwright.sku import (
    ACCELERATED_NETWORKING,
    CAPABILITY_SUPPORTED,
    CAPABILITY_UNSUPPORTED,
    DISKS,
    ENCRYPTION_AT_HOST,
    EPHEMERAL_OS_DISK,
    HYPERV_GENERATIONS,
    MEMORY_GB,
    SKU,
    ULTRA_SSD_AVAILABLE,
    VCPUS,
    VIRTUAL_MACHINES,
)
from skuwright.zones import ZoneOffering

__version__ = "0.1.0"

__all__ = [
    "ACCELERATED_NETWORKING",
    "CAPABILITY_SUPPORTED",
    "CAPABILITY_UNSUPPORTED",
    "DISKS",
    "ENCRYPTION_AT_HOST",
    "EPHEMERAL_OS_DISK",
    "HYPERV_GENERATIONS",
    "MEMORY_GB",
    "SKU",
    "ULTRA_SSD_AVAILABLE",
    "VCPUS",
    "VIRTUAL_MACHINES",
    "Cache",
    "Capability",
    "CapabilityNotFoundError",
    "CapabilityValueParseError",
    "ClientAlreadySetError",
    "FileSkuClient",
    "LazyCacheCreator",
    "LocationInfo",
    "RawSkuRecord",
    "ResourceSkusClient",
    "Restriction",
    "RestrictionInfo",
    "RestrictionType",
    "SkuClient",
    "SkuListError",
    "SkuwrightError",
    "ZoneDetails",
    "ZoneOffering",
    "all_of",
    "filter_skus",
    "map_skus",
    "name_filter",
    "new_cache",
    "new_static_cache",
    "resource_type_filter",
    "with_client",
    "with_location",
    "with_resource_client",
]
