"""SKU cache — an in-memory snapshot of resource SKUs for one location.

A cache is populated by a single ``list`` call against its client and then
answers lookups, listings and zone queries from that snapshot. Nothing here
refreshes on its own: the snapshot only changes when ``refresh`` is called.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

from skuwright.adapters import SkuClient, location_filter
from skuwright.adapters.azure import ResourceSkusClient
from skuwright.errors import ClientAlreadySetError
from skuwright.query import FilterFn, filter_skus, name_filter, resource_type_filter
from skuwright.records import RawSkuRecord
from skuwright.sku import VIRTUAL_MACHINES, SKU

logger = logging.getLogger(__name__)

CacheOption = Callable[["Cache"], None]


def with_location(location: str) -> CacheOption:
    """Restrict the listing to one location."""

    def _apply(cache: Cache) -> None:
        cache._location = location
        cache._filter = location_filter(location)

    return _apply


def with_client(client: SkuClient) -> CacheOption:
    """Populate the cache from any object implementing the SkuClient contract."""

    def _apply(cache: Cache) -> None:
        cache._set_client(client)

    return _apply


def with_resource_client(client: Any) -> CacheOption:
    """Populate the cache from an Azure SDK compute client (or its resource_skus group)."""

    def _apply(cache: Cache) -> None:
        cache._set_client(ResourceSkusClient(client))

    return _apply


def _as_skus(data: Iterable[SKU | RawSkuRecord] | None) -> tuple[SKU, ...] | None:
    if data is None:
        return None
    return tuple(item if isinstance(item, SKU) else SKU(item) for item in data)


class Cache:
    """Holds one immutable snapshot of SKUs plus the client that produced it.

    Build instances with :func:`new_cache` or :func:`new_static_cache`. Reads
    never mutate the snapshot and return fresh lists; ``refresh`` swaps in a
    whole new snapshot under a lock, so readers see either the old or the new
    one.
    """

    def __init__(self, data: Iterable[SKU | RawSkuRecord] | None = None):
        self._location = ""
        self._filter = ""
        self._client: SkuClient | None = None
        self._data: tuple[SKU, ...] | None = _as_skus(data)
        self._lock = threading.Lock()

    def _set_client(self, client: SkuClient) -> None:
        if self._client is not None:
            raise ClientAlreadySetError()
        self._client = client

    @property
    def location(self) -> str:
        return self._location

    @property
    def filter(self) -> str:
        return self._filter

    def refresh(self, **request_options: Any) -> None:
        """Replace the snapshot with a fresh listing from the client.

        A cache without a client (a static cache) has nothing to refresh. If
        the client raises, the previous snapshot stays in place.
        """
        if self._client is None:
            logger.debug("Cache has no client; keeping static snapshot")
            return

        with self._lock:
            logger.debug("Listing resource skus with filter %r", self._filter)
            records = self._client.list(self._filter, **request_options)
            self._data = _as_skus(records)

        logger.info("Cached %d resource skus for location %r", len(self._data or ()), self._location or "<all>")

    def get(self, name: str, resource_type: str) -> SKU | None:
        """First SKU in snapshot order with this resource type and name, or None."""
        found = filter_skus(self._data, resource_type_filter(resource_type), name_filter(name))
        if not found:
            return None
        return found[0]

    def list(self) -> list[SKU] | None:
        """Every SKU in the snapshot, as a new list."""
        snapshot = self._data
        return None if snapshot is None else list(snapshot)

    def get_virtual_machines(self) -> list[SKU] | None:
        return filter_skus(self._data, resource_type_filter(VIRTUAL_MACHINES))

    def get_availability_zones(self, *conditions: FilterFn) -> set[str]:
        """Union of unrestricted zones in the cache's location over matching SKUs.

        The result is unordered; sort it if you need a stable order.
        """
        zones: set[str] = set()
        for sku in filter_skus(self._data, *conditions) or ():
            zones.update(sku.availability_zones(self._location) or ())
        return zones

    def get_virtual_machine_availability_zones(self) -> set[str]:
        return self.get_availability_zones(resource_type_filter(VIRTUAL_MACHINES))

    def get_virtual_machine_availability_zones_for_size(self, size: str) -> set[str]:
        return self.get_availability_zones(resource_type_filter(VIRTUAL_MACHINES), name_filter(size))

    def equal(self, other: Cache | None) -> bool:
        """Same location filter and the same SKUs in the same order."""
        if other is None:
            return False
        if self is other:
            return True
        return (
            self._location == other._location
            and self._filter == other._filter
            and (self._data or ()) == (other._data or ())
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cache):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._data or ())

    def __repr__(self) -> str:
        return f"Cache(location={self._location!r}, skus={len(self)})"


def new_cache(*options: CacheOption, **request_options: Any) -> Cache:
    """Build a cache from options and populate it with one refresh.

    Options apply in order. Exactly one client option is required; a second
    one raises ClientAlreadySetError. Keyword arguments are passed through to
    the client's ``list`` call. If the refresh fails the error propagates and
    no cache is returned.
    """
    cache = Cache()
    for option in options:
        option(cache)

    if cache._client is None:
        raise ValueError("No listing client configured; pass with_client() or with_resource_client()")

    cache.refresh(**request_options)
    return cache


def new_static_cache(data: Iterable[SKU | RawSkuRecord] | None, *options: CacheOption) -> Cache:
    """Build a cache around a fixed snapshot, without fetching anything."""
    cache = Cache(data)
    for option in options:
        option(cache)
    return cache


class LazyCacheCreator:
    """Builds a cache on first use and hands back that same instance afterwards.

    Arguments to later calls are ignored once a cache exists. A failed build is
    not remembered, so the next call tries again. The first build runs under a
    lock so concurrent first callers share one construction.
    """

    def __init__(self, factory: Callable[..., Cache] = new_cache):
        self._factory = factory
        self._cache: Cache | None = None
        self._lock = threading.Lock()

    def __call__(self, *options: CacheOption, **request_options: Any) -> Cache:
        cache = self._cache
        if cache is not None:
            return cache
        with self._lock:
            if self._cache is None:
                self._cache = self._factory(*options, **request_options)
            return self._cache
