"""Order-preserving filter/map combinators over sequences of SKUs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from skuwright.sku import SKU

FilterFn = Callable[[SKU], bool]
MapFn = Callable[[SKU], SKU]


def all_of(sku: SKU, conditions: Iterable[FilterFn]) -> bool:
    """True if ``sku`` satisfies every condition; stops at the first failure."""
    for condition in conditions:
        if not condition(sku):
            return False
    return True


def filter_skus(skus: Sequence[SKU] | None, *conditions: FilterFn) -> list[SKU] | None:
    """New list of the SKUs satisfying all conditions, in their original order.

    None in gives None out, so callers can still tell "never fetched" apart
    from "fetched, nothing matched".
    """
    if skus is None:
        return None
    return [sku for sku in skus if all_of(sku, conditions)]


def map_skus(skus: Sequence[SKU] | None, fn: MapFn) -> list[SKU] | None:
    if skus is None:
        return None
    return [fn(sku) for sku in skus]


def resource_type_filter(resource_type: str) -> FilterFn:
    def _matches(sku: SKU) -> bool:
        return sku.is_resource_type(resource_type)

    return _matches


def name_filter(name: str) -> FilterFn:
    wanted = name.lower()

    def _matches(sku: SKU) -> bool:
        return sku.name.lower() == wanted

    return _matches
