"""Listing clients — fetch raw resource SKU records for a cache.

A client owns transport, authentication, retries and pagination. The cache
makes exactly one ``list`` call per refresh and expects the complete result
or an exception, never a partial listing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from skuwright.records import RawSkuRecord


def location_filter(location: str) -> str:
    """Provider query expression selecting one location (passed through verbatim)."""
    return f"location eq '{location}'"


class SkuClient(ABC):
    """Abstract base for resource SKU listing clients."""

    @abstractmethod
    def list(self, filter: str = "", **kwargs: Any) -> list[RawSkuRecord]:
        """Return every resource SKU matching ``filter``.

        Extra keyword arguments are per-call request options (for example a
        timeout) understood by the concrete client.
        """


__all__ = ["SkuClient", "location_filter"]
