"""Azure Compute resource SKU adapter.

Wraps the ``resource_skus`` operations group of the Azure SDK's
``ComputeManagementClient``. The SDK returns a lazily paged iterator; this
adapter walks every page up front so the cache always receives a complete
listing.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from skuwright.adapters import SkuClient
from skuwright.errors import SkuListError
from skuwright.records import RawSkuRecord

logger = logging.getLogger(__name__)


def _to_record(item: Any) -> RawSkuRecord:
    if isinstance(item, RawSkuRecord):
        return item
    # SDK models serialise to snake_case dicts, which RawSkuRecord accepts
    data = item.as_dict() if hasattr(item, "as_dict") else item
    return RawSkuRecord.model_validate(data)


class ResourceSkusClient(SkuClient):
    """Lists resource SKUs through an Azure SDK compute client.

    Accepts either a ``ComputeManagementClient`` or its ``resource_skus``
    operations group.
    """

    def __init__(self, client: Any):
        self._operations = getattr(client, "resource_skus", client)

    @classmethod
    def from_environment(
        cls,
        subscription_id: str | None = None,
        credential: Any = None,
    ) -> ResourceSkusClient:
        """Build a client from DefaultAzureCredential and AZURE_SUBSCRIPTION_ID."""
        subscription_id = subscription_id or os.environ.get("AZURE_SUBSCRIPTION_ID", "")
        if not subscription_id:
            raise ValueError("No subscription id given and AZURE_SUBSCRIPTION_ID is not set")

        from azure.mgmt.compute import ComputeManagementClient

        if credential is None:
            from azure.identity import DefaultAzureCredential

            credential = DefaultAzureCredential()

        return cls(ComputeManagementClient(credential, subscription_id))

    def list(self, filter: str = "", **kwargs: Any) -> list[RawSkuRecord]:
        """Greedily traverse all returned resource SKU pages."""
        try:
            paged = self._operations.list(filter=filter or None, **kwargs)
        except Exception as exc:
            raise SkuListError("could not list resource skus") from exc

        records: list[RawSkuRecord] = []
        page_count = 0
        try:
            pages = paged.by_page() if hasattr(paged, "by_page") else [paged]
            for page in pages:
                page_count += 1
                records.extend(_to_record(item) for item in page)
        except Exception as exc:
            raise SkuListError("could not iterate resource skus") from exc

        logger.debug("Read %d resource skus across %d page(s)", len(records), page_count)
        return records
