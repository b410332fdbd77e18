"""Offline listing client backed by a JSON/YAML listing document or a list of records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from skuwright.adapters import SkuClient
from skuwright.records import RawSkuRecord, load_records

logger = logging.getLogger(__name__)


class FileSkuClient(SkuClient):
    """Serves a fixed set of records, ignoring the filter expression.

    ``error`` makes every ``list`` call raise it instead, which is handy for
    exercising failure paths. ``calls`` records the filter of every ``list``
    call in order so fixtures can assert what a cache asked for; it is
    unbounded, so long-lived clients should be rebuilt rather than reused.
    """

    def __init__(self, records: list[RawSkuRecord] | None = None, error: Exception | None = None):
        self._records = list(records) if records is not None else []
        self._error = error
        self.calls: list[str] = []

    @classmethod
    def from_path(cls, path: str | Path) -> FileSkuClient:
        records = load_records(path)
        logger.debug("Loaded %d resource skus from %s", len(records), path)
        return cls(records)

    def list(self, filter: str = "", **kwargs: Any) -> list[RawSkuRecord]:
        self.calls.append(filter)
        if self._error is not None:
            raise self._error
        return list(self._records)
