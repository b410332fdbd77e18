"""Tests for the file-backed listing client."""

from __future__ import annotations

import pytest
from conftest import DATA_DIR, make_record
from skuwright.adapters import location_filter
from skuwright.adapters.file import FileSkuClient
from skuwright.cache import new_cache, with_client, with_location
from skuwright.errors import SkuListError


class TestFileSkuClient:
    def test_from_path(self):
        client = FileSkuClient.from_path(DATA_DIR / "eastus.json")
        records = client.list(location_filter("eastus"))
        assert len(records) == 7
        assert client.calls == ["location eq 'eastus'"]

    def test_records_every_filter_in_order(self):
        client = FileSkuClient()
        client.list("location eq 'eastus'")
        client.list()
        assert client.calls == ["location eq 'eastus'", ""]

    def test_records_filter_before_raising(self):
        client = FileSkuClient(error=SkuListError("could not list resource skus"))
        with pytest.raises(SkuListError):
            client.list("x")
        assert client.calls == ["x"]

    def test_returns_copies_of_listing(self):
        client = FileSkuClient([make_record(name="a")])
        client.list().clear()
        assert len(client.list()) == 1

    def test_error(self):
        client = FileSkuClient(error=SkuListError("could not list resource skus"))
        with pytest.raises(SkuListError):
            client.list()

    def test_defaults_to_empty(self):
        assert FileSkuClient().list() == []

    def test_feeds_cache(self):
        cache = new_cache(with_client(FileSkuClient.from_path(DATA_DIR / "eastus.json")), with_location("eastus"))
        assert len(cache.get_virtual_machines()) == 5


class TestLocationFilter:
    def test_template(self):
        assert location_filter("eastus") == "location eq 'eastus'"

    def test_no_escaping(self):
        assert location_filter("a'b") == "location eq 'a'b'"
