"""Tests for the filter/map combinators and predicate builders."""

from __future__ import annotations

import itertools

from conftest import make_record
from skuwright.query import all_of, filter_skus, map_skus, name_filter, resource_type_filter
from skuwright.records import RawSkuRecord
from skuwright.sku import SKU


def _skus() -> list[SKU]:
    return [
        SKU(make_record(name="Standard_D2_v2", resource_type="virtualMachines")),
        SKU(make_record(name="Premium_LRS", resource_type="disks")),
        SKU(make_record(name="Standard_D4s_v3", resource_type="virtualMachines")),
        SKU(make_record(name="standard_d2_v2", resource_type="disks")),
        SKU(RawSkuRecord()),
    ]


_PREDICATES = [
    resource_type_filter("virtualMachines"),
    resource_type_filter("disks"),
    name_filter("standard_d2_v2"),
    lambda s: s.name.startswith("Standard"),
    lambda s: True,
    lambda s: False,
]


class TestFilter:
    def test_none_in_none_out(self):
        assert filter_skus(None, resource_type_filter("disks")) is None

    def test_empty_in_empty_out(self):
        assert filter_skus([], resource_type_filter("disks")) == []

    def test_no_predicates_keeps_everything(self):
        skus = _skus()
        assert filter_skus(skus) == skus

    def test_preserves_order(self):
        result = filter_skus(_skus(), resource_type_filter("virtualMachines"))
        assert [s.name for s in result] == ["Standard_D2_v2", "Standard_D4s_v3"]

    def test_does_not_mutate_input(self):
        skus = _skus()
        before = list(skus)
        result = filter_skus(skus, resource_type_filter("disks"))
        result.clear()
        assert skus == before

    def test_returns_new_list(self):
        skus = _skus()
        assert filter_skus(skus) is not skus

    def test_composition_equals_conjunction(self):
        skus = _skus()
        for p, q in itertools.product(_PREDICATES, repeat=2):
            assert filter_skus(filter_skus(skus, p), q) == filter_skus(skus, p, q)


class TestMap:
    def test_shape_preserved(self):
        skus = _skus()
        renamed = map_skus(skus, lambda s: SKU(s.record.model_copy(update={"name": s.name.upper()})))
        assert len(renamed) == len(skus)
        assert [s.name for s in renamed] == [s.name.upper() for s in skus]

    def test_no_aliasing(self):
        skus = _skus()
        mapped = map_skus(skus, lambda s: s)
        assert mapped is not skus
        mapped.pop()
        assert len(skus) == 5

    def test_none(self):
        assert map_skus(None, lambda s: s) is None


class TestAll:
    def test_empty_conditions(self):
        assert all_of(_skus()[0], [])

    def test_short_circuits(self):
        calls = []

        def record_call(s):
            calls.append(s.name)
            return True

        assert not all_of(_skus()[0], [lambda s: False, record_call])
        assert calls == []


class TestPredicateBuilders:
    def test_name_filter_case_insensitive(self):
        names = [s.name for s in filter_skus(_skus(), name_filter("STANDARD_D2_V2"))]
        assert names == ["Standard_D2_v2", "standard_d2_v2"]

    def test_name_filter_exact_not_prefix(self):
        assert filter_skus(_skus(), name_filter("Standard_D2")) == []

    def test_resource_type_filter_exact(self):
        assert filter_skus(_skus(), resource_type_filter("VirtualMachines")) == []

    def test_resource_type_filter_skips_missing_type(self):
        assert len(filter_skus(_skus(), resource_type_filter(""))) == 0
