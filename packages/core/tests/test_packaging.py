"""Packaging acceptance tests — verify the package is usable after install."""

from __future__ import annotations

from pathlib import Path

import pytest
import skuwright


class TestImports:
    """Verify all public API symbols are importable."""

    def test_core_symbols_importable(self):
        from skuwright import SKU, Cache, RawSkuRecord, new_cache, new_static_cache

        assert SKU is not None
        assert Cache is not None
        assert RawSkuRecord is not None
        assert new_cache is not None
        assert new_static_cache is not None

    def test_adapters_importable(self):
        from skuwright import FileSkuClient, ResourceSkusClient, SkuClient

        assert issubclass(FileSkuClient, SkuClient)
        assert issubclass(ResourceSkusClient, SkuClient)

    def test_all_exports_resolve(self):
        for name in skuwright.__all__:
            assert getattr(skuwright, name) is not None

    def test_invalid_import_raises(self):
        with pytest.raises(AttributeError):
            _ = skuwright.NoSuchThing  # type: ignore[attr-defined]


class TestDistribution:
    """The installed package carries its version and its typing marker."""

    def test_version_matches_project_metadata(self):
        pyproject = Path(__file__).resolve().parents[3] / "pyproject.toml"
        assert f'version = "{skuwright.__version__}"' in pyproject.read_text()

    def test_ships_py_typed_marker(self):
        assert (Path(skuwright.__file__).parent / "py.typed").is_file()
