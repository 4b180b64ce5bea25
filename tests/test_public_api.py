"""Tests for the treeconf public API surface.

Verifies that every name in ``__all__`` is importable from the top-level
``treeconf`` package.
"""

import treeconf


class TestPublicAPIImports:
    def test_resolver_importable(self):
        from treeconf import PathResolver

        assert PathResolver is not None

    def test_store_importable(self):
        from treeconf import ConfigurationStore, HierarchicalStore

        assert ConfigurationStore is not None
        assert HierarchicalStore is not None

    def test_static_functions_importable(self):
        from treeconf import destroy, initialize, populate_object, select_value, try_populate_object, try_select_value

        assert all(callable(f) for f in (destroy, initialize, populate_object, select_value, try_populate_object, try_select_value))

    def test_errors_importable(self):
        from treeconf import ConfigurationError, ErrorCodes

        assert issubclass(ConfigurationError, Exception)
        assert ErrorCodes.INVALID_PATH == "INVALID_PATH"


class TestAllList:
    def test_all_names_resolve(self):
        for name in treeconf.__all__:
            assert hasattr(treeconf, name), name

    def test_no_duplicates(self):
        assert len(treeconf.__all__) == len(set(treeconf.__all__))

    def test_version(self):
        assert treeconf.__version__ == "0.1.0"
