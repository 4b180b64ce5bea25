"""Process-wide configuration handle.

Applications that pass a PathResolver around explicitly do not need this
module. For code that wants one globally reachable configuration, a default
ConfigurationProvider is exposed through module-level functions::

    import treeconf

    treeconf.initialize(store)
    port = treeconf.select_value("Service.Http.Port", 8080)
    treeconf.destroy()
"""

from __future__ import annotations

import logging
import threading
from typing import TypeVar

from treeconf.resolver import PathResolver
from treeconf.store.base import HierarchicalStore

__all__ = [
    "ConfigurationProvider",
    "default_provider",
    "initialize",
    "destroy",
    "get_store",
    "select_value",
    "try_select_value",
    "populate_object",
    "try_populate_object",
]

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ConfigurationProvider:
    """Holder for at most one store reference.

    Thread safety:
        The reference is read and replaced under a lock, so every call sees
        either the old or the new store as a whole. Resolution itself runs
        outside the lock. Ordering between a reinitialization and concurrent
        reads is up to the host.
    """

    def __init__(self, store: HierarchicalStore | None = None) -> None:
        self._store = store
        self._lock = threading.Lock()

    def initialize(self, store: HierarchicalStore) -> None:
        """Hold store, replacing any previous one."""
        with self._lock:
            replaced = self._store is not None
            self._store = store
        logger.debug("Configuration store initialized: %r (replaced=%s)", store, replaced)

    def destroy(self) -> None:
        """Drop the held store. The store itself is left untouched."""
        with self._lock:
            self._store = None
        logger.debug("Configuration store released")

    @property
    def store(self) -> HierarchicalStore | None:
        with self._lock:
            return self._store

    @property
    def is_initialized(self) -> bool:
        return self.store is not None

    def resolver(self) -> PathResolver:
        """Return a resolver bound to the store held right now."""
        return PathResolver(self.store)

    def select_value(self, path: str, default: T, value_type: type[T] | None = None) -> T:
        return self.resolver().select_value(path, default, value_type)

    def try_select_value(self, path: str, default: T, value_type: type[T] | None = None) -> tuple[bool, T]:
        return self.resolver().try_select_value(path, default, value_type)

    def resolve_value(self, path: str, value_type: type[T]) -> T:
        return self.resolver().resolve_value(path, value_type)

    def populate_object(self, path: str, target_type: type[T]) -> T:
        return self.resolver().populate_object(path, target_type)

    def try_populate_object(self, path: str, target_type: type[T]) -> tuple[bool, T]:
        return self.resolver().try_populate_object(path, target_type)

    def resolve_object(self, path: str, target_type: type[T]) -> T:
        return self.resolver().resolve_object(path, target_type)


default_provider = ConfigurationProvider()


def initialize(store: HierarchicalStore) -> None:
    """Set the process-wide store (last writer wins)."""
    default_provider.initialize(store)


def destroy() -> None:
    """Clear the process-wide store."""
    default_provider.destroy()


def get_store() -> HierarchicalStore | None:
    return default_provider.store


def select_value(path: str, default: T, value_type: type[T] | None = None) -> T:
    """Read a value from the process-wide store, or return default.

    Example:
        select_value("Section1.SubSection1.Enabled", False)
    """
    return default_provider.select_value(path, default, value_type)


def try_select_value(path: str, default: T, value_type: type[T] | None = None) -> tuple[bool, T]:
    return default_provider.try_select_value(path, default, value_type)


def populate_object(path: str, target_type: type[T]) -> T:
    """Bind a section of the process-wide store onto a new target_type instance."""
    return default_provider.populate_object(path, target_type)


def try_populate_object(path: str, target_type: type[T]) -> tuple[bool, T]:
    return default_provider.try_populate_object(path, target_type)
