"""Hierarchical store abstraction and the bundled in-memory store."""

from treeconf.store.base import HierarchicalStore, Section
from treeconf.store.memory import KEY_DELIMITER, ConfigurationSection, ConfigurationStore

__all__ = [
    "HierarchicalStore",
    "Section",
    "ConfigurationStore",
    "ConfigurationSection",
    "KEY_DELIMITER",
]
