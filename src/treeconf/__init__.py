"""treeconf - Typed dot-path access to hierarchical configuration."""

from __future__ import annotations

# Resolution
from treeconf.resolver import PathResolver
from treeconf.path import PATH_DELIMITER, split_path

# Process-wide handle
from treeconf.provider import (
    ConfigurationProvider,
    destroy,
    get_store,
    initialize,
    populate_object,
    select_value,
    try_populate_object,
    try_select_value,
)

# Stores
from treeconf.store import ConfigurationSection, ConfigurationStore, HierarchicalStore, Section

# Conversion and binding
from treeconf.conversion import ValueConverter
from treeconf.binder import ObjectBinder

# Errors
from treeconf.errors import (
    BindingError,
    ConfigurationError,
    ConversionError,
    ErrorCodes,
    InvalidPathError,
    LeafNotFoundError,
    SectionNotFoundError,
    StoreUnsetError,
)

__version__ = "0.1.0"

__all__ = [
    # Resolution
    "PathResolver",
    "PATH_DELIMITER",
    "split_path",
    # Process-wide handle
    "ConfigurationProvider",
    "initialize",
    "destroy",
    "get_store",
    "select_value",
    "try_select_value",
    "populate_object",
    "try_populate_object",
    # Stores
    "HierarchicalStore",
    "Section",
    "ConfigurationStore",
    "ConfigurationSection",
    # Conversion and binding
    "ValueConverter",
    "ObjectBinder",
    # Errors
    "ErrorCodes",
    "ConfigurationError",
    "InvalidPathError",
    "StoreUnsetError",
    "SectionNotFoundError",
    "LeafNotFoundError",
    "ConversionError",
    "BindingError",
]
