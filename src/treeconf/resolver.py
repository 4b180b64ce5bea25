"""PathResolver: typed, dot-path addressed reads over a hierarchical store.

A path such as ``"Service.Http.Port"`` is split into segments; all but the
last are walked as nested sections from the store root, and the last one is
read either as a leaf value (converted to a scalar type) or as a section
bound onto a fresh object.

Three call styles are offered for both kinds of read:

* ``resolve_*`` raises a ``ConfigurationError`` subclass describing why the
  read failed.
* ``try_*`` returns ``(found, result)`` and never raises configuration
  errors; on failure the result is the caller's default or a fresh instance.
* ``select_value`` / ``populate_object`` return only the result.
"""

from __future__ import annotations

from typing import Any, TypeVar

from treeconf.errors import (
    BindingError,
    ConfigurationError,
    ConversionError,
    InvalidPathError,
    LeafNotFoundError,
    SectionNotFoundError,
    StoreUnsetError,
)
from treeconf.path import split_path, walk_sections
from treeconf.store.base import HierarchicalStore

__all__ = ["PathResolver"]

T = TypeVar("T")


def _infer_type(default: Any, value_type: Any) -> Any:
    if value_type is not None:
        return value_type
    if default is None:
        return str
    return type(default)


class PathResolver:
    """Resolve dot-paths against one store.

    A resolver built with ``store=None`` behaves as if no configuration was
    loaded: every read reports "not found". The store is never modified.
    """

    def __init__(self, store: HierarchicalStore | None = None) -> None:
        self._store = store

    @property
    def store(self) -> HierarchicalStore | None:
        return self._store

    def _segments(self, path: str | None) -> list[str]:
        segments = split_path(path)
        if not segments:
            raise InvalidPathError(path)
        if self._store is None:
            raise StoreUnsetError()
        return segments

    # --- scalar values ---

    def resolve_value(self, path: str, value_type: type[T]) -> T:
        """Read the leaf at path converted to value_type.

        Raises:
            InvalidPathError: If path has no usable segments.
            StoreUnsetError: If the resolver has no store.
            SectionNotFoundError: If the parent section of the leaf does not exist.
            LeafNotFoundError: If the leaf does not exist.
            ConversionError: If the leaf exists but is not a valid value_type.
        """
        segments = self._segments(path)
        parent, key = walk_sections(self._store, segments)
        value = parent.get_value(key, value_type)
        if value is not None:
            return value
        if len(segments) > 1 and not parent.exists():
            raise SectionNotFoundError(path=path, section_path=parent.path)
        if parent.get_section(key).value is not None:
            raise ConversionError(path=path, key=key, target_type=value_type)
        raise LeafNotFoundError(path=path, key=key)

    def try_select_value(self, path: str, default: T, value_type: type[T] | None = None) -> tuple[bool, T]:
        """Read the leaf at path, falling back to default.

        Args:
            path: Dot-separated path, e.g. ``"Section1.SubSection1.Enabled"``.
            default: Returned unchanged when the value cannot be read.
            value_type: Target type; defaults to ``type(default)``, or ``str``
                when default is None.

        Returns:
            (True, value) when found and convertible, else (False, default).
        """
        try:
            return True, self.resolve_value(path, _infer_type(default, value_type))
        except ConfigurationError:
            return False, default

    def select_value(self, path: str, default: T, value_type: type[T] | None = None) -> T:
        """Read the leaf at path, or return default."""
        _, value = self.try_select_value(path, default, value_type)
        return value

    # --- objects ---

    def _bind(self, path: str, instance: Any) -> Any:
        segments = self._segments(path)
        store = self._store
        if len(segments) == 1:
            key = segments[0]
            section = store.get_section(key)
            if not section.exists():
                raise SectionNotFoundError(path=path, section_path=section.path)
            return store.bind(key, instance)

        parent, key = walk_sections(store, segments)
        if not parent.exists():
            raise SectionNotFoundError(path=path, section_path=parent.path)
        section = parent.get_section(key)
        if not section.exists():
            raise SectionNotFoundError(path=path, section_path=section.path)
        return store.bind(section, instance)

    def resolve_object(self, path: str, target_type: type[T]) -> T:
        """Construct target_type() and bind the section at path onto it.

        Raises:
            InvalidPathError: If path has no usable segments.
            StoreUnsetError: If the resolver has no store.
            SectionNotFoundError: If the section or its parent does not exist.
            BindingError: If a field cannot be assigned.
        """
        instance = target_type()
        self._bind(path, instance)
        return instance

    def try_populate_object(self, path: str, target_type: type[T]) -> tuple[bool, T]:
        """Bind the section at path onto a new target_type instance.

        target_type must be constructible without arguments; a TypeError from
        its constructor propagates.

        Returns:
            (True, instance) with matching fields set, or (False, fresh
            default instance) when the section cannot be bound.
        """
        instance = target_type()
        try:
            self._bind(path, instance)
        except BindingError:
            return False, target_type()
        except ConfigurationError:
            return False, instance
        return True, instance

    def populate_object(self, path: str, target_type: type[T]) -> T:
        """Bind the section at path onto a new instance, or return a default one."""
        _, instance = self.try_populate_object(path, target_type)
        return instance

    def __repr__(self) -> str:
        return f"PathResolver(store={self._store!r})"
