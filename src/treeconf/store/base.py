"""Capability set a hierarchical configuration store must provide."""

from __future__ import annotations

from typing import Any, Iterable, Protocol, TypeVar, runtime_checkable

__all__ = ["Section", "HierarchicalStore"]

T = TypeVar("T")


@runtime_checkable
class Section(Protocol):
    """Handle to a named node of a hierarchical store.

    A handle may represent a node that does not exist; ``exists()`` tells.
    Handles are read-only views and never change the store.
    """

    @property
    def key(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def value(self) -> str | None: ...

    def exists(self) -> bool: ...

    def get_section(self, key: str) -> Section:
        """Return the child handle for key. Always succeeds."""
        ...

    def get_children(self) -> Iterable[Section]: ...

    def get_value(self, key: str, value_type: type[T]) -> T | None:
        """Return the child leaf converted to value_type, or None when absent or unconvertible."""
        ...


@runtime_checkable
class HierarchicalStore(Protocol):
    """Read-only tree of sections reachable from a root."""

    def get_section(self, key: str) -> Section: ...

    def get_children(self) -> Iterable[Section]: ...

    def get_value(self, key: str, value_type: type[T]) -> T | None: ...

    def bind(self, key_or_section: str | Section, instance: Any) -> Any:
        """Populate instance fields from the leaves of a section."""
        ...
