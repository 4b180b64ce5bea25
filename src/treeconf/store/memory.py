"""In-memory hierarchical store built from nested mappings.

Leaves are kept as text, the way layered configuration sources deliver
them, and converted on demand when read. Sequences become child sections
keyed by their index (``"0"``, ``"1"``, ...). The tree is never modified
after construction.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Iterator, TypeVar

from treeconf.binder import ObjectBinder
from treeconf.conversion import ValueConverter
from treeconf.errors import ConversionError

__all__ = ["ConfigurationStore", "ConfigurationSection", "KEY_DELIMITER"]

T = TypeVar("T")

KEY_DELIMITER = ":"


def _to_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class _Node:
    __slots__ = ("key", "value", "children")

    def __init__(self, key: str) -> None:
        self.key = key
        self.value: str | None = None
        self.children: dict[str, _Node] = {}


class ConfigurationSection:
    """Read-only handle to a node of a ConfigurationStore.

    Handles are created for any key, existing or not.
    """

    def __init__(self, store: ConfigurationStore, keys: tuple[str, ...]) -> None:
        self._store = store
        self._keys = keys

    @property
    def key(self) -> str:
        return self._keys[-1]

    @property
    def path(self) -> str:
        """Full store path, keys joined with ':'."""
        return KEY_DELIMITER.join(self._keys)

    @property
    def value(self) -> str | None:
        node = self._store._find(self._keys)
        return node.value if node is not None else None

    def exists(self) -> bool:
        return self._store._find(self._keys) is not None

    def get_section(self, key: str) -> ConfigurationSection:
        return ConfigurationSection(self._store, (*self._keys, key))

    def get_children(self) -> Iterator[ConfigurationSection]:
        return self._store._children(self._keys)

    def get_value(self, key: str, value_type: type[T]) -> T | None:
        return self._store._read((*self._keys, key), value_type)

    def __repr__(self) -> str:
        return f"ConfigurationSection(path={self.path!r}, exists={self.exists()})"


class ConfigurationStore:
    """Merged configuration tree held in memory.

    Layers are merged in order; a later layer overrides leaves of earlier
    ones key by key and adds new keys. A mapping in a later layer replaces
    an earlier leaf, and a scalar replaces an earlier subtree. Key lookups ignore case unless
    ``case_sensitive`` is set.

    Example::

        store = ConfigurationStore(
            {"Service": {"Http": {"Port": 8080}}},
            {"Service": {"Http": {"Port": 9090}}},
        )
        store.get_section("service").get_section("http").get_value("PORT", int)  # 9090
    """

    def __init__(
        self,
        *layers: Mapping[str, Any],
        case_sensitive: bool = False,
        converter: ValueConverter | None = None,
    ) -> None:
        self._case_sensitive = case_sensitive
        self._converter = converter if converter is not None else ValueConverter()
        self._binder = ObjectBinder(self._converter)
        self._root = _Node("")
        for layer in layers:
            self._merge(self._root, layer)

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def _norm(self, key: str) -> str:
        return key if self._case_sensitive else key.casefold()

    def _merge(self, node: _Node, data: Mapping[Any, Any]) -> None:
        for raw_key, raw_value in data.items():
            key = str(raw_key)
            norm = self._norm(key)
            child = node.children.get(norm)
            if child is None:
                child = _Node(key)
                node.children[norm] = child
            # A node is either a leaf or a parent; the later layer decides which.
            if isinstance(raw_value, Mapping):
                child.value = None
                self._merge(child, raw_value)
            elif isinstance(raw_value, Sequence) and not isinstance(raw_value, (str, bytes, bytearray)):
                child.value = None
                self._merge(child, {str(i): item for i, item in enumerate(raw_value)})
            else:
                child.children.clear()
                child.value = _to_text(raw_value)

    def _find(self, keys: tuple[str, ...]) -> _Node | None:
        node = self._root
        for key in keys:
            node = node.children.get(self._norm(key))
            if node is None:
                return None
        return node

    def _children(self, keys: tuple[str, ...]) -> Iterator[ConfigurationSection]:
        node = self._find(keys)
        if node is None:
            return iter(())
        return iter([ConfigurationSection(self, (*keys, child.key)) for child in node.children.values()])

    def _read(self, keys: tuple[str, ...], value_type: Any) -> Any:
        node = self._find(keys)
        if node is None or node.value is None:
            return None
        try:
            return self._converter.convert(node.value, value_type, key=keys[-1], path=KEY_DELIMITER.join(keys))
        except ConversionError:
            return None

    def get_section(self, key: str) -> ConfigurationSection:
        return ConfigurationSection(self, (key,))

    def get_children(self) -> Iterator[ConfigurationSection]:
        return self._children(())

    def get_value(self, key: str, value_type: type[T]) -> T | None:
        return self._read((key,), value_type)

    def bind(self, key_or_section: str | ConfigurationSection, instance: Any) -> Any:
        """Populate instance from a root-level key or a section handle."""
        section = self.get_section(key_or_section) if isinstance(key_or_section, str) else key_or_section
        return self._binder.bind(section, instance)

    def as_dict(self) -> dict[str, Any]:
        """Return the normalized tree as nested dicts of text leaves."""

        def _dump(node: _Node) -> Any:
            if node.children:
                return {child.key: _dump(child) for child in node.children.values()}
            return node.value

        return {child.key: _dump(child) for child in self._root.children.values()}

    def __repr__(self) -> str:
        return f"ConfigurationStore(sections={len(self._root.children)}, case_sensitive={self._case_sensitive})"
