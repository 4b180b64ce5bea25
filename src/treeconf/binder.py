"""Binding of section leaves onto the fields of a target object."""

from __future__ import annotations

import copy
import dataclasses
import inspect
import logging
import types
import typing
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Union

from pydantic import BaseModel

from treeconf.conversion import ValueConverter
from treeconf.errors import BindingError, ConversionError

if TYPE_CHECKING:
    from treeconf.store.base import Section

__all__ = ["ObjectBinder", "bind_section"]

logger = logging.getLogger(__name__)

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


def _unwrap_optional(tp: Any) -> Any:
    """Return X for Optional[X] / X | None, otherwise tp unchanged."""
    if typing.get_origin(tp) in (Union, types.UnionType):
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _class_hints(cls: type) -> dict[str, Any]:
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError) as e:
        logger.debug("Cannot resolve annotations of %s, binding as text: %s", cls.__qualname__, e)
        hints = {}
        for klass in reversed(cls.__mro__):
            hints.update({name: Any for name in inspect.get_annotations(klass)})
    return {
        name: hint
        for name, hint in hints.items()
        if not name.startswith("_") and typing.get_origin(hint) is not typing.ClassVar and hint is not typing.ClassVar
    }


def _is_structured(tp: Any) -> bool:
    """Whether tp is bound field-by-field rather than converted from one leaf."""
    if typing.get_origin(tp) is not None or not isinstance(tp, type):
        return False
    if dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel):
        return True
    if tp.__module__ == "builtins" or issubclass(tp, Enum):
        return False
    return any(inspect.get_annotations(klass) for klass in tp.__mro__ if klass is not object)


def _iter_fields(cls: type) -> Iterator[tuple[str, str, Any]]:
    """Yield (attribute name, configuration key, declared type) for cls."""
    if issubclass(cls, BaseModel):
        for name, info in cls.model_fields.items():
            yield name, info.alias or name, info.annotation
        return
    hints = _class_hints(cls)
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            yield f.name, f.name, hints.get(f.name, Any)
        return
    for name, hint in hints.items():
        yield name, name, hint


def _ordered_children(section: Section) -> list[Section]:
    children = list(section.get_children())
    if all(child.key.isdigit() for child in children):
        children.sort(key=lambda child: int(child.key))
    return children


class ObjectBinder:
    """Populate an object's fields from the children of a section.

    Each field is matched against the same-named child section; the store
    decides whether that lookup is case-sensitive. Fields without a
    matching child keep their current value, children without a matching
    field are ignored.
    """

    def __init__(self, converter: ValueConverter | None = None) -> None:
        self._converter = converter if converter is not None else ValueConverter()

    def bind(self, section: Section, instance: Any) -> Any:
        """Bind section onto instance in place and return it.

        Nested objects are bound onto copies of the current field values, so
        class-level or shared defaults are never modified.

        Raises:
            BindingError: If a field cannot be assigned or a nested object
                cannot be constructed.
        """
        target_name = type(instance).__qualname__
        for name, key, field_type in _iter_fields(type(instance)):
            child = section.get_section(key)
            if not child.exists():
                continue
            found, value = self._bind_value(child, field_type, getattr(instance, name, None), target_name)
            if not found:
                continue
            try:
                setattr(instance, name, value)
            except (AttributeError, TypeError, ValueError) as e:
                raise BindingError(target=target_name, field=name, reason=str(e), cause=e) from e
        return instance

    def _bind_value(self, section: Section, field_type: Any, current: Any, target_name: str) -> tuple[bool, Any]:
        tp = _unwrap_optional(field_type)

        if _is_structured(tp):
            if not any(True for _ in section.get_children()):
                return False, None
            # Defaults may be shared with the class or other instances; bind onto a copy.
            try:
                target = tp() if current is None else copy.deepcopy(current)
            except (TypeError, ValueError) as e:
                raise BindingError(target=target_name, field=section.key, reason=str(e), cause=e) from e
            return True, self.bind(section, target)

        origin = typing.get_origin(tp)
        children = _ordered_children(section)
        if origin in _SEQUENCE_ORIGINS and children:
            args = typing.get_args(tp)
            item_type = args[0] if args else Any
            items = []
            for child in children:
                found, item = self._bind_value(child, item_type, None, target_name)
                if found:
                    items.append(item)
            return True, origin(items)
        if origin is dict and children:
            args = typing.get_args(tp)
            item_type = args[1] if len(args) == 2 else Any
            mapping = {}
            for child in children:
                found, item = self._bind_value(child, item_type, None, target_name)
                if found:
                    mapping[child.key] = item
            return True, mapping

        if section.value is None:
            return False, None
        try:
            return True, self._converter.convert(section.value, field_type, key=section.key, path=section.path)
        except ConversionError:
            logger.debug("Leaving %s.%s unchanged, %s is not convertible", target_name, section.key, section.path)
            return False, None


_default_binder = ObjectBinder()


def bind_section(section: Section, instance: Any) -> Any:
    """Bind with the shared default binder."""
    return _default_binder.bind(section, instance)
