"""Conversion of text leaves into requested Python types."""

from __future__ import annotations

import logging
import threading
from typing import Any

from pydantic import TypeAdapter, ValidationError

from treeconf.errors import ConversionError

__all__ = ["ValueConverter", "convert_value"]

logger = logging.getLogger(__name__)


class ValueConverter:
    """Convert leaf text to a target type through pydantic's lax validation.

    ``"42"`` becomes ``42`` for ``int``, ``"true"`` becomes ``True`` for
    ``bool``; ISO dates, enums, ``Optional[...]`` and other types pydantic
    understands work the same way. Adapters are cached per target type.
    """

    def __init__(self) -> None:
        self._adapters: dict[Any, TypeAdapter[Any]] = {}
        self._lock = threading.Lock()

    def _adapter(self, value_type: Any) -> TypeAdapter[Any]:
        with self._lock:
            adapter = self._adapters.get(value_type)
            if adapter is None:
                adapter = TypeAdapter(value_type)
                self._adapters[value_type] = adapter
            return adapter

    def convert(self, text: str, value_type: Any, *, key: str = "", path: str = "") -> Any:
        """Convert text to value_type.

        Raises:
            ConversionError: If the text is not a valid value_type.
        """
        if value_type is str or value_type is Any:
            return text
        try:
            return self._adapter(value_type).validate_python(text)
        except ValidationError as e:
            logger.debug("Cannot convert %r at %s to %r: %s", text, path or key, value_type, e)
            raise ConversionError(path=path, key=key, target_type=value_type, cause=e) from e
        except TypeError as e:
            # TypeAdapter rejects types it cannot build a schema for
            logger.debug("Unsupported conversion target %r: %s", value_type, e)
            raise ConversionError(path=path, key=key, target_type=value_type, cause=e) from e


_default_converter = ValueConverter()


def convert_value(text: str, value_type: Any) -> Any:
    """Convert text with the shared default converter."""
    return _default_converter.convert(text, value_type)
