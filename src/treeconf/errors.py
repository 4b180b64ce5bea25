"""Error hierarchy for treeconf path resolution."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigurationError",
    "InvalidPathError",
    "StoreUnsetError",
    "SectionNotFoundError",
    "LeafNotFoundError",
    "ConversionError",
    "BindingError",
    "ErrorCodes",
]


class ConfigurationError(Exception):
    """Base error for all treeconf resolution errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidPathError(ConfigurationError):
    """Raised when a path is empty or has no usable segments."""

    def __init__(self, path: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATH",
            message=f"Invalid configuration path: {path!r}" if path is not None else "Configuration path has no segments",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str | None:
        """The rejected path."""
        return self.details["path"]


class StoreUnsetError(ConfigurationError):
    """Raised when no store has been initialized."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            code="STORE_UNSET",
            message="No configuration store has been initialized",
            **kwargs,
        )


class SectionNotFoundError(ConfigurationError):
    """Raised when a section addressed by a path does not exist."""

    def __init__(self, path: str, section_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="SECTION_NOT_FOUND",
            message=f"Section not found: {section_path} (path {path!r})",
            details={"path": path, "section_path": section_path},
            **kwargs,
        )

    @property
    def section_path(self) -> str:
        """Store path of the missing section."""
        return self.details["section_path"]


class LeafNotFoundError(ConfigurationError):
    """Raised when the terminal segment names no usable leaf value."""

    def __init__(
        self,
        path: str,
        key: str,
        code: str = "LEAF_NOT_FOUND",
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", None) or {}
        details.update({"path": path, "key": key})
        super().__init__(
            code=code,
            message=message or f"Value not found: {key} (path {path!r})",
            details=details,
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The terminal key that could not be read."""
        return self.details["key"]


class ConversionError(LeafNotFoundError):
    """Raised when a leaf exists but cannot be converted to the requested type.

    Subclasses LeafNotFoundError: callers that only care whether a usable
    value exists handle both with one except clause.
    """

    def __init__(self, path: str, key: str, target_type: Any, **kwargs: Any) -> None:
        type_name = getattr(target_type, "__name__", repr(target_type))
        super().__init__(
            path=path,
            key=key,
            code="CONVERSION_FAILED",
            message=f"Cannot convert value of {key!r} to {type_name}",
            details={"target_type": type_name},
            **kwargs,
        )

    @property
    def target_type(self) -> str:
        """Name of the type the conversion targeted."""
        return self.details["target_type"]


class BindingError(ConfigurationError):
    """Raised when a section cannot be bound onto a target instance."""

    def __init__(self, target: str, field: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="BINDING_FAILED",
            message=f"Cannot bind field '{field}' of {target}: {reason}",
            details={"target": target, "field": field, "reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All treeconf error codes as constants.

    Example:
        if error.code == ErrorCodes.SECTION_NOT_FOUND:
            use_defaults()
    """

    INVALID_PATH = "INVALID_PATH"
    STORE_UNSET = "STORE_UNSET"
    SECTION_NOT_FOUND = "SECTION_NOT_FOUND"
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"
    CONVERSION_FAILED = "CONVERSION_FAILED"
    BINDING_FAILED = "BINDING_FAILED"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
