"""Tests for the treeconf error hierarchy."""

from __future__ import annotations

import pytest

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


class TestConfigurationError:
    def test_str_includes_code(self) -> None:
        err = ConfigurationError(code="X", message="broken")
        assert str(err) == "[X] broken"
        assert err.details == {}
        assert err.timestamp

    def test_cause_kept(self) -> None:
        cause = ValueError("inner")
        err = ConfigurationError(code="X", message="m", cause=cause)
        assert err.cause is cause


class TestSubclasses:
    def test_invalid_path(self) -> None:
        err = InvalidPathError("...")
        assert err.code == ErrorCodes.INVALID_PATH
        assert err.path == "..."

    def test_store_unset(self) -> None:
        assert StoreUnsetError().code == ErrorCodes.STORE_UNSET

    def test_section_not_found(self) -> None:
        err = SectionNotFoundError(path="A.B.C", section_path="A:B")
        assert err.code == ErrorCodes.SECTION_NOT_FOUND
        assert err.section_path == "A:B"
        assert err.details["path"] == "A.B.C"

    def test_leaf_not_found(self) -> None:
        err = LeafNotFoundError(path="A.B", key="B")
        assert err.code == ErrorCodes.LEAF_NOT_FOUND
        assert err.key == "B"

    def test_conversion_error_is_leaf_not_found(self) -> None:
        err = ConversionError(path="A.B", key="B", target_type=int)
        assert isinstance(err, LeafNotFoundError)
        assert err.code == ErrorCodes.CONVERSION_FAILED
        assert err.target_type == "int"
        assert err.key == "B"

    def test_binding_error(self) -> None:
        err = BindingError(target="Settings", field="port", reason="read-only")
        assert err.code == ErrorCodes.BINDING_FAILED
        assert "port" in str(err)

    @pytest.mark.parametrize(
        "err",
        [
            InvalidPathError(None),
            StoreUnsetError(),
            SectionNotFoundError(path="a", section_path="a"),
            LeafNotFoundError(path="a", key="a"),
            ConversionError(path="a", key="a", target_type=int),
            BindingError(target="T", field="f", reason="r"),
        ],
    )
    def test_all_are_configuration_errors(self, err: Exception) -> None:
        assert isinstance(err, ConfigurationError)


def test_error_codes_immutable() -> None:
    with pytest.raises(AttributeError):
        ErrorCodes().INVALID_PATH = "other"
