"""Shared test fixtures for the treeconf test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import yaml

import treeconf
from treeconf.resolver import PathResolver
from treeconf.store import ConfigurationStore

SETTINGS_YAML = """
TopLevelKey: top-value
Timeout: 15
A:
  B:
    C: "42"
    Name: alpha
    Ratio: "0.25"
    Flag: "not-a-bool"
Service:
  Http:
    Enabled: "true"
    Port: "8080"
  Empty: {}
  Tags:
    - web
    - api
Servers:
  - Host: a.example
    Port: 80
  - Host: b.example
    Port: 81
"""


# === Fixtures ===


@pytest.fixture
def settings_data() -> dict:
    """The sample configuration tree as plain Python data."""
    return yaml.safe_load(SETTINGS_YAML)


@pytest.fixture
def store(settings_data: dict) -> ConfigurationStore:
    """A ConfigurationStore holding the sample tree."""
    return ConfigurationStore(settings_data)


@pytest.fixture
def resolver(store: ConfigurationStore) -> PathResolver:
    """A PathResolver bound to the sample store."""
    return PathResolver(store)


@pytest.fixture
def unset_resolver() -> PathResolver:
    """A PathResolver with no store."""
    return PathResolver(None)


@pytest.fixture(autouse=True)
def _reset_default_provider() -> Iterator[None]:
    """Each test starts and ends without a process-wide store."""
    treeconf.destroy()
    yield
    treeconf.destroy()
