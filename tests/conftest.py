"""Shared fixtures for the typedaccess test suite."""

from __future__ import annotations

from typing import Any

import pytest

from typedaccess import TypedAccessor
from typedaccess.lib import config


@pytest.fixture()
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Clear the cached defaults before and after the test."""
    monkeypatch.delenv("TYPEDACCESS_DEFAULTS", raising=False)
    config.reset()
    yield config
    config.reset()


@pytest.fixture()
def service_config() -> dict[str, Any]:
    """Return a nested configuration blob as parsed from JSON."""
    return {
        "name": "billing",
        "port": "8080",
        "debug": "",
        "timeout": 2.5,
        "started": "2021-06-01T12:00:00Z",
        "tags": ["a", "b"],
        "database": {"host": "db.internal", "port": 5432},
        "servers": [
            {"host": "s0", "tls": {"cert": "/etc/s0.pem"}},
            {"host": "s1", "tls": {"cert": 42}},
        ],
    }


@pytest.fixture()
def root(service_config: dict[str, Any]) -> TypedAccessor:
    """Return an accessor labelled 'root' over the service config."""
    return TypedAccessor("root", service_config)
