"""Shared pytest fixtures and test helpers for askfilter tests."""

from __future__ import annotations

import json
from typing import Any

import pytest
from click.testing import CliRunner

from askfilter.domain.models import ServiceRegistry
from askfilter.services.registry import default_services

_ENV_VARS = (
    "SERVICES_JSON",
    "ASKFILTER_KEYWORD",
    "ASKFILTER_VERBOSE",
    "ASKFILTER_LOG_JSON",
    "ASKFILTER_JSON_OUTPUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell configuration out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> ServiceRegistry:
    """The built-in five-service registry."""
    return default_services()


@pytest.fixture
def custom_entries() -> list[dict[str, str]]:
    """Two services in ``SERVICES_JSON`` shape."""
    return [
        {"name": "Kagi", "code": "kg", "urlTemplate": "https://kagi.com/search?q=${prompt}"},
        {"name": "Gemini", "code": "gm", "urlTemplate": "https://gemini.google.com/app?q=${prompt}"},
    ]


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def items_of(output: str) -> list[dict[str, Any]]:
    """Parse launcher JSON and return its ``items`` list."""
    payload = json.loads(output)
    assert set(payload) == {"items"}
    return payload["items"]
