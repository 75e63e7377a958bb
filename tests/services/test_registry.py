"""Tests for load_services and the default registry."""

from __future__ import annotations

import json
import logging

import pytest

from askfilter.domain.models import ServiceRegistry
from askfilter.services.registry import DEFAULT_SERVICES, default_services, load_services


class TestDefaultServices:
    def test_exact_default_set(self) -> None:
        reg = default_services()
        assert [(s.name, s.code) for s in reg.services] == [
            ("Copilot", "co"),
            ("ChatGPT", "gpt"),
            ("Claude", "cl"),
            ("Perplexity", "px"),
            ("Mistral", "ms"),
        ]

    def test_templates_carry_placeholder(self) -> None:
        for svc in default_services().services:
            assert svc.url_template.count("${prompt}") == 1

    def test_deterministic(self) -> None:
        assert default_services() == default_services()
        assert default_services().model_dump_json() == default_services().model_dump_json()

    def test_round_trips_to_config(self) -> None:
        assert [s.to_config() for s in default_services().services] == list(DEFAULT_SERVICES)


class TestLoadServices:
    def test_unset_uses_defaults(self, registry: ServiceRegistry) -> None:
        assert load_services(None) == registry

    @pytest.mark.parametrize("raw", ["", "   ", "\n"])
    def test_blank_uses_defaults(self, raw: str, registry: ServiceRegistry) -> None:
        assert load_services(raw) == registry

    def test_custom_services(self, custom_entries: list[dict[str, str]]) -> None:
        reg = load_services(json.dumps(custom_entries))
        assert [s.to_config() for s in reg.services] == custom_entries

    @pytest.mark.parametrize(
        "raw",
        ["invalid json", "[{", "[" * 100_000, "[" * 100_000 + "]" * 100_000],
        ids=["garbage", "truncated", "deep-unclosed", "deep-closed"],
    )
    def test_invalid_json_uses_defaults(self, raw: str, registry: ServiceRegistry) -> None:
        assert load_services(raw) == registry

    def test_empty_array_uses_defaults(self, registry: ServiceRegistry) -> None:
        assert load_services("[]") == registry

    @pytest.mark.parametrize("raw", ['{"name": "x"}', '"text"', "42", "null"])
    def test_non_array_uses_defaults(self, raw: str, registry: ServiceRegistry) -> None:
        assert load_services(raw) == registry

    def test_incomplete_entries_dropped(self, custom_entries: list[dict[str, str]]) -> None:
        raw = json.dumps(
            [
                {"name": "NoCode", "urlTemplate": "https://x.test/?q=${prompt}"},
                custom_entries[0],
                "not an object",
                {"name": "Bad", "code": "b d", "urlTemplate": "x"},
                custom_entries[1],
            ]
        )
        reg = load_services(raw)
        assert reg.codes == ["kg", "gm"]

    def test_all_entries_invalid_uses_defaults(self, registry: ServiceRegistry) -> None:
        raw = json.dumps([{"name": "x"}, {"code": "y"}])
        assert load_services(raw) == registry

    def test_extra_keys_ignored(self) -> None:
        raw = json.dumps(
            [{"name": "Kagi", "code": "kg", "urlTemplate": "https://k/?q=${prompt}", "icon": "k.png"}]
        )
        assert load_services(raw).codes == ["kg"]

    def test_duplicate_codes_kept_in_order(self) -> None:
        raw = json.dumps(
            [
                {"name": "First", "code": "dup", "urlTemplate": "https://1/?q=${prompt}"},
                {"name": "Second", "code": "dup", "urlTemplate": "https://2/?q=${prompt}"},
            ]
        )
        reg = load_services(raw)
        assert reg.codes == ["dup", "dup"]
        found = reg.find("dup")
        assert found is not None
        assert found.name == "First"

    @pytest.mark.parametrize(
        ("raw", "reason"),
        [
            (None, "unset"),
            ("invalid json", "invalid_json"),
            ("{}", "not_array"),
            ('[{"a": 1}]', "no_entries"),
        ],
    )
    def test_fallback_reason_logged_at_debug(
        self, raw: str | None, reason: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="askfilter"):
            load_services(raw)
        fallbacks = [r for r in caplog.records if hasattr(r, "fallback")]
        assert [r.fallback for r in fallbacks] == [reason]
        assert all(r.levelno == logging.DEBUG for r in caplog.records)
