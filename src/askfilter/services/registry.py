"""Service registry loading with silent fallback to built-in defaults.

INVARIANT: ``load_services`` never raises.  Any configuration problem
degrades to the default registry, logged at DEBUG only so the launcher
JSON on stdout stays clean.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from askfilter.domain.models import Service, ServiceRegistry

logger = logging.getLogger(__name__)

DEFAULT_SERVICES: tuple[dict[str, str], ...] = (
    {"name": "Copilot", "code": "co", "urlTemplate": "https://github.com/copilot?prompt=${prompt}"},
    {"name": "ChatGPT", "code": "gpt", "urlTemplate": "https://chatgpt.com/?prompt=${prompt}"},
    {"name": "Claude", "code": "cl", "urlTemplate": "https://claude.ai/new?q=${prompt}"},
    {
        "name": "Perplexity",
        "code": "px",
        "urlTemplate": "https://www.perplexity.ai/search/new?q=${prompt}",
    },
    {"name": "Mistral", "code": "ms", "urlTemplate": "https://chat.mistral.ai/chat?q=${prompt}"},
)


def default_services() -> ServiceRegistry:
    """The built-in five-service registry."""
    return ServiceRegistry.from_entries(list(DEFAULT_SERVICES))


def _fallback(message: str, reason: str) -> ServiceRegistry:
    logger.debug(message, extra={"fallback": reason})
    return default_services()


def _parse_entries(raw: list[Any]) -> list[Service]:
    """Validate each entry, dropping the ones that are not well-formed services."""
    services: list[Service] = []
    for index, entry in enumerate(raw):
        try:
            services.append(Service.model_validate(entry))
        except ValidationError as exc:
            logger.debug(
                "Skipping invalid service entry",
                extra={
                    "index": index,
                    "errors": exc.errors(include_url=False, include_context=False),
                },
            )
    return services


def load_services(services_json: str | None) -> ServiceRegistry:
    """Resolve the active registry from a ``SERVICES_JSON`` value.

    Args:
        services_json: JSON array of ``{name, code, urlTemplate}`` objects,
            or None when the variable is unset.

    Returns the parsed services in order, or :func:`default_services` when
    the value is absent, blank, malformed, too deeply nested to decode,
    not an array, empty, or has no valid entries.
    """
    if services_json is None or not services_json.strip():
        return _fallback("SERVICES_JSON not set, using default services", "unset")

    try:
        raw = json.loads(services_json)
    except (json.JSONDecodeError, RecursionError):
        return _fallback("SERVICES_JSON is not valid JSON, using default services", "invalid_json")

    if not isinstance(raw, list):
        return _fallback("SERVICES_JSON is not a JSON array, using default services", "not_array")

    services = _parse_entries(raw)
    if not services:
        return _fallback("SERVICES_JSON has no usable entries, using default services", "no_entries")

    codes = [svc.code for svc in services]
    if len(set(codes)) != len(codes):
        logger.debug("SERVICES_JSON has duplicate codes, first match wins", extra={"codes": codes})

    logger.debug("Loaded services from SERVICES_JSON", extra={"count": len(services)})
    return ServiceRegistry(services=tuple(services))
