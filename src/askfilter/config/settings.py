"""Unified settings: CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``ASKFILTER_*`` prefix, plus the launcher's ``SERVICES_JSON``
  3. Code defaults

The raw ``SERVICES_JSON`` string is carried as-is; parsing and fallback
belong to :func:`askfilter.services.registry.load_services`.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from askfilter.domain.types import DEFAULT_KEYWORD


class AskSettings(BaseSettings):
    """Settings for one askfilter invocation.

    Frozen after construction and stored on the Click context at the
    CLI root.

    Attributes:
        services_json: Raw JSON array of service definitions, read from
            the unprefixed ``SERVICES_JSON`` variable the launcher sets.
        keyword: Launcher keyword shown in the example hint.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ASKFILTER_",
    }

    services_json: str | None = Field(
        default=None,
        validation_alias=AliasChoices("services_json", "SERVICES_JSON"),
    )
    keyword: str = DEFAULT_KEYWORD

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> AskSettings:
        """Construct settings from a CLI invocation.

        Options the user did not pass arrive as None (or False for flags)
        and are dropped so they never mask the environment.
        """
        overrides = {k: v for k, v in cli_flags.items() if v is not None and v is not False}
        return cls(**overrides)
