"""Service records and the per-run registry.

A Service mirrors one entry of the ``SERVICES_JSON`` array
(``{name, code, urlTemplate}``).  The registry is built once per
process and never mutated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Service(BaseModel):
    """One destination the user can send a prompt to."""

    model_config = {"frozen": True, "strict": True}

    name: str
    code: str
    url_template: str = Field(alias="urlTemplate")

    @field_validator("code")
    @classmethod
    def _code_is_single_token(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            msg = f"service code must be a non-empty token without whitespace: {value!r}"
            raise ValueError(msg)
        return value

    def to_config(self) -> dict[str, str]:
        """Serialize back to the ``SERVICES_JSON`` entry shape."""
        return self.model_dump(by_alias=True)


class ServiceRegistry(BaseModel):
    """Ordered, immutable set of services active for one invocation.

    Code lookup is exact and case-sensitive.  Codes are expected to be
    unique; if two entries share one, the first wins.
    """

    model_config = {"frozen": True}

    services: tuple[Service, ...] = ()

    @classmethod
    def from_entries(cls, entries: list[dict[str, Any]]) -> ServiceRegistry:
        """Build a registry from already-validated ``SERVICES_JSON`` entries."""
        return cls(services=tuple(Service.model_validate(entry) for entry in entries))

    @property
    def codes(self) -> list[str]:
        """All codes, in registry order."""
        return [svc.code for svc in self.services]

    def find(self, code: str) -> Service | None:
        """Return the first service whose code equals *code*, or None."""
        for svc in self.services:
            if svc.code == code:
                return svc
        return None

    def __len__(self) -> int:
        return len(self.services)
