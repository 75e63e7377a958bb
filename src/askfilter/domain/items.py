"""Launcher output records: the script filter JSON contract.

The host reads exactly ``title``, ``subtitle``, ``valid``, ``arg`` and
``autocomplete``.  Unset optional fields are left out of the JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputItem(BaseModel):
    """One menu row.

    Attributes:
        title: Main line shown in the launcher.
        subtitle: Secondary line.
        valid: Whether the host may act on the item.
        arg: Value handed to the host action; only set on actionable items.
        autocomplete: Text the host inserts on tab/enter for a non-valid item.
    """

    model_config = {"frozen": True}

    title: str
    subtitle: str | None = None
    valid: bool = False
    arg: str | None = None
    autocomplete: str | None = None


class ResultEnvelope(BaseModel):
    """Top-level script filter response."""

    model_config = {"frozen": True}

    items: list[OutputItem] = Field(default_factory=list)
