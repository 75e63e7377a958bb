"""Input classification states.

The classifier evaluates these in declaration order; the first state
whose condition holds decides the output.
"""

from __future__ import annotations

from enum import StrEnum


class InputState(StrEnum):
    """Shape of the raw launcher input."""

    EMPTY = "empty"
    UNKNOWN = "unknown"
    NEEDS_PROMPT = "needs_prompt"
    READY = "ready"


DEFAULT_KEYWORD = "ask"
"""Launcher keyword shown in the example hint of a NEEDS_PROMPT item."""
