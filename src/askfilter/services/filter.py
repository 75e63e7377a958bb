"""ScriptFilter classifies launcher input and builds menu items.

Input shape decides one of four states (see :class:`InputState`):

- EMPTY: list every service so the user can pick one.
- UNKNOWN: the first token is not a known code.
- NEEDS_PROMPT: a known code with nothing after it.
- READY: a known code plus a prompt; emit the target URL.

The first whitespace-delimited token is the code.  Everything after it,
rejoined with single spaces, is the prompt.
"""

from __future__ import annotations

import logging

from askfilter.domain.items import OutputItem, ResultEnvelope
from askfilter.domain.models import Service, ServiceRegistry
from askfilter.domain.types import DEFAULT_KEYWORD, InputState
from askfilter.domain.urls import display_text, render_url

logger = logging.getLogger(__name__)


def split_input(raw: str) -> tuple[str, str]:
    """Split *raw* into ``(code, prompt)``.

    Examples:
        >>> split_input("co  how   are you")
        ('co', 'how are you')
        >>> split_input("co")
        ('co', '')
        >>> split_input("")
        ('', '')
    """
    tokens = raw.split()
    if not tokens:
        return "", ""
    return tokens[0], " ".join(tokens[1:])


class ScriptFilter:
    """Turns raw launcher input into a :class:`ResultEnvelope`.

    Stateless apart from the registry and keyword fixed at construction,
    so the same input always yields the same envelope.
    """

    def __init__(self, registry: ServiceRegistry, *, keyword: str = DEFAULT_KEYWORD) -> None:
        self._registry = registry
        self._keyword = keyword

    @property
    def registry(self) -> ServiceRegistry:
        return self._registry

    def classify(self, raw: str) -> tuple[InputState, Service | None, str]:
        """Return ``(state, matched service, prompt)`` for *raw*."""
        if raw == "":
            return InputState.EMPTY, None, ""
        code, prompt = split_input(raw)
        svc = self._registry.find(code)
        if svc is None:
            return InputState.UNKNOWN, None, ""
        if not prompt:
            return InputState.NEEDS_PROMPT, svc, ""
        return InputState.READY, svc, prompt

    def process_input(self, raw: str) -> ResultEnvelope:
        """Classify *raw* and build the matching items."""
        state, svc, prompt = self.classify(raw)
        logger.debug("Classified input as %s", state)

        if state is InputState.EMPTY:
            return ResultEnvelope(items=self.build_items_for_empty_input())
        if state is InputState.UNKNOWN:
            return ResultEnvelope(items=[self.build_unknown_service_item()])
        assert svc is not None
        if state is InputState.NEEDS_PROMPT:
            return ResultEnvelope(items=[self.build_need_prompt_item(svc)])
        return ResultEnvelope(items=[self.build_final_item(svc, prompt)])

    # --- Item builders ---

    def build_items_for_empty_input(self) -> list[OutputItem]:
        return [
            OutputItem(
                title=f"{svc.name} ({svc.code})",
                subtitle=f"Press Enter to select {svc.name}, then type your prompt",
                valid=False,
                autocomplete=f"{svc.code} ",
            )
            for svc in self._registry.services
        ]

    def build_unknown_service_item(self) -> OutputItem:
        return OutputItem(
            title="Unknown Service",
            subtitle=f"Valid: {', '.join(self._registry.codes)}",
            valid=False,
        )

    def build_need_prompt_item(self, svc: Service) -> OutputItem:
        return OutputItem(
            title=f"Type your prompt for {svc.name} ({svc.code})",
            subtitle=f"e.g. '{self._keyword} {svc.code} how do I X?'",
            valid=False,
        )

    def build_final_item(self, svc: Service, prompt: str) -> OutputItem:
        """The one actionable item: *prompt* encoded into the service URL."""
        return OutputItem(
            title=f"Send to {svc.name}",
            subtitle=display_text(prompt),
            arg=render_url(svc.url_template, prompt),
            valid=True,
        )


def process_input(
    raw: str, registry: ServiceRegistry, *, keyword: str = DEFAULT_KEYWORD
) -> ResultEnvelope:
    """Functional entry point: classify *raw* against *registry*."""
    return ScriptFilter(registry, keyword=keyword).process_input(raw)
