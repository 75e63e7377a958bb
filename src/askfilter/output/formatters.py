"""JSON/Rich output helpers.

``format_envelope`` produces the launcher contract and is always JSON.
``format_services`` renders the active registry for humans (Rich table)
or machines (``--json``, a ``SERVICES_JSON``-compatible array).
"""

from __future__ import annotations

import json as _json
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from askfilter.domain.items import ResultEnvelope
    from askfilter.domain.models import ServiceRegistry

ASK_THEME = Theme(
    {
        "ask.name": "bold",
        "ask.code": "bold cyan",
        "ask.url": "dim",
        "ask.header": "bold magenta",
    }
)


def format_envelope(envelope: ResultEnvelope, *, pretty: bool = False) -> str:
    """Serialize *envelope* for the launcher, omitting unset optional fields."""
    return envelope.model_dump_json(exclude_none=True, indent=2 if pretty else None)


def _services_table(registry: ServiceRegistry) -> Table:
    table = Table(title="Services", title_style="ask.header")
    table.add_column("Code", style="ask.code", no_wrap=True)
    table.add_column("Name", style="ask.name")
    table.add_column("URL template", style="ask.url", overflow="fold")
    for svc in registry.services:
        table.add_row(escape(svc.code), escape(svc.name), escape(svc.url_template))
    return table


def format_services(
    registry: ServiceRegistry,
    *,
    json_output: bool = False,
    no_color: bool = False,
    width: int = 120,
) -> str:
    """Format the active registry.

    Args:
        registry: Services to list.
        json_output: If True, return the registry as a JSON array that
            ``SERVICES_JSON`` accepts; otherwise a Rich table.
        no_color: Strip ANSI codes from the table.
        width: Table width; the output goes to a buffer, not a terminal.
    """
    if json_output:
        return _json.dumps([svc.to_config() for svc in registry.services], indent=2)

    buffer = StringIO()
    console = Console(file=buffer, theme=ASK_THEME, no_color=no_color, highlight=False, width=width)
    console.print(_services_table(registry))
    return buffer.getvalue().rstrip("\n")
