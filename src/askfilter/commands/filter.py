"""Command: the launcher script filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from askfilter.commands._options import examples_option

if TYPE_CHECKING:
    from askfilter.commands._context import AppContext


# Options are only recognised before the first word; everything after it,
# dashes included, is prompt text.
@click.command(
    "filter",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@examples_option(
    """\
  askfilter filter
  askfilter filter co
  askfilter filter co how do I reverse a list in python
  askfilter filter "gpt explain & compare?"
  askfilter filter --pretty cl summarize this
  SERVICES_JSON='[{"name":"Kagi","code":"kg","urlTemplate":"https://kagi.com/search?q=${prompt}"}]' askfilter filter kg test"""
)
@click.argument("words", nargs=-1)
@click.option("--pretty", is_flag=True, help="Indent the JSON output.")
@click.pass_obj
def filter_cmd(app: AppContext, words: tuple[str, ...], pretty: bool) -> None:
    """Classify WORDS and print launcher items as JSON.

    The first word is a service code; the rest is the prompt.
    """
    raw = " ".join(words).strip()
    app.emit(app.script_filter.process_input(raw), pretty=pretty)
