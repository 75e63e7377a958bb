"""Command: list the active service registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from askfilter.commands._options import examples_option

if TYPE_CHECKING:
    from askfilter.commands._context import AppContext


@click.command()
@examples_option(
    """\
  askfilter services
  askfilter --json services
  askfilter --json services > services.json"""
)
@click.pass_obj
def services(app: AppContext) -> None:
    """Show the services askfilter will offer."""
    from askfilter.output.formatters import format_services

    click.echo(format_services(app.registry, json_output=app.settings.json_output))
