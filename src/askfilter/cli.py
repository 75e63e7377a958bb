"""Root CLI group for askfilter with global flags and command registration."""

from __future__ import annotations

import click

from askfilter import __version__
from askfilter.commands import register_commands
from askfilter.commands._context import AppContext
from askfilter.commands._options import examples_option
from askfilter.config.settings import AskSettings


@click.group(invoke_without_command=True)
@examples_option(
    """\
  askfilter filter co what is a monad
  askfilter -v filter gpt hello
  askfilter --services-json '[{"name":"Kagi","code":"kg","urlTemplate":"https://kagi.com/search?q=${prompt}"}]' services"""
)
@click.version_option(version=__version__, prog_name="askfilter")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--services-json",
    default=None,
    help="Service definitions as a JSON array (overrides SERVICES_JSON).",
)
@click.option("--keyword", default=None, help="Launcher keyword used in example hints.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    services_json: str | None,
    keyword: str | None,
) -> None:
    """Send prompts from your launcher to AI chat services."""
    ctx.ensure_object(dict)
    settings = AskSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        services_json=services_json,
        keyword=keyword,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
