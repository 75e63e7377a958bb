"""Subcommand modules for askfilter.

Provides register_commands() which uses deferred imports to keep
``askfilter --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from askfilter.commands.filter import filter_cmd
    from askfilter.commands.services import services

    cli.add_command(filter_cmd)
    cli.add_command(services)
