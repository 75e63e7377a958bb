"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``.  Loads the service registry lazily, once per
process, from the settings it was built with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from askfilter.output.formatters import format_envelope

if TYPE_CHECKING:
    from askfilter.config.settings import AskSettings
    from askfilter.domain.items import ResultEnvelope
    from askfilter.domain.models import ServiceRegistry
    from askfilter.services.filter import ScriptFilter


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is built on first access so ``--help`` and
    ``--version`` never touch configuration.
    """

    def __init__(self, settings: AskSettings) -> None:
        self.settings = settings
        self._registry: ServiceRegistry | None = None

        from askfilter.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> ServiceRegistry:
        """The active service registry (loaded lazily on first access)."""
        if self._registry is None:
            from askfilter.services.registry import load_services

            self._registry = load_services(self.settings.services_json)
        return self._registry

    @property
    def script_filter(self) -> ScriptFilter:
        from askfilter.services.filter import ScriptFilter

        return ScriptFilter(self.registry, keyword=self.settings.keyword)

    def emit(self, envelope: ResultEnvelope, *, pretty: bool = False) -> None:
        """Write the launcher JSON to stdout.

        Always returns normally: every classification is a success from
        the launcher's point of view.
        """
        click.echo(format_envelope(envelope, pretty=pretty))
