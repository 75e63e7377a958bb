"""structlog configuration for askfilter.

stdout carries the launcher JSON, so the only handler writes to stderr.
Loader notices (``fallback``, ``index``, ``count`` passed via ``extra``)
become top-level keys of each event.  Without ``--verbose`` they stay
hidden and a bad ``SERVICES_JSON`` never shows up in the launcher.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "askfilter"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Send ``askfilter.*`` records to stderr through structlog.

    Args:
        verbose: Show DEBUG records from askfilter; otherwise WARNING+.
        log_json: One JSON object per line instead of console output.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
