"""
goinstant_auth.observability.logging

structlog setup for applications embedding the signer.

Responsibilities:
- Route signer events through stdlib logging, rendered per `Settings`.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys

import structlog

from goinstant_auth.settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """
    Render signer events on stdout using `log_level`, `log_json` and
    `service_name` from settings.

    Nothing calls this on import; until an application does, structlog's
    defaults apply.
    """
    settings = settings or get_settings()

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger("goinstant_auth").setLevel(settings.log_level.upper())

    # Every event carries the service name via contextvars.
    structlog.contextvars.bind_contextvars(service=settings.service_name)

    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
