"""Structlog-based logging configuration with a stdlib bridge.

Modules log through ``structlog.get_logger()``; ``configure_logging()`` is
called once by the app factory. Output is JSON when ``LOG_FORMAT=json`` or when
``APP_ENV`` names a deployed environment, console otherwise.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

_DEPLOYED_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

# Vendor SDK transports log every request line at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore", "openai", "anthropic", "google_genai")

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog and route stdlib records through the same renderer.

    Only the first call takes effect.
    """
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    level_number = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    renderer = _renderer(os.environ.get("LOG_FORMAT", ""), os.environ.get("APP_ENV", "local"))
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*pre_chain, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level_number)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level_number, logging.WARNING))


def _renderer(log_format: str, app_env: str) -> Any:
    log_format = log_format.lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console" or app_env.lower() not in _DEPLOYED_ENVIRONMENTS:
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    return structlog.processors.JSONRenderer()
