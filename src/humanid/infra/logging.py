"""Logging bootstrap for applications that embed ``humanid``.

Library modules only call ``logging.getLogger(__name__)`` and never touch
handlers.  A host application opts into the project's log format once at
startup::

    from humanid.infra.logging import setup_logging

    setup_logging()  # applies get_app_config().logging

``LoggingConfig.json_output`` selects JSON lines (python-json-logger) or
plain ``LEVEL time logger  message`` lines.  Every record carries the
current OpenTelemetry ``trace_id``/``span_id`` (empty outside a span), so
registry warnings can be joined with the caller's trace.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from opentelemetry import trace
from pythonjsonlogger.json import JsonFormatter

from humanid.configs.config import get_app_config
from humanid.configs.system import LoggingConfig

_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
_JSON_RENAMES = {"asctime": "timestamp", "levelname": "level", "name": "logger"}
_PLAIN_FORMAT = "%(levelname)s %(asctime)s %(name)s  %(message)s"
_PLAIN_DATEFMT = "%H:%M:%S"


def _attach_trace_context(record: logging.LogRecord) -> bool:
    ctx = trace.get_current_span().get_span_context()
    valid = ctx is not None and ctx.is_valid
    record.trace_id = format(ctx.trace_id, "032x") if valid else ""  # type: ignore[attr-defined]
    record.span_id = format(ctx.span_id, "016x") if valid else ""  # type: ignore[attr-defined]
    return True


def build_formatter(json_output: bool) -> logging.Formatter:
    if json_output:
        return JsonFormatter(
            fmt=_JSON_FORMAT,
            rename_fields=_JSON_RENAMES,
            defaults={"trace_id": "", "span_id": ""},
        )
    return logging.Formatter(fmt=_PLAIN_FORMAT, datefmt=_PLAIN_DATEFMT)


def setup_logging(
    config: LoggingConfig | None = None, stream: TextIO | None = None
) -> logging.Handler:
    """Replace the root handlers with one configured from ``config``.

    ``config`` defaults to the ``logging`` section of the application
    settings.  Returns the installed handler.
    """
    if config is None:
        config = get_app_config().logging

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.addFilter(_attach_trace_context)
    handler.setFormatter(build_formatter(config.json_output))

    root = logging.getLogger()
    root.setLevel(config.level.upper())
    root.handlers = [handler]
    return handler
