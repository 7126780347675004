"""
Structured Logging Configuration
The catalog speaks its tool protocol on stdout, so every log line is routed
to stderr. Console rendering for development, JSON lines for aggregation.
"""

import logging
import sys
from typing import Any, Mapping, Optional, TextIO

import structlog
from pythonjsonlogger import jsonlogger

# Field names shared by the stdlib JSON formatter and structlog's renderer
_JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _processor_chain(json_logs: bool) -> list[Any]:
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


def _stderr_handler(json_logs: bool, stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    if json_logs:
        handler.setFormatter(jsonlogger.JsonFormatter(
            _JSON_FIELDS,
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        ))
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    return handler


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Wire stdlib logging and structlog for the catalog service.

    Args:
        level: Threshold name; unknown names fall back to INFO
        json_logs: Emit one JSON object per line instead of console output
        stream: Destination, stderr unless a test captures it
    """
    threshold = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=threshold,
        handlers=[_stderr_handler(json_logs, stream or sys.stderr)],
    )

    structlog.configure(
        processors=_processor_chain(json_logs),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)


class LogContext:
    """
    Bind request-scoped fields (tool name, component) for the duration of a call.
    Nested contexts restore the outer values on exit instead of dropping them.
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._tokens: Mapping[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self._tokens = structlog.contextvars.bind_contextvars(**self.fields)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        structlog.contextvars.reset_contextvars(**self._tokens)
        self._tokens = {}
