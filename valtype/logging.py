"""Structured Logging for valtype

The library only emits events; it never installs handlers on import.
Loggers wrap the stdlib ``valtype.*`` loggers, so events stay silent until a
host application (or ``configure_logging``) attaches a handler:
- Colored, human-readable console output
- JSON structured output
- Host-bound structlog contextvars merged into every event
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

from valtype import __version__


def _add_service_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that adds library metadata."""
    event_dict.setdefault("service", "valtype")
    event_dict.setdefault("version", __version__)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used for both library events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_service_info,
    ]


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Attach a structlog-rendering handler to the ``valtype`` logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON format. If False, colored console output.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # Scoped to our namespace; the host's root logger is left alone
    package_logger = logging.getLogger("valtype")
    package_logger.handlers = [handler]
    package_logger.setLevel(log_level)
    package_logger.propagate = False


def configure_from_settings() -> None:
    """Configure logging from ``VALTYPE_LOG_LEVEL`` / ``VALTYPE_LOG_JSON``."""
    from valtype.config import get_settings

    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to the stdlib logger ``name``.

    Args:
        name: Logger name (typically __name__ from the calling module)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *get_shared_processors(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


class LoggerRegistry:
    """Registry of loggers for the library's domains."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given domain."""
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"valtype.{name}")
        return cls._loggers[name]


def validation_logger() -> structlog.stdlib.BoundLogger:
    """Logger for condition evaluation and assertion events."""
    return LoggerRegistry.get("validation")


def builder_logger() -> structlog.stdlib.BoundLogger:
    """Logger for validator construction events."""
    return LoggerRegistry.get("builder")
