"""
structlog setup for the API process.

Django, python-socketio and our own modules all log through one stdout
handler. Log lines are events with key/value context, for example:

    logger.info("incident_resolved", incident_id=incident.id, service_id=service.id)

CorrelationIdMiddleware and RequestLoggingMiddleware bind trace_id,
http.method, http.path and usr.id for the lifetime of a request.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

# Socket.IO transports log every packet; keep them out of request logs
NOISY_LOGGERS = ("engineio", "socketio")


def _rename_correlation_id(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    if "correlation_id" in event_dict:
        event_dict["trace_id"] = str(event_dict.pop("correlation_id"))
    return event_dict


def _round_duration_ms(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    if "duration_ms" in event_dict:
        event_dict["duration_ms"] = round(float(event_dict["duration_ms"]), 2)
    return event_dict


def _event_processors(json_format: bool) -> list[Processor]:
    """Processors shared by structlog loggers and foreign stdlib records."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _rename_correlation_id,
        _round_duration_ms,
    ]
    if json_format:
        # ConsoleRenderer prints tracebacks itself
        processors.append(structlog.processors.format_exc_info)
    return processors


def configure_logging(json_format: bool = True, log_level: str = "INFO") -> None:
    """
    Install the structlog formatter on the root logger.

    Called from settings; local development passes json_format=False for
    coloured console output.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    processors = _event_processors(json_format)
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=True)
    )

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_contextvars(**kwargs: Any) -> None:
    """Attach fields to every log line of the current request (dotted keys via **{})."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    structlog.contextvars.clear_contextvars()
