"""Structured logging with import correlation ID support."""

import contextvars
import logging
import sys
import uuid
from typing import Any

import structlog

# Context variable for the running import session
_import_id: contextvars.ContextVar[str] = contextvars.ContextVar("import_id", default="")


def get_import_id() -> str:
    """Get the current import ID from context."""
    return _import_id.get()


def set_import_id(import_id: str | None = None) -> str:
    """Set import ID in context. Generates one if not provided."""
    iid = import_id or str(uuid.uuid4())
    _import_id.set(iid)
    return iid


def add_import_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Processor to add the import ID to log events."""
    import_id = get_import_id()
    if import_id:
        event_dict["import_id"] = import_id
    return event_dict


def configure_logging(
    service_name: str,
    log_level: str = "INFO",
    json_format: bool = True,
) -> None:
    """Configure structured logging for an import service.

    Args:
        service_name: Name of the service for log context
        log_level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Whether to output JSON logs (True for production)
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_import_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    structlog.contextvars.bind_contextvars(service=service_name)


def bind_import_context(**values: Any) -> None:
    """Bind key/value pairs (submission_id, context_id, ...) to every log event."""
    structlog.contextvars.bind_contextvars(**values)


def clear_import_context(*keys: str) -> None:
    """Remove previously bound import context keys."""
    structlog.contextvars.unbind_contextvars(*keys)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)
