"""
structlog setup for wger-catalog.

Every entry carries the application name plus the layer and component that
emitted it, so a request can be followed from the CLI through the view model
down to the HTTP transport:

    {"app": "wger-catalog", "layer": "ingestion", "component": "wger-client",
     "event": "request_dispatched", "url": "...", "severity": "DEBUG"}

Layers:
    - infrastructure: config and HTTP transport
    - ingestion: wger client and variation aggregator
    - presentation: view models and the CLI
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor

APP_NAME = "wger-catalog"

Layer = Literal["infrastructure", "ingestion", "presentation"]

_SEVERITY = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
    "critical": "CRITICAL",
}


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["app"] = APP_NAME
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """Upper-case ``severity`` next to structlog's ``level`` for log shippers."""
    level = event_dict.get("level")
    if level:
        event_dict["severity"] = _SEVERITY.get(level, "INFO")
    return event_dict


def _build_processors(json_logs: bool, include_timestamp: bool) -> list[Processor]:
    processors: list[Processor] = []
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False, exception_formatter=structlog.dev.plain_traceback
            )
        )
    return processors


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Route structlog through the stdlib root logger on stderr.

    Args:
        level: Name of a stdlib level; unknown names fall back to INFO
        json_logs: JSON lines when True, key=value console output otherwise
        include_timestamp: Prefix entries with an ISO timestamp

    Stdout is left to the CLI, so logs never mix with command output.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=_build_processors(json_logs, include_timestamp),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Logger with ``layer``, ``component`` and ``module`` bound when given.

    Example:
        >>> log = get_logger(__name__, layer="ingestion", component="wger-client")
        >>> log.info("request_dispatched", url="https://wger.de/api/v2/exerciseinfo")
    """
    bound = {
        key: value
        for key, value in (("layer", layer), ("component", component), ("module", name))
        if value
    }
    bound.update(initial_context)
    logger = structlog.get_logger(name)
    return logger.bind(**bound) if bound else logger


def get_infrastructure_logger(component: str, **context: Any) -> structlog.stdlib.BoundLogger:
    return get_logger("infrastructure", layer="infrastructure", component=component, **context)


def get_ingestion_logger(component: str, **context: Any) -> structlog.stdlib.BoundLogger:
    return get_logger("ingestion", layer="ingestion", component=component, **context)


def get_presentation_logger(component: str, **context: Any) -> structlog.stdlib.BoundLogger:
    return get_logger("presentation", layer="presentation", component=component, **context)
