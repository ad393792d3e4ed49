# cypher_compose/core/logging_config.py
"""Configure logging for applications that embed cypher_compose.

The library itself only emits structlog events (`logger.debug("Compiled query",
...)`); it never installs handlers on import. Applications and scripts that
want those events rendered call [`setup_logging()`](logging_config.py) once at
startup.

This module configures:
- structlog, routed through the standard library so third-party loggers and
  structlog events share one set of handlers.
- A Rich console handler when `ENABLE_RICH_LOGGING` is set, otherwise a plain
  stream handler.
"""

from __future__ import annotations

import logging as stdlib_logging
from collections.abc import MutableMapping
from typing import Any

import structlog
from rich.logging import RichHandler

from cypher_compose import config

_LEVEL_MARKUP = {
    "CRITICAL": "red",
    "ERROR": "red",
    "WARNING": "yellow",
    "INFO": "green",
}


def filter_internal_keys(
    logger: Any, name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Remove internal structlog fields from event dict."""
    keys_to_remove = [k for k in event_dict.keys() if k.startswith("_")]
    for key in keys_to_remove:
        event_dict.pop(key, None)
    return event_dict


def _format_event(event_dict: MutableMapping[str, Any], markup: bool) -> str:
    level = str(event_dict.pop("level", "INFO")).upper()
    timestamp = event_dict.pop("timestamp", "")
    logger_name = event_dict.pop("logger", "")
    event = event_dict.pop("event", "")

    parts = []
    if timestamp:
        parts.append(str(timestamp))
    if logger_name:
        short_name = logger_name.split(".")[-1]
        parts.append(f"[cyan]{short_name}[/cyan]" if markup else f"[{short_name}]")

    color = _LEVEL_MARKUP.get(level)
    parts.append(f"[{color}]{level}[/{color}]" if markup and color else level)

    if event:
        parts.append(f"[bold]{event}[/bold]" if markup else str(event))

    context_parts = []
    for key, value in event_dict.items():
        if key.startswith("_"):
            continue
        # Compiled Cypher is multi-line; keep it readable but bounded
        if isinstance(value, str) and len(value) > 80:
            value_str = f"{value[:77]}..."
        else:
            value_str = str(value)
        context_parts.append(f"[dim]{key}[/dim]={value_str}" if markup else f"{key}={value_str}")
    if context_parts:
        parts.append(f"({', '.join(context_parts)})")

    return " ".join(parts)


def simple_log_format_rich(
    logger: Any, name: str, event_dict: MutableMapping[str, Any]
) -> str:
    """Human-readable log line with Rich markup for console output."""
    return _format_event(event_dict, markup=True)


def simple_log_format_plain(
    logger: Any, name: str, event_dict: MutableMapping[str, Any]
) -> str:
    """Human-readable log line without markup."""
    return _format_event(event_dict, markup=False)


def _build_formatter(renderer: Any) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt=config.settings.LOG_DATE_FORMAT),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            filter_internal_keys,
            renderer,
        ],
    )


def setup_logging(level: str | None = None) -> stdlib_logging.Handler:
    """Install a console handler and route structlog through it.

    Args:
        level: Log level name. Defaults to `LOG_LEVEL` from settings.

    Returns:
        The handler that was attached to the root logger.

    Notes:
        This mutates the root logger handler list. Calling it again replaces
        the handlers installed by the previous call.
    """
    current = config.settings
    level_name = (level or current.LOG_LEVEL).upper()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt=current.LOG_DATE_FORMAT),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = stdlib_logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler: stdlib_logging.Handler
    if current.ENABLE_RICH_LOGGING:
        handler = RichHandler(
            level=level_name,
            rich_tracebacks=True,
            show_path=False,
            markup=True,
            show_time=False,  # Timestamp already in our formatter
            show_level=False,  # Level already in our formatter
        )
        handler.setFormatter(_build_formatter(simple_log_format_rich))
    else:
        handler = stdlib_logging.StreamHandler()
        handler.setLevel(level_name)
        handler.setFormatter(_build_formatter(simple_log_format_plain))

    root_logger.addHandler(handler)
    root_logger.setLevel(level_name)

    structlog.get_logger(__name__).debug(
        "Logging configured", level=level_name, rich=current.ENABLE_RICH_LOGGING
    )
    return handler
