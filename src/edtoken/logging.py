"""Structured logging setup for edtoken."""
from __future__ import annotations

import logging
import sys
from typing import Dict

import structlog

_DEFAULT_LEVEL = "info"
_DEFAULT_COMPONENT = "edtoken"

logging.getLogger(_DEFAULT_COMPONENT).addHandler(logging.NullHandler())


def configure_logging(level: str | None = None) -> None:
    """Configure structlog to emit JSON lines.

    Every record carries ``ts``, ``level``, ``msg`` and ``component``; extra
    context passed by callers (``path``, ``kind``) is preserved. Key material is
    never handed to the logger.
    """

    numeric_level = _level_from_str((level or _DEFAULT_LEVEL).lower())

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            _rename_event_to_msg,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(component: str = _DEFAULT_COMPONENT) -> structlog.stdlib.BoundLogger:
    """Return a logger backed by the stdlib logger ``component``.

    Until the application configures logging, the ``NullHandler`` on the
    package logger keeps records off stdout and stderr.
    """
    return structlog.wrap_logger(
        logging.getLogger(component),
        wrapper_class=structlog.stdlib.BoundLogger,
        component=component,
    )


def _component_processor(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Ensure every log record carries a ``component`` field."""

    if event_dict.get("component") is None:
        event_dict["component"] = getattr(logger, "name", None) or _DEFAULT_COMPONENT
    return event_dict


def _rename_event_to_msg(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


def _level_from_str(level: str) -> int:
    mapping: Dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["configure_logging", "get_logger"]
