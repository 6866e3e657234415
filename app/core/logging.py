"""Structured logging for the i18n toolkit."""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from .config import settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _renderer() -> Processor:
    if settings.is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _processors(silent: bool) -> List[Processor]:
    if silent:
        # Nothing reaches a handler while the root level is above CRITICAL
        return [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        _renderer(),
    ]


def configure_logging(level: Optional[str] = None) -> BoundLogger:
    """Configure structlog on top of the standard logging module.

    Output is silenced under pytest. Otherwise events are rendered for the
    console in development and as JSON in production.

    Args:
        level: Log level name (default: settings.LOG_LEVEL).

    Returns:
        The root bound logger.
    """
    silent = _is_test_environment()

    structlog.configure(
        processors=_processors(silent),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if silent:
        logging.root.setLevel(logging.CRITICAL + 1)
        logging.basicConfig(
            format="%(message)s", level=logging.CRITICAL + 1, force=True
        )
    else:
        level_name = (level or settings.LOG_LEVEL).upper()
        logging.basicConfig(
            format="%(message)s", level=getattr(logging, level_name, logging.INFO)
        )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger(**context: Any) -> BoundLogger:
    """Get a logger bound to the calling module.

    Args:
        **context: Extra key/value pairs bound to every event.

    Returns:
        Logger with "component" and "module_path" bound.
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame else None
    module = inspect.getmodule(frame) if frame else None

    if module is None:
        return logger.bind(component="unknown", **context)

    module_name = module.__name__
    return logger.bind(
        component=module_name.split(".")[-1],
        module_path=module_name,
        **context,
    )
