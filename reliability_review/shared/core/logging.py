import sys
import structlog
import logging
from typing import Any, cast
from reliability_review.shared.core.config import get_settings


def add_app_context(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp every event with the application name."""
    event_dict.setdefault("app", get_settings().APP_NAME)
    return event_dict


def setup_logging() -> None:
    settings = get_settings()

    # 1. Configure the common processors (Middleware Pipeline for Logs)
    base_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,  # Add "level": "info"
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    # 2. Choose the renderer based on environment
    if settings.DEBUG:
        renderer: Any = structlog.dev.ConsoleRenderer()
        processors = base_processors + [renderer]
        min_level = logging.DEBUG
    else:
        renderer = structlog.processors.JSONRenderer()
        processors = base_processors + [structlog.processors.dict_tracebacks, renderer]
        min_level = logging.getLevelName(settings.LOG_LEVEL)

    # 3. Configure the logger or apply the configuration
    structlog.configure(
        processors=cast(Any, processors),
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # 4. Intercept the standard logging (azure-core's HTTP policies log here).
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=min_level,
    )
