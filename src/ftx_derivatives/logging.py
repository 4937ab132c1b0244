"""structlog setup for the client.

Rendering and level come from AppSettings (LOG_LEVEL, LOG_FORMAT). Decimal
values are rendered as plain strings so amounts keep their exact scale in
both console and JSON output, and httpx's own per-request INFO lines are
silenced in favour of the client's request events.
"""

import logging
from decimal import Decimal

import structlog

from ftx_derivatives.config import AppSettings


def _render_decimals(
    logger: logging.Logger, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Render Decimal values as "3.00" rather than Decimal('3.00')."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
        elif isinstance(value, dict) and any(isinstance(v, Decimal) for v in value.values()):
            event_dict[key] = {k: str(v) if isinstance(v, Decimal) else v for k, v in value.items()}
    return event_dict


def setup_logging(settings: AppSettings | None = None) -> None:
    """Configure structlog and the stdlib root logger from AppSettings."""
    settings = settings if settings is not None else AppSettings()

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            _render_decimals,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
