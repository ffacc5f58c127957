"""Centralized logging configuration for the initializer.

Log records go to stderr so they never mix with the interactive prompts on
stdout. When a log directory is configured, two files are written as well:
- info.log: General logs (INFO level and above)
- error.log: Error logs only (ERROR level and above)

Every record, whether it comes from a stdlib logger or a structlog logger,
is rendered by structlog.
"""

import logging
import sys

import structlog

from initializer.core.config import Settings, get_settings

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
    structlog.processors.StackInfoRenderer(),
]


def _formatter(colors: bool) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure logging with a console handler and optional file handlers.

    Args:
        settings: Initializer settings. If None, uses global settings.

    Returns:
        The configured root logger.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(_formatter(colors=sys.stderr.isatty()))
    root_logger.addHandler(console_handler)

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

        # File handler for INFO and above (info.log)
        info_handler = logging.FileHandler(settings.log_dir / "info.log", encoding="utf-8")
        info_handler.setLevel(logging.INFO)
        info_handler.setFormatter(_formatter(colors=False))
        root_logger.addHandler(info_handler)

        # File handler for ERROR and above (error.log)
        error_handler = logging.FileHandler(settings.log_dir / "error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(_formatter(colors=False))
        root_logger.addHandler(error_handler)

        # File handlers need INFO records even when the console is quieter
        root_logger.setLevel(min(level, logging.INFO))

    return root_logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name.

    Args:
        name: The name for the logger (typically __name__ of the module).

    Returns:
        A bound logger that renders through the stdlib handlers.
    """
    return structlog.stdlib.get_logger(name)
