import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from storefront.config.schemas.app_schema import LoggingConfig


class DetailedFormatter(logging.Formatter):
    """Formatter that adds module, function and line number to each record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


def setup_logging(logging_config: Optional['LoggingConfig'] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        logging_config: Logging section of the application configuration.
                        If None, logs WARNING and above to stdout.
    Returns:
        Configured structlog logger instance.
    """
    level = logging_config.level if logging_config else "WARNING"
    destination = logging_config.destination if logging_config else "stdout"

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    handlers = []

    if destination in ("file", "both"):
        log_file = os.path.expandvars(logging_config.file_path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_config.max_size_mb * 1024 * 1024,
            backupCount=logging_config.backup_count
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog(cache_logger_on_first_use=True)

    logger = get_logger("storefront")
    logger.debug("Logging configured", log_level=level, log_destination=destination)
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


def _configure_structlog(cache_logger_on_first_use: bool) -> None:
    """Route structlog events through stdlib logging, filtered by its levels."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event", "logger", "level"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


# Until setup_logging() runs, events follow stdlib defaults and never reach stdout
_configure_structlog(cache_logger_on_first_use=False)
