"""Logging configuration for the webdriver capabilities layer."""

import logging
import sys
from pathlib import Path
from typing import Optional
import structlog

from webdriver_capabilities.core.config import Config

LOGGER_NAME = "webdriver_capabilities"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_logs: bool = False
) -> logging.Logger:
    """
    Set up logging configuration for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging
        json_logs: Whether to output JSON formatted logs

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if json_logs:
        processors += [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ]
    else:
        processors += [
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False)
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    if not json_logs:
        console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Quiet down asyncio's debug chatter about subprocess transports
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    return logger


def setup_logging_from_config(config: Optional[Config] = None) -> logging.Logger:
    """
    Set up logging from a ``Config`` (``LOG_LEVEL``, ``LOG_FILE`` and
    ``LOG_JSON`` when built from the environment).
    """
    config = config or Config.from_env()
    return setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger bound to the stdlib logger ``name``.

    Events go through stdlib logging, so they follow the host
    application's handlers and levels whether or not ``setup_logging``
    was called.

    Args:
        name: Logger name (usually module name)

    Returns:
        Bound logger instance
    """
    return structlog.wrap_logger(logging.getLogger(name))


def log_driver_event(event_type: str, **details) -> None:
    """
    Log driver process lifecycle events with consistent formatting.

    Args:
        event_type: Type of driver event (spawned, ready, exited, terminated...)
        **details: Additional event details
    """
    logger = get_logger(f"{LOGGER_NAME}.launcher")
    logger.debug(f"Driver event: {event_type}", event_type=event_type, **details)
