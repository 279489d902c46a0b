"""Core components - configuration, logging, and exceptions."""

from webdriver_capabilities.core.config import Config, DriverConfig
from webdriver_capabilities.core.exceptions import (
    WebDriverCapabilitiesError,
    ConfigurationError,
    PathError,
    ProcessLaunchError,
    SpawnFailureError,
    EarlyExitError,
    ReadinessTimeoutError,
)
from webdriver_capabilities.core.logging import (
    setup_logging,
    setup_logging_from_config,
    get_logger,
)

__all__ = [
    "Config",
    "DriverConfig",
    "WebDriverCapabilitiesError",
    "ConfigurationError",
    "PathError",
    "ProcessLaunchError",
    "SpawnFailureError",
    "EarlyExitError",
    "ReadinessTimeoutError",
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
]
