"""Launcher module - driver process spawning and readiness."""

from webdriver_capabilities.launcher.process import (
    DriverProcess,
    find_free_port,
    launch_driver,
    wait_until_ready,
)
from webdriver_capabilities.launcher.views import LaunchOptions, StdioMode

__all__ = [
    "DriverProcess",
    "find_free_port",
    "launch_driver",
    "wait_until_ready",
    "LaunchOptions",
    "StdioMode",
]
