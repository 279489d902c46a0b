"""Browser variants - per-vendor capability defaults and driver launching."""

from webdriver_capabilities.browsers.base import Browser, VariantSpec
from webdriver_capabilities.browsers.chrome import Chrome
from webdriver_capabilities.browsers.edge import Edge
from webdriver_capabilities.browsers.firefox import Firefox
from webdriver_capabilities.browsers.remote import Remote, RemoteEndpoint
from webdriver_capabilities.browsers.safari import Safari
from webdriver_capabilities.browsers.registry import (
    available_browsers,
    create_browser,
    get_browser_class,
    register_browser,
)

__all__ = [
    "Browser",
    "VariantSpec",
    "Chrome",
    "Edge",
    "Firefox",
    "Remote",
    "RemoteEndpoint",
    "Safari",
    "available_browsers",
    "create_browser",
    "get_browser_class",
    "register_browser",
]
