"""
WebDriver Capabilities
======================

Capability negotiation for WebDriver wire-protocol clients: builds the
session parameters sent with a new session request, customises them per
browser, and launches the matching driver executable.

Main Components:
- Browser variants: Chrome, Firefox, Safari, Edge and Remote
- CapabilityStore: Path-addressed session parameters with merge policies
- launch_driver / DriverProcess: Driver process spawning and readiness
- Key: WebDriver special keys

Quick Start:
    >>> from webdriver_capabilities import Chrome
    >>>
    >>> async def main():
    ...     chrome = Chrome()
    ...     chrome.set_specific_key("args", ["--headless"])
    ...     async with chrome:
    ...         params = chrome.get_session_parameters()
    ...         # POST params to f"{chrome.process.url}/session"
"""

__version__ = "1.0.0"
__author__ = "Browser Automation Team"

# Lazy imports for better performance
_LAZY_IMPORTS = {
    "Browser": ("webdriver_capabilities.browsers.base", "Browser"),
    "Chrome": ("webdriver_capabilities.browsers.chrome", "Chrome"),
    "Firefox": ("webdriver_capabilities.browsers.firefox", "Firefox"),
    "Safari": ("webdriver_capabilities.browsers.safari", "Safari"),
    "Edge": ("webdriver_capabilities.browsers.edge", "Edge"),
    "Remote": ("webdriver_capabilities.browsers.remote", "Remote"),
    "create_browser": ("webdriver_capabilities.browsers.registry", "create_browser"),
    "CapabilityStore": ("webdriver_capabilities.capabilities.store", "CapabilityStore"),
    "LaunchOptions": ("webdriver_capabilities.launcher.views", "LaunchOptions"),
    "StdioMode": ("webdriver_capabilities.launcher.views", "StdioMode"),
    "DriverProcess": ("webdriver_capabilities.launcher.process", "DriverProcess"),
    "launch_driver": ("webdriver_capabilities.launcher.process", "launch_driver"),
    "Key": ("webdriver_capabilities.keys", "Key"),
    "KEYS": ("webdriver_capabilities.keys", "KEYS"),
    "Config": ("webdriver_capabilities.core.config", "Config"),
}


def __getattr__(name: str):
    """Lazy import mechanism for main components."""
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        from importlib import import_module
        module = import_module(module_path)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "Browser",
    "Chrome",
    "Firefox",
    "Safari",
    "Edge",
    "Remote",
    "create_browser",
    "CapabilityStore",
    "LaunchOptions",
    "StdioMode",
    "DriverProcess",
    "launch_driver",
    "Key",
    "KEYS",
    "Config",
    "__version__",
]
