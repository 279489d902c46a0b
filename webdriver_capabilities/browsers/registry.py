"""Registry of browser variants."""

import inspect
import logging
from typing import Dict, List, Type

from webdriver_capabilities.browsers.base import Browser
from webdriver_capabilities.browsers.chrome import Chrome
from webdriver_capabilities.browsers.edge import Edge
from webdriver_capabilities.browsers.firefox import Firefox
from webdriver_capabilities.browsers.remote import Remote
from webdriver_capabilities.browsers.safari import Safari
from webdriver_capabilities.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_BROWSERS: Dict[str, Type[Browser]] = {}


def register_browser(browser_class: Type[Browser]) -> Type[Browser]:
    """
    Register a browser variant under its ``spec.name``.

    Usable as a class decorator. Abstract classes (e.g. a variant that does
    not implement ``run``) and duplicate names are rejected.

    Raises:
        ConfigurationError: if the class cannot be registered
    """
    if not (inspect.isclass(browser_class) and issubclass(browser_class, Browser)):
        raise ConfigurationError(f"{browser_class!r} is not a Browser subclass")

    if inspect.isabstract(browser_class):
        missing = ", ".join(sorted(browser_class.__abstractmethods__))
        raise ConfigurationError(
            f"Browser variant {browser_class.__name__} is incomplete",
            details=f"Missing implementation of: {missing}",
            recoverable=False,
        )

    name = browser_class.spec.name
    existing = _BROWSERS.get(name)
    if existing is not None and existing is not browser_class:
        raise ConfigurationError(
            f"Browser variant '{name}' is already registered by {existing.__name__}"
        )

    _BROWSERS[name] = browser_class
    logger.debug(f"Registered browser variant: {name}")
    return browser_class


def get_browser_class(name: str) -> Type[Browser]:
    """Look up a registered variant by name (case-insensitive)."""
    try:
        return _BROWSERS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown browser '{name}'",
            details=f"Available browsers: {', '.join(available_browsers())}",
        )


def create_browser(name: str, **kwargs) -> Browser:
    """Instantiate a registered variant; ``kwargs`` go to its constructor."""
    return get_browser_class(name)(**kwargs)


def available_browsers() -> List[str]:
    return sorted(_BROWSERS)


for _browser_class in (Chrome, Firefox, Safari, Edge, Remote):
    register_browser(_browser_class)
