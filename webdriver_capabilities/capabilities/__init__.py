"""Capabilities module - session parameters document and path addressing."""

from webdriver_capabilities.capabilities.store import CapabilityStore
from webdriver_capabilities.capabilities.paths import (
    get_path,
    set_path,
    split_path,
)
from webdriver_capabilities.capabilities.views import (
    Capabilities,
    SessionParameters,
)

__all__ = [
    "CapabilityStore",
    "get_path",
    "set_path",
    "split_path",
    "Capabilities",
    "SessionParameters",
]
