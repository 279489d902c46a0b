"""Tests for the browser variant registry."""
import pytest

from webdriver_capabilities.browsers import Chrome, Remote
from webdriver_capabilities.browsers.base import Browser, VariantSpec
from webdriver_capabilities.browsers.registry import (
    available_browsers,
    create_browser,
    get_browser_class,
    register_browser,
)
from webdriver_capabilities.core.exceptions import ConfigurationError


def test_builtin_browsers_registered():
    assert available_browsers() == ["chrome", "edge", "firefox", "remote", "safari"]


def test_lookup_is_case_insensitive():
    assert get_browser_class("Chrome") is Chrome


def test_create_browser_passes_kwargs():
    remote = create_browser("remote", host="grid.local", port=5555)
    assert isinstance(remote, Remote)
    assert remote.url == "http://grid.local:5555"


def test_unknown_browser():
    with pytest.raises(ConfigurationError) as exc_info:
        create_browser("netscape")
    assert "chrome" in exc_info.value.details


def test_register_rejects_variant_without_run():
    class NoRun(Browser):
        spec = VariantSpec(name="norun")

    with pytest.raises(ConfigurationError) as exc_info:
        register_browser(NoRun)
    assert "run" in exc_info.value.details
    assert "norun" not in available_browsers()


def test_register_rejects_duplicate_name():
    class OtherChrome(Browser):
        spec = VariantSpec(name="chrome")

        async def run(self, options=None):
            raise NotImplementedError

    with pytest.raises(ConfigurationError):
        register_browser(OtherChrome)
    assert get_browser_class("chrome") is Chrome


def test_register_rejects_non_browser():
    with pytest.raises(ConfigurationError):
        register_browser(dict)


def test_reregistering_same_class_is_allowed():
    assert register_browser(Chrome) is Chrome
