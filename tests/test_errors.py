"""Tests for the exception hierarchy."""
from webdriver_capabilities.core.exceptions import (
    ConfigurationError,
    EarlyExitError,
    PathError,
    ProcessLaunchError,
    ReadinessTimeoutError,
    SpawnFailureError,
    WebDriverCapabilitiesError,
)


def test_hierarchy():
    assert issubclass(ConfigurationError, WebDriverCapabilitiesError)
    assert issubclass(PathError, WebDriverCapabilitiesError)
    for error_class in (SpawnFailureError, EarlyExitError, ReadinessTimeoutError):
        assert issubclass(error_class, ProcessLaunchError)


def test_details_in_message():
    err = ConfigurationError("Vendor-specific options unsupported", details="safari")
    assert str(err) == "Vendor-specific options unsupported\nDetails: safari"


def test_path_error_default_message():
    err = PathError("a..b")
    assert err.path == "a..b"
    assert "a..b" in str(err)
    assert not err.recoverable


def test_launch_errors_carry_context():
    assert SpawnFailureError("chromedriver", "executable not found").reason == "executable not found"
    assert EarlyExitError("geckodriver", 1).returncode == 1
    timeout = ReadinessTimeoutError("safaridriver", 2.5, port=4444)
    assert timeout.timeout == 2.5
    assert "4444" in str(timeout)
    assert timeout.executable == "safaridriver"
