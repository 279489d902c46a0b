"""Shared fixtures for the webdriver_capabilities tests."""
import stat
import sys
from pathlib import Path

import pytest

from webdriver_capabilities.core.config import DriverConfig

FAKE_DRIVER = Path(__file__).with_name("fake_driver.py")


@pytest.fixture
def driver_config():
    """Short timeouts so launcher tests finish quickly."""
    return DriverConfig(ready_timeout=5.0, poll_interval=0.05, terminate_timeout=2.0)


@pytest.fixture
def fake_driver(tmp_path):
    """An executable copy of fake_driver.py running under this interpreter."""
    script = tmp_path / "fake-driver"
    script.write_text(f"#!{sys.executable}\n" + FAKE_DRIVER.read_text(encoding="utf-8"), encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(script)


@pytest.fixture(autouse=True)
def clean_driver_env(monkeypatch):
    """Keep developer overrides out of the tests."""
    for var in (
        "CHROMEDRIVER_PATH",
        "GECKODRIVER_PATH",
        "SAFARIDRIVER_PATH",
        "MSEDGEDRIVER_PATH",
        "FAKE_DRIVER_MODE",
        "FAKE_DRIVER_ARGV_FILE",
        "FAKE_DRIVER_CHATTY",
    ):
        monkeypatch.delenv(var, raising=False)
