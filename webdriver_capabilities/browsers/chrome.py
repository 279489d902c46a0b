"""Chrome browser variant, driven by chromedriver."""

from typing import Optional

from webdriver_capabilities.browsers.base import Browser, VariantSpec
from webdriver_capabilities.launcher.process import DriverProcess
from webdriver_capabilities.launcher.views import LaunchOptions


class Chrome(Browser):
    """
    Google Chrome through ``chromedriver``.

    Vendor options live under ``chromeOptions``; ``w3c`` is switched on so
    chromedriver speaks the W3C protocol::

        chrome = Chrome()
        chrome.set_specific_key("args", ["--headless", "--disable-gpu"])
        chrome.set_specific_key("binary", "/opt/google/chrome/chrome")
    """

    spec = VariantSpec(
        name="chrome",
        specific_key="chromeOptions",
        default_executable="chromedriver",
        always_match=(("browserName", "chrome"),),
        specific=(("w3c", True),),
    )

    async def run(self, options: Optional[LaunchOptions] = None) -> DriverProcess:
        options = self.resolve_options(options)
        return await self.run_driver([f"--port={options.port}"], options)
