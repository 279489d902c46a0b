"""Safari browser variant, driven by safaridriver."""

from typing import Optional

from webdriver_capabilities.browsers.base import Browser, VariantSpec
from webdriver_capabilities.launcher.process import DriverProcess
from webdriver_capabilities.launcher.views import LaunchOptions


class Safari(Browser):
    """Apple Safari through ``safaridriver``. Safari has no vendor options object."""

    spec = VariantSpec(
        name="safari",
        default_executable="safaridriver",
        always_match=(("browserName", "safari"),),
    )

    async def run(self, options: Optional[LaunchOptions] = None) -> DriverProcess:
        options = self.resolve_options(options)
        return await self.run_driver(["--port", str(options.port)], options)
