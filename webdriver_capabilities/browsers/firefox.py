"""Firefox browser variant, driven by geckodriver."""

from typing import Optional

from webdriver_capabilities.browsers.base import Browser, VariantSpec
from webdriver_capabilities.launcher.process import DriverProcess
from webdriver_capabilities.launcher.views import LaunchOptions


class Firefox(Browser):
    """Mozilla Firefox through ``geckodriver``; options under ``moz:firefoxOptions``."""

    spec = VariantSpec(
        name="firefox",
        specific_key="moz:firefoxOptions",
        default_executable="geckodriver",
        always_match=(("browserName", "firefox"),),
    )

    async def run(self, options: Optional[LaunchOptions] = None) -> DriverProcess:
        options = self.resolve_options(options)
        return await self.run_driver(["--port", str(options.port)], options)
