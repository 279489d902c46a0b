"""Edge browser variant, driven by msedgedriver."""

from typing import Optional

from webdriver_capabilities.browsers.base import Browser, VariantSpec
from webdriver_capabilities.launcher.process import DriverProcess
from webdriver_capabilities.launcher.views import LaunchOptions


class Edge(Browser):
    """Microsoft Edge through ``msedgedriver``; options under ``ms:edgeOptions``."""

    spec = VariantSpec(
        name="edge",
        specific_key="ms:edgeOptions",
        default_executable="msedgedriver",
        always_match=(("browserName", "MicrosoftEdge"),),
    )

    async def run(self, options: Optional[LaunchOptions] = None) -> DriverProcess:
        options = self.resolve_options(options)
        return await self.run_driver([f"--port={options.port}"], options)
