"""Remote variant for a webdriver endpoint that is already running elsewhere."""

import asyncio
import logging
from typing import Optional

from webdriver_capabilities.browsers.base import Browser, VariantSpec
from webdriver_capabilities.core.config import DriverConfig
from webdriver_capabilities.core.exceptions import ReadinessTimeoutError
from webdriver_capabilities.core.logging import log_driver_event
from webdriver_capabilities.launcher.process import is_listening
from webdriver_capabilities.launcher.views import LaunchOptions

logger = logging.getLogger(__name__)


class RemoteEndpoint:
    """
    Handle on a remote webdriver. Nothing is spawned, so ``terminate`` only
    marks the endpoint as released.
    """

    def __init__(self, host: str, port: int, url: str):
        self.host = host
        self.port = port
        self.url = url
        self._stopped = False

    @property
    def is_running(self) -> bool:
        return not self._stopped

    async def terminate(self, timeout: Optional[float] = None) -> None:
        self._stopped = True
        logger.debug(f"Remote endpoint {self.url} is not managed locally, nothing to stop")

    def __repr__(self) -> str:
        return f"RemoteEndpoint(url={self.url!r})"


class Remote(Browser):
    """
    A webdriver server reached over the network, e.g. a Selenium grid.

    ``run`` does not start anything: it checks that the endpoint accepts
    connections and fails with ``ReadinessTimeoutError`` otherwise.
    """

    spec = VariantSpec(name="remote")

    def __init__(
        self,
        host: str = "localhost",
        port: int = 4444,
        path_prefix: str = "",
        scheme: str = "http",
        config: Optional[DriverConfig] = None,
    ):
        super().__init__(config)
        self.host = host
        self.port = port
        self.path_prefix = path_prefix.strip("/")
        self.scheme = scheme

    @property
    def url(self) -> str:
        base = f"{self.scheme}://{self.host}:{self.port}"
        return f"{base}/{self.path_prefix}" if self.path_prefix else base

    async def run(self, options: Optional[LaunchOptions] = None) -> RemoteEndpoint:
        self.ensure_not_launched()
        options = options or LaunchOptions()
        timeout = options.ready_timeout or self.config.ready_timeout
        poll_interval = options.poll_interval or self.config.poll_interval

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while not await is_listening(self.host, self.port):
            if loop.time() >= deadline:
                raise ReadinessTimeoutError(self.url, timeout, port=self.port)
            await asyncio.sleep(poll_interval)

        endpoint = RemoteEndpoint(self.host, self.port, self.url)
        self._remember_process(endpoint)
        log_driver_event("remote_ready", url=self.url)
        return endpoint

    def __repr__(self) -> str:
        return f"Remote(url={self.url!r})"
