"""Base browser variant owning a capability store and a driver process."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Dict, List, Optional, Tuple, Union

from webdriver_capabilities.capabilities.store import CapabilityStore
from webdriver_capabilities.core.config import DriverConfig
from webdriver_capabilities.core.exceptions import ConfigurationError
from webdriver_capabilities.launcher.process import (
    DriverProcess,
    find_free_port,
    launch_driver,
)
from webdriver_capabilities.launcher.views import LaunchOptions

logger = logging.getLogger(__name__)

# Capability defaults, as (path, value) pairs
Defaults = Tuple[Tuple[str, Any], ...]


@dataclass(frozen=True)
class VariantSpec:
    """Description of a browser variant."""

    name: str
    specific_key: Optional[str] = None
    default_executable: Optional[str] = None
    always_match: Defaults = field(default_factory=tuple)
    specific: Defaults = field(default_factory=tuple)


class Browser(ABC):
    """
    Base class for all browser variants such as ``Chrome``, ``Firefox``,
    ``Safari``, ``Edge`` and ``Remote``.

    A browser object does two things:

    * builds the session parameters sent to the webdriver when creating
      a session (see ``CapabilityStore``);
    * runs the matching webdriver executable (``chromedriver``,
      ``geckodriver``, ...).

    Subclasses set ``spec`` and implement ``run``. For example ``Chrome``
    starts out with::

        {
          "capabilities": {
            "alwaysMatch": {
              "browserName": "chrome",
              "chromeOptions": {"w3c": True}
            },
            "firstMatch": []
          }
        }

    Configuration methods return the browser so calls can be chained::

        browser = Chrome()
        browser.set_always_match_key("timeouts.implicit", 10000) \\
               .set_specific_key("args", ["--headless"])
    """

    spec: VariantSpec = VariantSpec(name="browser")

    def __init__(self, config: Optional[DriverConfig] = None):
        self.config = config or DriverConfig.from_env()
        self._store = CapabilityStore(self.spec.specific_key)
        self._executable: Optional[str] = (
            self.config.executable_for(self.spec.name) or self.spec.default_executable
        )
        self._process: Optional[DriverProcess] = None
        self.configure_defaults(self._store)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def specific_key(self) -> Optional[str]:
        return self.spec.specific_key

    def configure_defaults(self, store: CapabilityStore) -> None:
        """Seed the variant's default capabilities into ``store``."""
        for path, value in self.spec.always_match:
            store.set_always_match_key(path, value)
        for path, value in self.spec.specific:
            store.set_specific_key(path, value, force=False)

    # Configuration

    def set_always_match_key(self, path: str, value: Any, force: bool = False) -> "Browser":
        """
        Set a capability in ``alwaysMatch``. Existing values are kept unless
        ``force`` is set.

        Commonly used paths: ``browserName``, ``browserVersion``,
        ``platformName``, ``acceptInsecureCerts``, ``pageLoadStrategy``
        (``none``, ``eager`` or ``normal``), ``proxy``, ``setWindowRect``,
        ``timeouts`` (``implicit``, ``pageLoad``, ``script``) and
        ``unhandledPromptBehavior``.
        """
        self._store.set_always_match_key(path, value, force)
        return self

    def add_first_match(self, name: str, value: Any, force: bool = False) -> "Browser":
        self._store.add_first_match(name, value, force)
        return self

    def set_root_key(self, path: str, value: Any, force: bool = True) -> "Browser":
        self._store.set_root_key(path, value, force)
        return self

    def set_specific_key(self, path: str, value: Any, force: bool = True) -> "Browser":
        self._store.set_specific_key(path, value, force)
        return self

    def get_session_parameters(self) -> Dict[str, Any]:
        """Return a snapshot of the parameters for a new session request."""
        return self._store.get_session_parameters()

    @property
    def capabilities(self) -> CapabilityStore:
        return self._store

    # Driver executable

    def set_executable(self, executable: Union[str, PathLike]) -> "Browser":
        """Set the driver executable. It is only checked when the driver is run."""
        self._executable = str(executable)
        return self

    @property
    def executable(self) -> Optional[str]:
        return self._executable

    @property
    def process(self) -> Optional[DriverProcess]:
        """The driver process started by the last ``run`` call, if any."""
        return self._process

    @property
    def launched(self) -> bool:
        return self._process is not None and self._process.is_running

    def resolve_options(self, options: Optional[LaunchOptions] = None) -> LaunchOptions:
        """Fill in the port of ``options`` if the caller left it out."""
        options = options or LaunchOptions()
        if options.port is None:
            host = options.host or self.config.host
            options = options.model_copy(update={"port": find_free_port(host)})
        return options

    def ensure_not_launched(self) -> None:
        """
        Refuse to start a second driver while the first one is running.

        Raises:
            ConfigurationError: if a driver started by ``run`` is still running
        """
        if self.launched:
            raise ConfigurationError(
                f"{self.name} driver is already running",
                details=f"Call stop() before running it again: {self._process!r}",
            )

    def _remember_process(self, process) -> None:
        self._process = process

    async def run_driver(
        self,
        port_arguments: List[str],
        options: LaunchOptions,
    ) -> DriverProcess:
        """Start the local driver executable with the port flag and extra args."""
        self.ensure_not_launched()
        command_args = list(port_arguments) + list(options.args)
        logger.debug(f"Starting {self.name} driver on port {options.port}")
        return await launch_driver(
            self._executable,
            command_args,
            options,
            config=self.config,
            on_spawn=self._remember_process,
        )

    @abstractmethod
    async def run(self, options: Optional[LaunchOptions] = None) -> Any:
        """
        Run the webdriver executable for this browser.

        Args:
            options: Port, extra arguments, environment and stdio mode

        Returns:
            A handle whose ``terminate()`` stops the driver

        Raises:
            ProcessLaunchError: if the driver cannot be started or never
                becomes ready
            ConfigurationError: if the driver from a previous ``run`` is
                still running
        """

    async def stop(self) -> None:
        """Terminate the driver started by ``run``, if it is still running."""
        if self._process is not None:
            await self._process.terminate()

    async def __aenter__(self) -> "Browser":
        await self.run()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(executable={self._executable!r})"
