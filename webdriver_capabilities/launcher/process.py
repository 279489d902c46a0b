"""Driver process launching and readiness detection."""

import asyncio
import logging
import os
import socket
from typing import Callable, Dict, List, Optional

from webdriver_capabilities.core.config import DriverConfig
from webdriver_capabilities.core.exceptions import (
    EarlyExitError,
    ReadinessTimeoutError,
    SpawnFailureError,
)
from webdriver_capabilities.core.logging import log_driver_event
from webdriver_capabilities.launcher.views import LaunchOptions, StdioMode

logger = logging.getLogger(__name__)


def find_free_port(host: str = "127.0.0.1") -> int:
    """Ask the OS for a port that is currently free on ``host``."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((host, 0))
        return sock.getsockname()[1]


async def is_listening(host: str, port: int) -> bool:
    """Check whether something accepts TCP connections on ``host:port``."""
    try:
        _, writer = await asyncio.open_connection(host, port)
    except OSError:
        return False
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass
    return True


class DriverProcess:
    """
    Handle on a running driver executable.

    Returned by ``launch_driver`` once the driver accepts connections.
    The handle is the only way to stop the driver: nothing reaps it
    automatically.

    In ``StdioMode.PIPE`` the driver blocks once an unread pipe fills up.
    Either read ``stdout`` and ``stderr`` yourself or call
    ``start_draining`` (``LaunchOptions.drain_output`` does this at spawn
    time) to forward the output to the log.
    """

    def __init__(
        self,
        process: asyncio.subprocess.Process,
        executable: str,
        host: str,
        port: int,
        terminate_timeout: float = 5.0,
    ):
        self._process = process
        self.executable = executable
        self.host = host
        self.port = port
        self.terminate_timeout = terminate_timeout
        self._drain_tasks: List[asyncio.Task] = []

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def returncode(self) -> Optional[int]:
        return self._process.returncode

    @property
    def is_running(self) -> bool:
        return self._process.returncode is None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def stdout(self) -> Optional[asyncio.StreamReader]:
        return self._process.stdout

    @property
    def stderr(self) -> Optional[asyncio.StreamReader]:
        return self._process.stderr

    @property
    def draining(self) -> bool:
        return bool(self._drain_tasks)

    def start_draining(self) -> None:
        """Read piped output in background tasks and log it line by line."""
        if self._drain_tasks:
            return
        for name, stream in (("stdout", self.stdout), ("stderr", self.stderr)):
            if stream is not None:
                self._drain_tasks.append(asyncio.create_task(self._drain(name, stream)))

    async def _drain(self, name: str, stream: asyncio.StreamReader) -> None:
        while True:
            line = await stream.readline()
            if not line:
                return
            logger.debug(f"{self.executable} {name}: {line.decode('utf-8', errors='replace').rstrip()}")

    def stop_draining(self) -> None:
        """Cancel the background readers started by ``start_draining``."""
        for task in self._drain_tasks:
            task.cancel()
        self._drain_tasks = []

    async def read_stderr(self) -> Optional[str]:
        """Read whatever is left on a piped stderr; None if it is not piped or drained."""
        if self.stderr is None or self.draining:
            return None
        data = await self.stderr.read()
        return data.decode("utf-8", errors="replace").strip() or None

    async def wait(self) -> int:
        """Wait for the driver to exit and return its exit code."""
        return await self._process.wait()

    async def terminate(self, timeout: Optional[float] = None) -> Optional[int]:
        """
        Stop the driver: SIGTERM first, SIGKILL if it outlives ``timeout``.

        Returns:
            The exit code of the driver
        """
        if not self.is_running:
            self.stop_draining()
            return self.returncode

        timeout = timeout if timeout is not None else self.terminate_timeout
        try:
            self._process.terminate()
        except ProcessLookupError:
            return await self._process.wait()

        try:
            returncode = await asyncio.wait_for(self._process.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Driver {self.executable} ignored SIGTERM, killing pid {self.pid}")
            try:
                self._process.kill()
            except ProcessLookupError:
                pass
            returncode = await self._process.wait()

        self.stop_draining()
        log_driver_event("terminated", executable=self.executable, pid=self.pid, returncode=returncode)
        return returncode

    async def __aenter__(self) -> "DriverProcess":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.terminate()

    def __repr__(self) -> str:
        state = "running" if self.is_running else f"exited({self.returncode})"
        return f"DriverProcess(executable={self.executable!r}, pid={self.pid}, port={self.port}, {state})"


def build_environment(options: LaunchOptions) -> Dict[str, str]:
    """Build the environment passed to the driver process."""
    if options.inherit_env:
        return {**os.environ, **options.env}
    return dict(options.env)


async def wait_until_ready(
    driver: DriverProcess,
    timeout: float,
    poll_interval: float = 0.1,
) -> DriverProcess:
    """
    Wait until the driver accepts connections on its port.

    Raises:
        EarlyExitError: if the driver exits first
        ReadinessTimeoutError: if ``timeout`` seconds pass first; the driver
            is terminated before raising
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout

    while True:
        if not driver.is_running:
            details = await driver.read_stderr()
            driver.stop_draining()
            log_driver_event("exited_early", executable=driver.executable, returncode=driver.returncode)
            raise EarlyExitError(driver.executable, driver.returncode, details=details)

        if await is_listening(driver.host, driver.port):
            log_driver_event("ready", executable=driver.executable, pid=driver.pid, port=driver.port)
            return driver

        if loop.time() >= deadline:
            await driver.terminate()
            raise ReadinessTimeoutError(driver.executable, timeout, port=driver.port)

        await asyncio.sleep(poll_interval)


async def launch_driver(
    executable: Optional[str],
    command_args: List[str],
    options: Optional[LaunchOptions] = None,
    config: Optional[DriverConfig] = None,
    on_spawn: Optional[Callable[[DriverProcess], None]] = None,
) -> DriverProcess:
    """
    Spawn a driver executable and wait for it to become ready.

    Args:
        executable: Path or name of the driver binary
        command_args: Arguments placed right after the executable (the port
            flag is expected to be among them)
        options: Launch options; ``options.port`` must already be resolved
        config: Driver configuration supplying timeouts and the readiness host
        on_spawn: Called with the handle as soon as the process exists, so
            the caller can still terminate it if the wait is cancelled

    Returns:
        Handle on the ready driver process

    Raises:
        SpawnFailureError: the executable is missing or cannot be run
        EarlyExitError: the driver exited before accepting connections
        ReadinessTimeoutError: the driver never accepted connections
    """
    options = options or LaunchOptions()
    config = config or DriverConfig.from_env()

    if not executable:
        raise SpawnFailureError(executable, "no driver executable configured")
    if options.port is None:
        raise SpawnFailureError(executable, "no port resolved for the driver")

    host = options.host or config.host
    timeout = options.ready_timeout or config.ready_timeout
    poll_interval = options.poll_interval or config.poll_interval
    stdio = options.stdio.to_subprocess()
    # stderr is always captured in pipe mode so early exits can report it
    stderr = asyncio.subprocess.PIPE if options.stdio is StdioMode.PIPE else stdio

    argv = [executable, *command_args]
    logger.info(f"Launching driver: {' '.join(argv)}")

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=stdio,
            stderr=stderr,
            env=build_environment(options),
        )
    except FileNotFoundError:
        raise SpawnFailureError(executable, "executable not found")
    except PermissionError:
        raise SpawnFailureError(executable, "permission denied")
    except OSError as e:
        raise SpawnFailureError(executable, str(e))

    driver = DriverProcess(
        process,
        executable,
        host,
        options.port,
        terminate_timeout=config.terminate_timeout,
    )
    log_driver_event("spawned", executable=executable, pid=driver.pid, port=driver.port)

    if options.drain_output and options.stdio is StdioMode.PIPE:
        driver.start_draining()

    if on_spawn is not None:
        on_spawn(driver)

    await wait_until_ready(driver, timeout, poll_interval)
    logger.info(f"Driver ready at {driver.url} (pid {driver.pid})")
    return driver
