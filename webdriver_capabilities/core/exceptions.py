"""Custom exceptions for the webdriver capabilities layer."""

from typing import Optional


class WebDriverCapabilitiesError(Exception):
    """Base exception for all capability and driver launch errors."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        recoverable: bool = True
    ):
        self.message = message
        self.details = details
        self.recoverable = recoverable
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(WebDriverCapabilitiesError):
    """A browser variant was configured in a way it does not support."""
    pass


class PathError(WebDriverCapabilitiesError):
    """A capability path is malformed or cannot be walked."""

    def __init__(
        self,
        path: str,
        message: Optional[str] = None,
        **kwargs
    ):
        self.path = path
        msg = message or f"Invalid capability path: {path!r}"
        super().__init__(msg, recoverable=False, **kwargs)


class ProcessLaunchError(WebDriverCapabilitiesError):
    """Errors raised while starting a driver executable."""

    def __init__(
        self,
        executable: Optional[str],
        message: str,
        **kwargs
    ):
        self.executable = executable
        super().__init__(message, **kwargs)


class SpawnFailureError(ProcessLaunchError):
    """The driver executable is missing or not permitted to run."""

    def __init__(self, executable: Optional[str], reason: str, **kwargs):
        self.reason = reason
        super().__init__(
            executable,
            f"Could not start driver '{executable}': {reason}",
            recoverable=False,
            **kwargs
        )


class EarlyExitError(ProcessLaunchError):
    """The driver process terminated before it became ready."""

    def __init__(
        self,
        executable: Optional[str],
        returncode: Optional[int],
        **kwargs
    ):
        self.returncode = returncode
        super().__init__(
            executable,
            f"Driver '{executable}' exited with code {returncode} before becoming ready",
            **kwargs
        )


class ReadinessTimeoutError(ProcessLaunchError):
    """The driver did not accept connections within the allowed time."""

    def __init__(
        self,
        executable: Optional[str],
        timeout: float,
        port: Optional[int] = None,
        **kwargs
    ):
        self.timeout = timeout
        self.port = port
        super().__init__(
            executable,
            f"Driver '{executable}' was not ready on port {port} after {timeout}s",
            **kwargs
        )
