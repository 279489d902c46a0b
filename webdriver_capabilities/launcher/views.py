"""Data models for driver process launching."""

import asyncio
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class StdioMode(str, Enum):
    """How the driver's standard streams are wired."""
    INHERIT = "inherit"
    PIPE = "pipe"
    IGNORE = "ignore"

    def to_subprocess(self) -> Optional[int]:
        """Map to the value expected by ``asyncio.create_subprocess_exec``."""
        if self is StdioMode.PIPE:
            return asyncio.subprocess.PIPE
        if self is StdioMode.IGNORE:
            return asyncio.subprocess.DEVNULL
        return None


class LaunchOptions(BaseModel):
    """Options for starting a driver executable."""

    port: Optional[int] = Field(
        default=None,
        ge=1,
        le=65535,
        description="Port the driver listens on; a free port is picked if omitted"
    )
    args: List[str] = Field(
        default_factory=list,
        description="Extra command-line arguments, appended after the port flag"
    )
    env: Dict[str, str] = Field(
        default_factory=dict,
        description="Environment variables for the driver process"
    )
    inherit_env: bool = Field(
        default=True,
        description="Merge env over the current process environment"
    )
    stdio: StdioMode = Field(
        default=StdioMode.IGNORE,
        description="How to wire the child's standard streams"
    )
    drain_output: bool = Field(
        default=False,
        description="In pipe mode, log the driver's output from background readers "
                    "instead of leaving the pipes for the caller to read"
    )
    host: Optional[str] = Field(
        default=None,
        description="Host checked for readiness (defaults to DriverConfig.host)"
    )
    ready_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds to wait for readiness (defaults to DriverConfig.ready_timeout)"
    )
    poll_interval: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds between readiness checks"
    )
