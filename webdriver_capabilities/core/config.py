"""Configuration management for driver launching and logging."""

import os
from typing import Dict, Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Environment variables that override the default executable of each variant
EXECUTABLE_ENV_VARS: Dict[str, str] = {
    "chrome": "CHROMEDRIVER_PATH",
    "firefox": "GECKODRIVER_PATH",
    "safari": "SAFARIDRIVER_PATH",
    "edge": "MSEDGEDRIVER_PATH",
}


class DriverConfig(BaseModel):
    """Driver process configuration."""

    host: str = Field(
        default="127.0.0.1",
        description="Host the launched driver is checked on"
    )
    ready_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for the driver to accept connections"
    )
    poll_interval: float = Field(
        default=0.1,
        gt=0,
        description="Seconds between readiness checks"
    )
    terminate_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait after SIGTERM before killing the driver"
    )
    executables: Dict[str, str] = Field(
        default_factory=dict,
        description="Per-variant driver executable overrides"
    )

    def executable_for(self, name: str) -> Optional[str]:
        """Get the configured executable override for a variant name."""
        return self.executables.get(name)

    @classmethod
    def from_env(cls) -> "DriverConfig":
        """Create config from environment variables."""
        executables = {}
        for name, env_var in EXECUTABLE_ENV_VARS.items():
            value = os.getenv(env_var)
            if value:
                executables[name] = value

        return cls(
            host=os.getenv("WEBDRIVER_HOST", "127.0.0.1"),
            ready_timeout=float(os.getenv("WEBDRIVER_READY_TIMEOUT", "10.0")),
            poll_interval=float(os.getenv("WEBDRIVER_POLL_INTERVAL", "0.1")),
            terminate_timeout=float(os.getenv("WEBDRIVER_TERMINATE_TIMEOUT", "5.0")),
            executables=executables,
        )


class Config(BaseModel):
    """Main configuration container."""

    driver: DriverConfig = Field(default_factory=DriverConfig.from_env)

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path"
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON formatted logs"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Create complete config from environment variables."""
        return cls(
            driver=DriverConfig.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE"),
            json_logs=os.getenv("LOG_JSON", "false").lower() == "true",
        )

