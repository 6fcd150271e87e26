"""Configuration management for hyperdoc."""

import os
from dataclasses import dataclass, field


@dataclass
class HTTPConfig:
    """Settings used when documents are fetched over HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    follow_redirects: bool = True
    user_agent: str = "hyperdoc/1.0"
    accept: str = "application/json"


@dataclass
class LoggingConfig:
    """Logging sink configuration."""

    level: str = "WARNING"
    # Include module:function:line in each record
    verbose: bool = False


@dataclass
class Config:
    """Main application configuration."""

    http: HTTPConfig = field(default_factory=HTTPConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        if level := os.environ.get("HYPERDOC_LOG_LEVEL"):
            config.logging.level = level.upper()

        if timeout := os.environ.get("HYPERDOC_HTTP_TIMEOUT"):
            config.http.timeout_seconds = float(timeout)
        if retries := os.environ.get("HYPERDOC_HTTP_MAX_RETRIES"):
            config.http.max_retries = int(retries)
        if user_agent := os.environ.get("HYPERDOC_USER_AGENT"):
            config.http.user_agent = user_agent

        return config
