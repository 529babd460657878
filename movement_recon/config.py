"""Configuration management for movement-recon.

Only the ambient settings (where the page comes from, how logs look) are
configurable. The reconciliation thresholds live as constants in
``movement_recon.reconcile.window``.
"""

from dataclasses import dataclass, field
from pathlib import Path

from movement_recon.exceptions import ConfigurationError

DEFAULT_URL = "https://tck.gorselpanel.com/task/hareket.html"


@dataclass
class FetchConfig:
    """HTTP fetch configuration."""

    url: str = DEFAULT_URL
    timeout_seconds: float = 30.0
    user_agent: str = "movement-recon/0.1"

    @property
    def headers(self) -> dict[str, str]:
        """Get request headers."""
        return {"User-Agent": self.user_agent}


@dataclass
class LoggingConfig:
    """Log output configuration."""

    level: str = "INFO"
    format_type: str = "standard"


@dataclass
class ReconConfig:
    """Main configuration for movement-recon."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source_file: Path | None = None

    @classmethod
    def from_env(cls) -> "ReconConfig":
        """Create config from environment variables."""
        import os

        timeout_str = os.getenv("FETCH_TIMEOUT", "30")
        try:
            timeout = float(timeout_str)
        except ValueError as e:
            raise ConfigurationError(f"FETCH_TIMEOUT must be a number, got {timeout_str!r}") from e
        if timeout <= 0:
            raise ConfigurationError(f"FETCH_TIMEOUT must be positive, got {timeout}")

        fetch = FetchConfig(
            url=os.getenv("MOVEMENT_URL", DEFAULT_URL),
            timeout_seconds=timeout,
        )

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=log_format,
        )

        source_file = os.getenv("SOURCE_FILE")

        return cls(
            fetch=fetch,
            logging=logging_config,
            source_file=Path(source_file) if source_file else None,
        )
