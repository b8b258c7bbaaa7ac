"""Configuration for applications embedding ringbuf."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .log import LOG_LEVELS, configure_logging

load_dotenv()

LOG_FORMATS = ("json", "console")


@dataclass
class BufferConfig:
    """Logging settings."""

    # Observability
    log_level: str = "info"
    log_format: str = "json"

    @classmethod
    def from_env(cls) -> "BufferConfig":
        """Load configuration from environment variables."""
        return cls(
            # RINGBUF_LOG_LEVEL wins over the generic LOG_LEVEL
            log_level=os.getenv("RINGBUF_LOG_LEVEL", os.getenv("LOG_LEVEL", "info")).lower(),
            log_format=os.getenv("RINGBUF_LOG_FORMAT", "json").lower(),
        )

    def validate(self) -> None:
        """Validate configuration."""
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"Invalid log format: {self.log_format}")


def configure_logging_from_env() -> BufferConfig:
    """Load, validate and apply the environment configuration.

    Returns:
        The configuration that was applied
    """
    config = BufferConfig.from_env()
    config.validate()
    configure_logging(config.log_level, json=config.log_format == "json")
    return config
