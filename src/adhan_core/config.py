"""Configuration management."""

import logging
import os
from dataclasses import dataclass
from typing import Self


@dataclass
class AppConfig:
    """Application configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Calculation defaults
    default_method: str = "muslimWorldLeague"
    default_madhab: str = "shafi"
    locale: str = "tr_TR"

    @classmethod
    def from_env(cls) -> Self:
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("ADHAN_CORE_HOST", "0.0.0.0"),
            port=int(os.getenv("ADHAN_CORE_PORT", "8080")),
            log_level=os.getenv("ADHAN_CORE_LOG_LEVEL", "INFO"),
            default_method=os.getenv("ADHAN_CORE_DEFAULT_METHOD", "muslimWorldLeague"),
            default_madhab=os.getenv("ADHAN_CORE_DEFAULT_MADHAB", "shafi"),
            locale=os.getenv("ADHAN_CORE_LOCALE", "tr_TR"),
        )


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get application configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def setup_logging(level: str = "INFO") -> None:
    """Setup application logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
