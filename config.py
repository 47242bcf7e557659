"""Application configuration with environment variable support."""

import logging
import os
from dataclasses import dataclass, field

from blackjack.config import GameConfig, env_flag

__all__ = ["AppConfig", "GameConfig", "config", "configure_logging"]


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: env_flag("DEBUG"))
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper()
    )


# Global configuration instance
config = AppConfig()


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Set up root logging for scripts driving the engine."""
    app_config = app_config or config
    level = logging.DEBUG if app_config.debug else app_config.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
