"""
Rat and Warehouse Keepers - Application Settings

Loads configuration from environment variables using Pydantic Settings,
and configures logging for the application.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

from src.engine.base import BOARD_SIZE, MAX_TURNS, GameConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    board_size: int = BOARD_SIZE
    max_turns: int = MAX_TURNS

    # Application
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def to_game_config(self) -> GameConfig:
        """Build a validated game configuration."""
        return GameConfig(board_size=self.board_size, max_turns=self.max_turns)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Set the root log level from settings; debug mode forces DEBUG."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level)
