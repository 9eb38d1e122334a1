"""
Configuration management for Typing Tug.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from typing_tug.gameplay.constants import MATCH_DURATION_MS, TICK_MS


class Settings(BaseSettings):
    """Application settings loaded from TYPING_TUG_* environment variables."""

    # Simulation
    tick_rate_ms: int = Field(
        default=TICK_MS,
        gt=0,
        description="Milliseconds of game time advanced per tick"
    )
    match_duration_ms: int = Field(
        default=MATCH_DURATION_MS,
        gt=0,
        description="Length of a match in milliseconds"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for word selection. Unset means a fresh random sequence"
    )

    # Logging
    log_level: str = Field(default="INFO")

    # Window
    window_width: int = Field(default=1000, gt=0)
    window_height: int = Field(default=600, gt=0)
    fps: int = Field(default=60, gt=0)
    font_name: Optional[str] = Field(
        default=None,
        description="System font for all text. Unset uses pygame's default font"
    )

    class Config:
        env_prefix = "TYPING_TUG_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    """
    return Settings()
