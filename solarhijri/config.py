"""
Library configuration
Defaults loaded from environment variables
"""
import os

from pydantic import BaseModel, Field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # ==================== Time zone ====================
    # Zone used when a caller passes none: an IANA key or a fixed offset
    TIMEZONE: str = Field(default_factory=lambda: os.getenv("SOLARHIJRI_TIMEZONE", "UTC"))

    # ==================== Formatting ====================
    # Render digits with the locale's glyphs by default
    DECORATE: bool = Field(default_factory=lambda: _env_flag("SOLARHIJRI_DECORATE"))

    # ==================== Conversion ====================
    # Read years below 1300 as truncated (83 -> 1383)
    EXPAND_SHORT_YEARS: bool = Field(
        default_factory=lambda: _env_flag("SOLARHIJRI_EXPAND_SHORT_YEARS")
    )


settings = Settings()
