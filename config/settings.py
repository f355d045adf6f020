#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TITLE, DEFAULT_FILENAME, OUTPUT_DIR, LOG_LEVEL, LOG_FILE

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings, read from GYMAI_* environment variables or .env"""

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        env_prefix="GYMAI_",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields from .env that aren't defined in model
    )

    # ========== Export ==========
    default_title: str = DEFAULT_TITLE
    default_filename: str = DEFAULT_FILENAME

    # ========== Directories ==========
    output_dir: Path = BASE_DIR / OUTPUT_DIR

    # ========== Logging ==========
    log_level: LogLevel = LOG_LEVEL
    log_file: str = LOG_FILE  # empty: console only

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    def resolve_output_path(self, output: str = None) -> Path:
        """Return the target PDF path, defaulting to output_dir/default_filename"""
        if output:
            return Path(output)
        return self.output_dir / self.default_filename


# Global settings instance
settings = Settings()
