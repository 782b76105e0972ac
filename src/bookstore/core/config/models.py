"""
Configuration models for Bookstore.

Pydantic models that validate the TOML configuration file, plus the
environment-variable settings that can override it.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bookstore.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    MIN_LOG_FILE_SIZE_BYTES,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class ShellConfig(BaseModel):
    """Interactive shell configuration."""

    show_welcome: bool = Field(
        False, description="Print a welcome banner before the first menu"
    )


class GeneralConfig(BaseModel):
    """General application configuration."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    shell: ShellConfig = Field(
        default_factory=ShellConfig, description="Interactive shell configuration"
    )


class BookstoreConfig(BaseModel):
    """Main Bookstore configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class BookstoreSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    bookstore_logging_level: Optional[str] = Field(
        None, alias="BOOKSTORE_LOGGING_LEVEL"
    )
    bookstore_logging_format: Optional[str] = Field(
        None, alias="BOOKSTORE_LOGGING_FORMAT"
    )
    bookstore_logging_output: Optional[str] = Field(
        None, alias="BOOKSTORE_LOGGING_OUTPUT"
    )
    bookstore_logging_file_path: Optional[str] = Field(
        None, alias="BOOKSTORE_LOGGING_FILE_PATH"
    )
    bookstore_show_welcome: Optional[bool] = Field(
        None, alias="BOOKSTORE_SHOW_WELCOME"
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")
