"""Configuration management for the console processors."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from msbuild_console.console.encoding import resolve_encoding


class ConsoleSettings(BaseSettings):
    """Console stream processing settings."""

    model_config = SettingsConfigDict(env_prefix="MSBUILD_CONSOLE_")

    encoding: str = Field(
        default="utf-8",
        description="Encoding of the MSBuild console output",
    )
    chunk_size: int = Field(
        default=8192,
        gt=0,
        description="Number of bytes read from the input per write",
    )
    unstable_if_warnings: bool = Field(
        default=False,
        description="Mark the build unstable when the summary reports warnings",
    )
    continue_on_build_failure: bool = Field(
        default=False,
        description="Do not fail the build step on a non-zero MSBuild exit code",
    )

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        return resolve_encoding(value)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Log message format",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path (None for console only)",
    )
    rich_console: bool = Field(
        default=True,
        description="Use rich console for prettier output",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    console: ConsoleSettings = Field(default_factory=ConsoleSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables and .env file."""
        return cls(
            console=ConsoleSettings(),
            logging=LoggingSettings(),
        )


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure_settings(settings: Settings) -> None:
    """Override the global settings instance."""
    global _settings
    _settings = settings
