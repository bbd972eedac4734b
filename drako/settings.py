"""
Drako Settings - Configuration management using Pydantic Settings.

Loads configuration from environment variables only; drako has no
configuration file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DrakoSettings(BaseSettings):
    """
    Drako configuration settings.

    Settings are loaded from:
    1. Environment variables (highest priority)
    2. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        env_prefix="DRAKO_",  # All drako env vars must start with DRAKO_
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR) (env: DRAKO_LOG_LEVEL)",
    )

    # Output Configuration
    no_color: bool = Field(
        default=False,
        description="Disable coloured diagnostics (env: DRAKO_NO_COLOR)",
    )

    # Shell action Configuration
    shell: str = Field(
        default="sh",
        description="Shell used to run initialization commands (env: DRAKO_SHELL)",
    )

    command_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds before an initialization command is abandoned; unset waits forever (env: DRAKO_COMMAND_TIMEOUT)",
    )

    # Pipeline Configuration
    jobs: int = Field(
        default=1,
        ge=1,
        description="Number of directories provisioned concurrently (env: DRAKO_JOBS)",
    )

    # Template Configuration
    license_author: str = Field(
        default="[YOUR NAME]",
        description="Copyright holder written into generated LICENSE files (env: DRAKO_LICENSE_AUTHOR)",
    )

    license_year: str = Field(
        default="[YEAR]",
        description="Copyright year written into generated LICENSE files (env: DRAKO_LICENSE_YEAR)",
    )


# Global settings instance
_settings: DrakoSettings | None = None


def get_settings() -> DrakoSettings:
    """
    Get the global settings instance.

    Creates the settings instance on first call, then returns cached instance.

    Returns:
        DrakoSettings instance
    """
    global _settings
    if _settings is None:
        _settings = DrakoSettings()
    return _settings


def reload_settings() -> DrakoSettings:
    """
    Reload settings from the environment.

    Useful for testing or when environment variables change.

    Returns:
        Fresh DrakoSettings instance
    """
    global _settings
    _settings = DrakoSettings()
    return _settings
