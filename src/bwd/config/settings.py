"""
Configuration for bwd using pydantic-settings.

Settings are read from the environment (``BWD_*`` variables) and an optional
``.env`` file in the working directory. Root marker names and the output
priority are constants in ``bwd.core``.
"""

from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from bwd.core.errors import ConfigurationError
from bwd.core.root_finder import MAX_ANCESTOR_DEPTH


class BwdSettings(BaseSettings):
    """Settings for the bwd command."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        alias="BWD_LOG_LEVEL",
        description="Log level for messages on stderr",
    )
    max_ancestor_depth: int = Field(
        default=MAX_ANCESTOR_DEPTH,
        ge=1,
        alias="BWD_MAX_ANCESTOR_DEPTH",
        description="Maximum number of directories inspected when looking for a project root",
    )


class SettingsProvider:
    """
    Loads BwdSettings once per process.

    Invalid values are reported as ConfigurationError so the CLI can print them
    like any other fatal error.

    Example usage:
        settings = settings_provider.get_settings()
        depth = settings.max_ancestor_depth
    """

    def __init__(self):
        self._settings: Optional[BwdSettings] = None

    def get_settings(self) -> BwdSettings:
        """
        Get the cached settings, reading the environment on first use.

        Raises:
            ConfigurationError: if a variable or ``.env`` entry fails validation
        """
        if self._settings is None:
            try:
                self._settings = BwdSettings()
            except ValidationError as e:
                problems = [
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in e.errors()
                ]
                raise ConfigurationError(problems) from e
        return self._settings

    def clear(self) -> None:
        """Forget the cached instance so the next lookup re-reads the environment."""
        self._settings = None


# Global settings provider instance
settings_provider = SettingsProvider()
