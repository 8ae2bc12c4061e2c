"""Configuration module for striker-server using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StrikerServerSettings(BaseSettings):
    """Main configuration settings for striker-server.

    All settings can be overridden via environment variables with the STRIKER_ prefix.
    For example, STRIKER_FIXTURE_PATH will override the fixture_path setting.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Store data: JSON fixture file, or None for the built-in mock fixture
    fixture_path: str | None = None

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="STRIKER_")

    @property
    def resolved_fixture_path(self) -> Path | None:
        """Get the fixture file path, or None if the built-in fixture is used."""
        if not self.fixture_path:
            return None
        return Path(self.fixture_path)
