"""Configuration management for formsemantics using pydantic-settings.

Settings are read from environment variables (prefix ``FORMSEMANTICS_``)
and an optional ``.env`` file, with type validation.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SemanticSettings(BaseSettings):
    """Main configuration settings for the semantic pipeline."""

    # Versioning
    semantic_version: str = Field("1.0", description="Version written to semanticVersion")
    consumer_schema_version: str = Field(
        "1.0", description="MAJOR.MINOR of the UI dump schema this consumer understands"
    )
    allow_higher_major: bool = Field(
        False, description="Accept bundles whose schemaVersion MAJOR is newer than ours"
    )

    # Input
    vendor_metadata_keys: list[str] = Field(
        default_factory=lambda: ["devexpress"],
        description="Metadata sections probed, in order, for a vendor 'kind' string",
    )

    # Output
    json_indent: int = Field(2, ge=0, description="Indentation of semantic.json")

    # Logging
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("INFO", description="Log level when debug_mode is off")
    structured_logs: bool = Field(False, description="Render log lines as JSON")
    log_file: Path | None = Field(None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FORMSEMANTICS_",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug_mode."""
        return "DEBUG" if self.debug_mode else self.log_level.upper()


# Singleton instance
_settings: SemanticSettings | None = None


def get_settings() -> SemanticSettings:
    """Get the singleton settings instance.

    Returns:
        SemanticSettings instance
    """
    global _settings

    if _settings is None:
        _settings = SemanticSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
