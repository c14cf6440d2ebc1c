"""
Settings Model

Pydantic-based settings with YAML and environment variable support.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from promptkit.config.loader import load_yaml
from promptkit.core.exceptions import ConfigurationError


class ProvidersSettings(BaseModel):
    """Provider selection and per-provider constructor options."""
    default: Optional[str] = None
    options: dict[str, dict[str, Any]] = Field(default_factory=dict)


class LoggingSettings(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class Settings(BaseSettings):
    """
    Main settings class.

    Loads configuration from:
    1. Default values
    2. YAML config file
    3. Environment variables (PROMPTKIT_ prefix)

    Example:
        ```python
        settings = get_settings()
        print(settings.providers.default)
        print(settings.logging.level)
        ```
    """

    providers: ProvidersSettings = Field(default_factory=ProvidersSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "env_prefix": "PROMPTKIT_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    @classmethod
    def from_yaml(cls, path: str) -> "Settings":
        """Load settings from YAML file."""
        return cls(**load_yaml(path))

    def get_provider_config(self, name: Optional[str] = None) -> dict[str, Any]:
        """
        Get factory configuration for a provider.

        Args:
            name: Provider name; defaults to providers.default

        Returns:
            Dictionary with a 'provider' key plus constructor options

        Raises:
            ConfigurationError: If no provider is named or configured
        """
        provider = (name or self.providers.default or "").lower()
        if not provider:
            raise ConfigurationError(
                "No provider configured; set providers.default or PROMPTKIT_PROVIDERS__DEFAULT",
                config_key="providers.default",
            )

        options = {key.lower(): value for key, value in self.providers.options.items()}
        return {"provider": provider, **options.get(provider, {})}


# Singleton settings instance
_settings: Optional[Settings] = None


def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get the settings singleton.

    Args:
        config_path: Optional path to YAML config file

    Returns:
        Settings instance
    """
    global _settings

    if _settings is None:
        if config_path and Path(config_path).exists():
            _settings = Settings.from_yaml(config_path)
        else:
            _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
