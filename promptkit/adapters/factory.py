"""
Provider Factory

Creates providers based on configuration.
Enables easy swapping between providers.
"""

from typing import Any, Optional

from promptkit.config.settings import Settings, get_settings
from promptkit.core.exceptions import ConfigurationError, ErrorContext, ProviderNotFoundError
from promptkit.core.interfaces.provider import Provider
from promptkit.observability import get_logger

logger = get_logger(__name__)


class ProviderFactory:
    """
    Factory for creating providers.

    Supports dynamic provider selection based on configuration.

    Example:
        ```python
        ProviderFactory.register("echo", EchoProvider)

        # Create by name
        provider = ProviderFactory.create("echo")

        # Or from config dict
        provider = ProviderFactory.from_config({"provider": "echo", "prefix": ">"})
        ```
    """

    # Registry of available providers
    _providers: dict[str, type[Provider]] = {}

    @classmethod
    def register(cls, name: str, provider_class: type[Provider]) -> None:
        """
        Register a new provider type.

        Args:
            name: Provider name (used in config)
            provider_class: Provider subclass
        """
        cls._providers[name.lower()] = provider_class
        logger.info("Provider registered", provider=name.lower(), cls=provider_class.__name__)

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a provider type; unknown names are ignored."""
        cls._providers.pop(name.lower(), None)

    @classmethod
    def create(
        cls,
        provider: str,
        **kwargs: Any,
    ) -> Provider:
        """
        Create a provider instance.

        Args:
            provider: Registered provider name
            **kwargs: Provider-specific configuration

        Returns:
            Configured Provider instance

        Raises:
            ProviderNotFoundError: If provider not registered
            ConfigurationError: If the provider rejects the options
        """
        provider_lower = provider.lower()

        if provider_lower not in cls._providers:
            raise ProviderNotFoundError(provider, available=cls.list_providers())

        provider_class = cls._providers[provider_lower]
        try:
            instance = provider_class(**kwargs)
        except TypeError as e:
            # Usually an option from providers.options.<name> the class does not accept.
            raise ConfigurationError(
                f"Cannot create provider '{provider_lower}' with options {sorted(kwargs)}: {e}",
                config_key=f"providers.options.{provider_lower}",
                context=ErrorContext(provider=provider_lower, operation="create"),
                cause=e,
            ) from e
        logger.debug("Provider created", provider=provider_lower, options=sorted(kwargs))
        return instance

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Provider:
        """
        Create a provider from a configuration dictionary.

        Args:
            config: Configuration dictionary with 'provider' key

        Returns:
            Configured Provider instance
        """
        config = config.copy()
        provider = config.pop("provider")
        return cls.create(provider, **config)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        name: Optional[str] = None,
    ) -> Provider:
        """
        Create the configured provider.

        Args:
            settings: Settings to read; defaults to the singleton
            name: Provider name overriding providers.default
        """
        settings = settings or get_settings()
        return cls.from_config(settings.get_provider_config(name))

    @classmethod
    def list_providers(cls) -> list[str]:
        """List all registered provider names."""
        return sorted(cls._providers)
