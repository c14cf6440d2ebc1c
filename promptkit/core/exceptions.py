"""
promptkit Exception Hierarchy

All promptkit-specific exceptions inherit from PromptKitError.

Exception Hierarchy:
    PromptKitError (base)
    ├── ProviderError (provider-related errors)
    │   ├── UnsupportedProviderActionError (capability not implemented)
    │   └── ProviderNotFoundError (provider not registered)
    └── ConfigurationError (invalid or missing settings)

Usage:
    from promptkit.core.exceptions import UnsupportedProviderActionError

    try:
        chunks = provider.stream(request)
    except UnsupportedProviderActionError:
        response = provider.text(request)
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorContext:
    """Where an error happened: the provider and the capability or step."""
    provider: Optional[str] = None
    operation: Optional[str] = None


class PromptKitError(Exception):
    """
    Base exception for all promptkit errors.

    Attributes:
        message: Human-readable error message
        context: Provider and operation, rendered as tags by ``str()``
        cause: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.cause = cause

    def __str__(self) -> str:
        parts = [self.message]
        if self.context.provider:
            parts.append(f"[provider={self.context.provider}]")
        if self.context.operation:
            parts.append(f"[op={self.context.operation}]")
        return " ".join(parts)


class ProviderError(PromptKitError):
    """Base class for provider errors."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, context, cause=cause)
        self.provider = provider


class UnsupportedProviderActionError(ProviderError):
    """
    Raised when a provider is asked for a capability it does not implement.

    Example:
        raise UnsupportedProviderActionError(
            method="FakeProvider.stream",
            provider="FakeProvider",
        )
    """

    def __init__(
        self,
        method: str,
        provider: str,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(
            f"{method} is not supported by {provider}",
            provider=provider,
            context=context,
        )
        self.method = method


class ProviderNotFoundError(ProviderError):
    """
    Raised when a requested provider is not registered.

    Example:
        raise ProviderNotFoundError("unknown", available=["fake"])
    """

    def __init__(self, name: str, available: Optional[list[str]] = None):
        self.available = sorted(available or [])
        listing = ", ".join(self.available) or "none"
        super().__init__(f"Unknown provider: {name}. Available: {listing}", provider=name)


class ConfigurationError(PromptKitError):
    """Raised when settings are invalid or incomplete."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, context, cause=cause)
        self.config_key = config_key


__all__ = [
    "PromptKitError",
    "ErrorContext",
    "ProviderError",
    "UnsupportedProviderActionError",
    "ProviderNotFoundError",
    "ConfigurationError",
]
