"""
promptkit Core Package

This package contains the provider interface, the request/response value
types that flow through it, and the exception hierarchy.
"""

from promptkit.core.interfaces import (
    Provider,
    ProviderRequest,
    ProviderResponse,
    TextRequest,
    TextResponse,
    StructuredRequest,
    StructuredResponse,
    EmbeddingRequest,
    EmbeddingResponse,
    ImageRequest,
    ImageResponse,
    FinishReason,
    Usage,
    Meta,
)

from promptkit.core.exceptions import (
    PromptKitError,
    ErrorContext,
    ProviderError,
    UnsupportedProviderActionError,
    ProviderNotFoundError,
    ConfigurationError,
)

__all__ = [
    # Interface
    "Provider",
    "ProviderRequest",
    "ProviderResponse",
    "TextRequest",
    "TextResponse",
    "StructuredRequest",
    "StructuredResponse",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "ImageRequest",
    "ImageResponse",
    "FinishReason",
    "Usage",
    "Meta",
    # Exceptions
    "PromptKitError",
    "ErrorContext",
    "ProviderError",
    "UnsupportedProviderActionError",
    "ProviderNotFoundError",
    "ConfigurationError",
]
