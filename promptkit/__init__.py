"""
promptkit

A provider abstraction for language-model backends: text, structured output,
embeddings and image generation behind one interface.
"""

__version__ = "0.1.0"

from promptkit.core import (
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
    PromptKitError,
    UnsupportedProviderActionError,
)

from promptkit.adapters.factory import ProviderFactory
from promptkit.config import get_settings, Settings
from promptkit.observability import setup_logging_from_settings

__all__ = [
    # Version
    "__version__",
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
    # Errors
    "PromptKitError",
    "UnsupportedProviderActionError",
    # Factory
    "ProviderFactory",
    # Configuration
    "get_settings",
    "Settings",
    "setup_logging_from_settings",
]
