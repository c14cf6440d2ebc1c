"""Core interfaces package."""

from promptkit.core.interfaces.provider import Provider
from promptkit.core.interfaces.requests import (
    EmbeddingRequest,
    ImageRequest,
    ProviderRequest,
    StructuredMode,
    StructuredRequest,
    TextRequest,
)
from promptkit.core.interfaces.responses import (
    EmbeddingResponse,
    ImageResponse,
    ProviderResponse,
    Step,
    StructuredResponse,
    TextResponse,
)
from promptkit.core.interfaces.values import (
    ClientRetry,
    Embedding,
    EmbeddingsUsage,
    FinishReason,
    GeneratedImage,
    Message,
    MessageRole,
    Meta,
    ToolCall,
    ToolResult,
    Usage,
)

__all__ = [
    "Provider",
    # Requests
    "TextRequest",
    "StructuredRequest",
    "StructuredMode",
    "EmbeddingRequest",
    "ImageRequest",
    "ProviderRequest",
    # Responses
    "TextResponse",
    "StructuredResponse",
    "EmbeddingResponse",
    "ImageResponse",
    "ProviderResponse",
    "Step",
    # Values
    "ClientRetry",
    "Embedding",
    "EmbeddingsUsage",
    "FinishReason",
    "GeneratedImage",
    "Message",
    "MessageRole",
    "Meta",
    "ToolCall",
    "ToolResult",
    "Usage",
]
