"""
Provider Responses

One response type per capability. Every variant carries usage, a finish
reason and provider metadata.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from promptkit.core.interfaces.values import (
    Embedding,
    EmbeddingsUsage,
    FinishReason,
    GeneratedImage,
    Message,
    Meta,
    ToolCall,
    ToolResult,
    Usage,
)


@dataclass
class Step:
    """One generation step within a multi-step text or structured call."""
    text: str
    finish_reason: FinishReason
    usage: Usage
    meta: Meta
    tool_calls: list[ToolCall] = field(default_factory=list)
    tool_results: list[ToolResult] = field(default_factory=list)


@dataclass
class TextResponse:
    """Result of a text generation call."""
    text: str
    finish_reason: FinishReason
    usage: Usage
    meta: Meta
    steps: list[Step] = field(default_factory=list)
    response_messages: list[Message] = field(default_factory=list)
    tool_calls: list[ToolCall] = field(default_factory=list)
    tool_results: list[ToolResult] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)


@dataclass
class StructuredResponse:
    """Result of a structured generation call."""
    text: str
    structured: Any
    finish_reason: FinishReason
    usage: Usage
    meta: Meta
    steps: list[Step] = field(default_factory=list)
    response_messages: list[Message] = field(default_factory=list)


@dataclass
class EmbeddingResponse:
    """Result of an embeddings call."""
    embeddings: list[Embedding]
    usage: EmbeddingsUsage
    meta: Meta
    finish_reason: FinishReason = FinishReason.STOP


@dataclass
class ImageResponse:
    """Result of an image generation call."""
    images: list[GeneratedImage]
    usage: Usage
    meta: Meta
    finish_reason: FinishReason = FinishReason.STOP

    def first_image(self) -> Optional[GeneratedImage]:
        return self.images[0] if self.images else None

    def has_images(self) -> bool:
        return bool(self.images)

    def image_count(self) -> int:
        return len(self.images)


ProviderResponse = Union[TextResponse, StructuredResponse, EmbeddingResponse, ImageResponse]
